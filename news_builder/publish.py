# -*- coding: utf-8 -*-

import json
import os

from .config import OUT_FILE
from .errors import EmptyResultError


def render_payload(result) -> dict:
    return {
        "updatedAt": result.updated_at,
        "hoursWindow": result.hours_window,
        "items": [n.to_dict() for n in result.items],
    }


def publish(result, out_file: str = OUT_FILE) -> str:
    # an empty run must fail loudly and leave the previous file alone
    if not result.items:
        raise EmptyResultError(result.hours_window)

    payload = render_payload(result)

    out_dir = os.path.dirname(out_file)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(out_file, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

    return out_file
