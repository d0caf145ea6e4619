# -*- coding: utf-8 -*-

import sys

from .aggregate import aggregate
from .config import NewsConfig
from .errors import NewsBuildError
from .publish import publish


def run(config: NewsConfig = None, transport=None, now=None) -> str:
    config = config or NewsConfig.from_env()
    result = aggregate(config, transport=transport, now=now)
    out_file = publish(result, config.out_file)
    print(f"OK -> {out_file} ({len(result.items)} items)")
    return out_file


def main() -> int:
    try:
        run()
    except NewsBuildError as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 1
    return 0
