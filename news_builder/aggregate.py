# -*- coding: utf-8 -*-

from datetime import datetime, timezone

from .config import HOURS, MAX_ITEMS, NewsConfig
from .extract import get_extractor
from .models import AggregateResult
from .normalize import normalize_item
from .transport import Transport


def as_utc(dt: datetime) -> datetime:
    # naive datetimes are taken as UTC, same as feed dates
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def iso_utc(dt: datetime) -> str:
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_ms(dt: datetime) -> int:
    return int(as_utc(dt).timestamp() * 1000)


# =========================
# FETCH + NORMALIZE
# =========================
def collect(feeds, transport, extractor):
    """All usable items of every feed, in feed order then document order."""
    all_items = []
    for feed in feeds:
        # a FetchError here aborts the whole run
        text, via = transport.fetch_with_fallback(feed.url)
        entries = extractor.item_blocks(text)

        print(f'Feed "{feed.category}" via {via} -> items found: {len(entries)}')

        for entry in entries:
            item = normalize_item(entry, feed.category, extractor)
            if item is not None:
                all_items.append(item)
    return all_items


# =========================
# WINDOW + SORT + DEDUPE
# =========================
def select_items(items, now_ms: int, hours_window: int = HOURS, max_items: int = MAX_ITEMS):
    max_age = hours_window * 3600 * 1000
    fresh = [n for n in items if now_ms - n.ts <= max_age]

    # stable, so equal ts keep feed/item order
    fresh.sort(key=lambda n: n.ts, reverse=True)

    seen = set()
    uniq = []
    for n in fresh:
        if len(uniq) >= max_items:
            break
        if n.link in seen:
            continue
        seen.add(n.link)
        uniq.append(n)
    return uniq


def aggregate(config: NewsConfig = None, transport=None, now: datetime = None) -> AggregateResult:
    config = config or NewsConfig()
    now = now or datetime.now(timezone.utc)
    extractor = get_extractor(config.extractor)
    transport = transport or Transport(timeout=config.timeout, extractor=extractor)

    items = collect(config.feeds, transport, extractor)
    picked = select_items(items, epoch_ms(now), config.hours_window, config.max_items)

    return AggregateResult(
        updated_at=iso_utc(now),
        hours_window=config.hours_window,
        items=picked,
    )
