# -*- coding: utf-8 -*-

from dateutil import parser as date_parser
from dateutil import tz

from .config import DEFAULT_SOURCE
from .extract import RegexExtractor
from .models import NewsItem

_DEFAULT_EXTRACTOR = RegexExtractor()

# zone names RSS dates may carry; dateutil only knows UTC/GMT on its own
RFC822_ZONES = {
    "UT": 0,
    "GMT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def to_timestamp(pub_date: str) -> int:
    """Epoch milliseconds for a feed date, 0 when it can't be parsed."""
    if not (pub_date or "").strip():
        return 0
    try:
        dt = date_parser.parse(pub_date, tzinfos=RFC822_ZONES)
    except (ValueError, OverflowError):
        return 0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    return int(dt.timestamp() * 1000)


def normalize_item(entry, category: str, extractor=None):
    ex = extractor or _DEFAULT_EXTRACTOR
    title = ex.field("title", entry)
    link = ex.field("link", entry)
    pub_date = ex.field("pubDate", entry)
    source = ex.field("source", entry) or DEFAULT_SOURCE

    ts = to_timestamp(pub_date)
    if not title or not link or ts <= 0:
        return None

    return NewsItem(
        category=category,
        title=title,
        link=link,
        source=source,
        pub_date=pub_date,
        ts=ts,
    )
