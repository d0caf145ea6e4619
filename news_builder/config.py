# -*- coding: utf-8 -*-

import os
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import quote

from .errors import ConfigError
from .models import FeedSource

# =========================
# CONFIG
# =========================
OUT_FILE = "./assets/news.json"
MAX_ITEMS = 12
HOURS = 168  # 7 days, so the page is almost never empty
FETCH_TIMEOUT = 30.0
EXTRACTOR = "regex"

DEFAULT_SOURCE = "Google News"

USER_AGENT = "ElitePRO-News-Bot/1.0"
ACCEPT = "application/rss+xml, application/xml;q=0.9,*/*;q=0.8"

MIRROR_PREFIX = "https://r.jina.ai/http://"

GOOGLE_NEWS_SEARCH = "https://news.google.com/rss/search?q="
GOOGLE_NEWS_LOCALE = "&hl=es&gl=ES&ceid=ES:es"


def google_news_url(query: str) -> str:
    # same escaping as encodeURIComponent
    return GOOGLE_NEWS_SEARCH + quote(query, safe="!~*'()") + GOOGLE_NEWS_LOCALE


# =========================
# SOURCES
# =========================
FEEDS = (
    FeedSource(
        category="Socorrismo",
        url=google_news_url(
            'socorrismo OR "salvamento acuático" OR "rescate acuático" OR lifeguard OR "seguridad acuática"'
        ),
    ),
    FeedSource(
        category="Deporte",
        url=google_news_url('deporte OR natación OR triatlón OR "aguas abiertas"'),
    ),
)


def _env_number(name: str, default, cast=int):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0:
        raise ConfigError(f"{name} must be greater than 0, got {raw!r}")
    return value


@dataclass(frozen=True)
class NewsConfig:
    feeds: Tuple[FeedSource, ...] = FEEDS
    out_file: str = OUT_FILE
    max_items: int = MAX_ITEMS
    hours_window: int = HOURS
    timeout: float = FETCH_TIMEOUT
    extractor: str = EXTRACTOR

    @classmethod
    def from_env(cls) -> "NewsConfig":
        return cls(
            out_file=os.getenv("NEWS_OUT_FILE") or OUT_FILE,
            max_items=_env_number("NEWS_MAX_ITEMS", MAX_ITEMS),
            hours_window=_env_number("NEWS_HOURS_WINDOW", HOURS),
            timeout=_env_number("NEWS_FETCH_TIMEOUT", FETCH_TIMEOUT, float),
            extractor=(os.getenv("NEWS_EXTRACTOR") or EXTRACTOR).strip().lower(),
        )
