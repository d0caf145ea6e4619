# -*- coding: utf-8 -*-
"""
Tolerant field extraction from raw feed text.

Feeds are not guaranteed to be well-formed, so the default extractor uses
pattern matching instead of an XML parser: a broken feed yields empty
fields, never an exception. Both extractors expose the same two methods,
``item_blocks(document)`` and ``field(tag, entry)``.
"""

import re

import feedparser

from .errors import ConfigError

ITEM_RE = re.compile(r"<item>([\s\S]*?)</item>", re.I)

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"


def strip_cdata(s: str) -> str:
    return (s or "").replace(CDATA_OPEN, "", 1).replace(CDATA_CLOSE, "", 1).strip()


def _tag_re(tag: str):
    tag = re.escape(tag)
    return re.compile(rf"<{tag}[^>]*>([\s\S]*?)</{tag}>", re.I)


def extract_field(tag: str, text: str) -> str:
    m = _tag_re(tag).search(text or "")
    return strip_cdata(m.group(1)) if m else ""


def extract_item_blocks(document: str):
    return ITEM_RE.findall(document or "")


class RegexExtractor:
    name = "regex"

    def item_blocks(self, document: str):
        return extract_item_blocks(document)

    def field(self, tag: str, entry: str) -> str:
        return extract_field(tag, entry)


class FeedparserExtractor:
    """Same interface backed by feedparser, for feeds the patterns can't handle."""

    name = "feedparser"

    # RSS tag -> feedparser entry key
    KEYS = {
        "pubDate": "published",
    }

    def item_blocks(self, document: str):
        parsed = feedparser.parse(document or "")
        return list(getattr(parsed, "entries", []) or [])

    def field(self, tag: str, entry) -> str:
        value = entry.get(self.KEYS.get(tag, tag), "")
        if isinstance(value, dict):
            # <source url="...">Name</source> comes back as {"href": ..., "title": ...}
            value = value.get("title", "")
        return (value or "").strip() if isinstance(value, str) else ""


EXTRACTORS = {
    RegexExtractor.name: RegexExtractor,
    FeedparserExtractor.name: FeedparserExtractor,
}


def get_extractor(name: str = "regex"):
    try:
        return EXTRACTORS[name]()
    except KeyError:
        raise ConfigError(f"unknown extractor {name!r}, expected one of {sorted(EXTRACTORS)}") from None
