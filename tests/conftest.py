from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest
import requests

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def pub_date(hours_ago: float) -> str:
    return format_datetime(NOW - timedelta(hours=hours_ago), usegmt=True)


def rss_item(title="", link="", pub="", source=None, cdata=False) -> str:
    parts = []
    if title:
        parts.append(f"<title><![CDATA[{title}]]></title>" if cdata else f"<title>{title}</title>")
    if link:
        parts.append(f"<link>{link}</link>")
    if pub:
        parts.append(f"<pubDate>{pub}</pubDate>")
    if source:
        parts.append(f'<source url="https://example.org">{source}</source>')
    return "<item>" + "".join(parts) + "</item>"


def rss(*items) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Google News</title>'
        + "".join(items)
        + "</channel></rss>"
    )


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Stands in for requests.Session; unknown URLs answer 404."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            return FakeResponse(404, "not found")
        if isinstance(page, tuple):
            return FakeResponse(*page)
        return FakeResponse(200, page)

    @property
    def urls(self):
        return [u for u, _ in self.calls]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
