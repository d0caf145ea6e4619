# -*- coding: utf-8 -*-

import requests

from .config import ACCEPT, FETCH_TIMEOUT, MIRROR_PREFIX, USER_AGENT
from .errors import FetchError
from .extract import RegexExtractor

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": ACCEPT,
}

EXCERPT_CHARS = 200


def mirror_url(url: str) -> str:
    """Rewrite ``url`` through the r.jina.ai text mirror."""
    for scheme in ("https://", "http://"):
        if url.startswith(scheme):
            return MIRROR_PREFIX + url[len(scheme):]
    return MIRROR_PREFIX + url


class Transport:
    def __init__(self, session=None, timeout: float = FETCH_TIMEOUT, extractor=None):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.extractor = extractor or RegexExtractor()

    def fetch(self, url: str) -> str:
        try:
            res = self.session.get(url, headers=HEADERS, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as ex:
            raise FetchError(url, None, str(ex)[:EXCERPT_CHARS]) from ex

        text = res.text
        if not res.ok:
            raise FetchError(url, res.status_code, text[:EXCERPT_CHARS])
        return text

    def fetch_with_fallback(self, url: str):
        """
        Returns (text, via). Some front-ends answer unknown clients with a
        consent page instead of the feed; when the direct answer has no
        items we try once more through the mirror.
        """
        # 1) direct
        direct = self.fetch(url)
        if len(self.extractor.item_blocks(direct)) > 0:
            return direct, "direct"

        # 2) mirror
        return self.fetch(mirror_url(url)), "jina"
