# -*- coding: utf-8 -*-


class NewsBuildError(Exception):
    """Fatal error that aborts the run with a non-zero exit code."""


class FetchError(NewsBuildError):
    def __init__(self, url: str, status=None, excerpt: str = ""):
        self.url = url
        self.status = status
        self.excerpt = excerpt
        msg = f"Fetch failed {status} for {url}"
        if excerpt:
            msg += f"\n{excerpt}"
        super().__init__(msg)


class EmptyResultError(NewsBuildError):
    def __init__(self, hours_window: int):
        self.hours_window = hours_window
        super().__init__(
            f"news.json would be generated WITHOUT news (items = 0, window {hours_window}h). "
            "Check feeds/keywords."
        )


class ConfigError(NewsBuildError):
    """Invalid NEWS_* setting."""
