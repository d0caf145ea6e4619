# -*- coding: utf-8 -*-

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class FeedSource:
    category: str
    url: str


@dataclass
class NewsItem:
    category: str
    title: str
    link: str
    source: str
    pub_date: str
    ts: int  # epoch ms, never serialized

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "title": self.title,
            "link": self.link,
            "source": self.source,
            "pubDate": self.pub_date,
        }


@dataclass
class AggregateResult:
    updated_at: str
    hours_window: int
    items: List[NewsItem] = field(default_factory=list)
