"""Data models shared across pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class Article:
    """One upstream story in canonical shape."""
    id: str
    title: str
    url: str
    source: str
    published_at: datetime
    description: Optional[str] = None
    image_url: Optional[str] = None
    country: Optional[str] = None
    category: Optional[str] = None
    province: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StoryCluster:
    """Two or more articles judged to cover the same event, newest first."""
    id: str
    title: str
    articles: tuple[Article, ...]
    top_source: str
    published_at: datetime

    def __post_init__(self) -> None:
        if len(self.articles) < 2:
            raise ValueError("A story cluster needs at least two articles")


FeedItem = Union[Article, StoryCluster]


@dataclass(frozen=True)
class Filters:
    """Validated, normalized request filters."""
    q: Optional[str] = None
    category: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    province: Optional[str] = None
    time: Optional[str] = None
    sort: str = "publishedAt"


def is_cluster(item: FeedItem) -> bool:
    return hasattr(item, "articles")


def effective_time(item: FeedItem) -> datetime:
    """Recency used for sorting; a cluster's is its newest member's."""
    return item.published_at
