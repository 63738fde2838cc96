"""Data models for the fetch_articles stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from common.errors import NewsError


@dataclass(frozen=True)
class UpstreamRequest:
    """One fully-resolved upstream call."""
    mode: str  # "search" or "headlines"
    endpoint: str
    params: dict[str, Any]
    jurisdiction: Optional[str] = None
    category: Optional[str] = None


@dataclass
class FetchOutcome:
    """Settled result of one jurisdiction's fetch; exactly one of articles/error is meaningful."""
    jurisdiction: Optional[str]
    articles: list[dict[str, Any]] = field(default_factory=list)
    category: Optional[str] = None
    error: Optional[NewsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
