"""Request-scoped aggregation pipeline: resolve, fetch, normalize, dedupe, filter, cluster, rank."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from cluster_articles.cluster_articles import cluster_articles
from common.config import AppConfig
from common.models import Article, FeedItem, Filters
from fetch_articles.fetch_articles import fetch_all
from normalize_articles.deduplicate import deduplicate_articles
from normalize_articles.normalize import normalize_articles
from rank_articles.filters import filter_by_province, filter_by_time_window
from rank_articles.rank import rank_items
from resolve_locales.resolve_locales import resolve_jurisdictions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewsResult:
    filters: Filters
    items: list[FeedItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)


async def aggregate_news(filters: Filters, config: AppConfig) -> NewsResult:
    """Run the full pipeline for one request."""
    jurisdictions = resolve_jurisdictions(filters.country, filters.region)
    logger.info("Aggregating news for %s", ", ".join(jurisdictions) or "global")

    outcomes = await fetch_all(jurisdictions, filters, config)

    articles: list[Article] = []
    for outcome in outcomes:
        articles.extend(normalize_articles(outcome.articles, outcome.jurisdiction, outcome.category))
    logger.info("Normalized %d articles", len(articles))

    articles = deduplicate_articles(articles)
    articles = filter_by_province(articles, filters.province)
    articles = filter_by_time_window(articles, filters.time)

    items = rank_items(cluster_articles(articles), filters.sort)
    logger.info("Returning %d feed items", len(items))
    return NewsResult(filters=filters, items=items)


def aggregate_news_sync(filters: Filters, config: AppConfig) -> NewsResult:
    """Synchronous wrapper for aggregate_news()."""
    return asyncio.run(aggregate_news(filters, config))
