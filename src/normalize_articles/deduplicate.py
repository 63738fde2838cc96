"""Collapse articles that share an id."""

import logging

from common.models import Article

logger = logging.getLogger(__name__)


def deduplicate_articles(articles: list[Article]) -> list[Article]:
    """Keep the first occurrence of each article id, preserving order."""
    seen: set[str] = set()
    unique: list[Article] = []
    for article in articles:
        if article.id in seen:
            continue
        seen.add(article.id)
        unique.append(article)
    logger.info("Deduplicated articles: %d -> %d", len(articles), len(unique))
    return unique
