"""Post-fetch article filters applied before clustering."""

import logging
from datetime import datetime, timezone
from typing import Optional

from common.models import Article
from fetch_articles.provider import TIME_WINDOWS
from resolve_locales.regions import get_province_name

logger = logging.getLogger(__name__)


def matches_province(article: Article, province: str) -> bool:
    """Explicit province tag, or the code or display name in title/description."""
    if article.province and article.province.lower() == province:
        return True
    text = f"{article.title} {article.description or ''}".lower()
    if province in text:
        return True
    name = get_province_name(province)
    return bool(name) and name.lower() in text


def filter_by_province(articles: list[Article], province: Optional[str]) -> list[Article]:
    """Keep articles that mention the province.

    Province codes are only accepted by the filter parser for their owning
    country, so a set province always belongs to the fetched jurisdiction
    or, with no country given, to one of the supported ones.
    """
    if not province:
        return articles
    province = province.lower()
    kept = [article for article in articles if matches_province(article, province)]
    logger.info("Province filter %s kept %d of %d articles", province, len(kept), len(articles))
    return kept


def filter_by_time_window(
    articles: list[Article],
    time: Optional[str],
    now: Optional[datetime] = None,
) -> list[Article]:
    """Drop articles published before the requested window."""
    if not time or time not in TIME_WINDOWS:
        return articles
    cutoff = (now or datetime.now(timezone.utc)) - TIME_WINDOWS[time]
    kept = [article for article in articles if article.published_at >= cutoff]
    if len(kept) != len(articles):
        logger.info("Time window %s dropped %d articles", time, len(articles) - len(kept))
    return kept
