"""Convert raw upstream article records into canonical Articles."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from common.datetime import parse_datetime
from common.hashing import generate_article_id
from common.models import Article
from normalize_articles.tags import guess_tags

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "No title"
UNKNOWN_SOURCE = "Unknown"


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _raw(value: Any) -> str:
    return "" if value is None else str(value)


def _source_name(raw: dict[str, Any]) -> str:
    source = raw.get("source")
    if isinstance(source, dict):
        return _text(source.get("name")) or UNKNOWN_SOURCE
    return _text(source) or UNKNOWN_SOURCE


def _published_at(value: Any, now: datetime) -> datetime:
    if not value:
        return now
    try:
        return parse_datetime(value)
    except (TypeError, ValueError, AttributeError):
        logger.warning("Could not parse publish date %r, using current time", value)
        return now


def normalize_article(
    raw: dict[str, Any],
    now: Optional[datetime] = None,
    jurisdiction: Optional[str] = None,
    category: Optional[str] = None,
) -> Article:
    """Map one raw upstream record to an Article. Never raises on bad field values.

    The id is hashed from the raw title, url and publish timestamp so the
    same story hashes identically across fetches.
    """
    now = now or datetime.now(timezone.utc)
    raw_published = raw.get("publishedAt", raw.get("published_at"))

    title = _text(raw.get("title")) or PLACEHOLDER_TITLE
    category = _text(raw.get("category")) or category

    return Article(
        id=generate_article_id(_raw(raw.get("title")), _raw(raw.get("url")), _raw(raw_published)),
        title=title,
        url=_text(raw.get("url")) or "",
        source=_source_name(raw),
        published_at=_published_at(raw_published, now),
        description=_text(raw.get("description")),
        image_url=_text(raw.get("urlToImage") or raw.get("imageUrl") or raw.get("image")),
        country=_text(raw.get("country")) or jurisdiction,
        category=category,
        province=_text(raw.get("province")),
        tags=tuple(guess_tags(title, category)),
    )


def normalize_articles(
    raw_articles: list[Any],
    jurisdiction: Optional[str] = None,
    category: Optional[str] = None,
) -> list[Article]:
    """Normalize a batch fetched for one jurisdiction, skipping non-record entries."""
    now = datetime.now(timezone.utc)
    results = []
    for raw in raw_articles:
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object article record: %r", raw)
            continue
        results.append(normalize_article(raw, now=now, jurisdiction=jurisdiction, category=category))
    return results
