"""Serialization utilities."""

from __future__ import annotations

from typing import Any

from common.datetime import to_iso
from common.models import Article, FeedItem, is_cluster


def serialize_article(article: Article) -> dict[str, Any]:
    """Serialize an article to its wire shape, dropping absent optionals."""
    data = {
        "id": article.id,
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "imageUrl": article.image_url,
        "source": article.source,
        "publishedAt": to_iso(article.published_at),
        "country": article.country,
        "category": article.category,
        "province": article.province,
        "tags": list(article.tags),
    }
    return {key: value for key, value in data.items() if value is not None}


def serialize_item(item: FeedItem) -> dict[str, Any]:
    """Serialize an article or story cluster; clusters carry an articles list."""
    if not is_cluster(item):
        return serialize_article(item)
    return {
        "id": item.id,
        "title": item.title,
        "articles": [serialize_article(article) for article in item.articles],
        "topSource": item.top_source,
        "publishedAt": to_iso(item.published_at),
    }
