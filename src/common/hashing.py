"""Hashing utilities."""

import hashlib


def generate_article_id(title: str, url: str, published_at: str) -> str:
    """Generate a stable article ID from title, URL and publish timestamp."""
    return hashlib.sha256(f"{title}|{url}|{published_at}".encode()).hexdigest()[:16]
