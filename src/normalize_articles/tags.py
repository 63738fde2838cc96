"""Guess topical tags from a headline."""

from typing import Optional

TAG_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Space", ("nasa", "space", "astron", "telescope")),
    ("Economy", ("inflation", "econom", "market", "stock", "dollar")),
    ("AI", (" ai ", "openai", "artificial intelligence", "chatgpt", "machine learning")),
    ("Policy", ("election", "government", "president", "senate", "congress", "policy")),
    ("Sports", ("nba", "football", "soccer", "sport", "rugby", "cricket")),
    ("Health", ("health", "vaccine", "covid", "medical", "doctor")),
    ("Tech", ("tech", "apple", "google", "microsoft", "iphone")),
    ("Business", ("business", "company", "ceo", "merger", "acquisition")),
)

CATEGORY_TAGS = {
    "technology": "Tech",
    "business": "Business",
    "health": "Health",
    "science": "Science",
    "sports": "Sports",
    "entertainment": "Entertainment",
    "general": "News",
}

MAX_TAGS = 2


def guess_tags(title: str, category: Optional[str] = None) -> list[str]:
    """Return up to two tags from headline keywords, falling back to the category."""
    # Padding lets short keywords like "ai" match as whole words at the edges.
    text = f" {title.lower()} "
    tags = [tag for tag, keywords in TAG_KEYWORDS if any(k in text for k in keywords)]
    if not tags and category in CATEGORY_TAGS:
        tags.append(CATEGORY_TAGS[category])
    return tags[:MAX_TAGS]
