"""Tests for normalize_articles.deduplicate module."""

from datetime import datetime, timezone

from common.models import Article
from normalize_articles.deduplicate import deduplicate_articles


def _article(article_id: str, country: str) -> Article:
    return Article(
        id=article_id,
        title=f"Story {article_id}",
        url=f"https://example.com/{article_id}",
        source="Wire",
        published_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        country=country,
    )


class TestDeduplicateArticles:
    def test_keeps_first_occurrence(self) -> None:
        articles = [_article("a", "za"), _article("b", "za"), _article("a", "ng")]
        result = deduplicate_articles(articles)
        assert [a.id for a in result] == ["a", "b"]
        assert result[0].country == "za"

    def test_ids_unique(self) -> None:
        articles = [_article(str(i % 3), "za") for i in range(10)]
        result = deduplicate_articles(articles)
        assert len({a.id for a in result}) == len(result) == 3

    def test_preserves_order(self) -> None:
        articles = [_article("c", "za"), _article("a", "za"), _article("b", "za")]
        assert [a.id for a in deduplicate_articles(articles)] == ["c", "a", "b"]

    def test_empty(self) -> None:
        assert deduplicate_articles([]) == []
