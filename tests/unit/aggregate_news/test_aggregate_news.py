"""Tests for aggregate_news.aggregate_news module."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from common.config import AppConfig, UpstreamConfig
from common.errors import ConfigurationError, UpstreamError, UpstreamRateLimited
from common.models import Article, Filters, StoryCluster, is_cluster
from aggregate_news.aggregate_news import aggregate_news_sync


def _config(api_key: str | None = "test-key") -> AppConfig:
    return AppConfig(upstream=UpstreamConfig(api_key=api_key))


def _record(title: str, slug: str, published_at: str = "2024-05-01T10:00:00Z",
            source: str = "Wire", description: str | None = None) -> dict:
    return {
        "title": title,
        "url": f"https://example.com/{slug}",
        "publishedAt": published_at,
        "source": {"id": None, "name": source},
        "description": description,
    }


def _fake_upstream(responses: dict):
    """Answer by (country, category); values are record lists or exceptions."""
    def fake(request, config):
        key = (request.params.get("country"), request.params.get("category"))
        value = responses.get(key, [])
        if isinstance(value, Exception):
            raise value
        return value
    return fake


@patch("fetch_articles.fetch_articles.fetch_upstream")
class TestAggregateNews:
    def test_category_fallback_and_clustering(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "science"): [],
            ("za", "general"): [
                _record("Fed raises rates again", "a", "2024-05-01T10:00:00Z", "Reuters"),
                _record("Federal Reserve raises interest rates", "b", "2024-05-01T11:00:00Z", "AP"),
                _record("Local bakery wins national award", "c", "2024-05-01T09:00:00Z"),
            ],
        })
        result = aggregate_news_sync(Filters(country="za", category="science"), _config())

        assert result.total == 2
        cluster, singleton = result.items
        assert isinstance(cluster, StoryCluster)
        assert cluster.title == "Federal Reserve raises interest rates"
        assert cluster.top_source == "AP"
        assert [a.source for a in cluster.articles] == ["AP", "Reuters"]
        assert isinstance(singleton, Article)
        assert singleton.country == "za"
        assert singleton.category == "general"

    def test_region_fans_out_to_every_country(self, mock_fetch) -> None:
        mock_fetch.return_value = []
        aggregate_news_sync(Filters(region="africa", category="general"), _config())

        countries = sorted(call[0][0].params["country"] for call in mock_fetch.call_args_list)
        assert countries == ["eg", "gh", "ke", "ng", "za"]

    def test_country_overrides_region(self, mock_fetch) -> None:
        mock_fetch.return_value = []
        aggregate_news_sync(Filters(country="za", region="europe", category="general"), _config())

        assert mock_fetch.call_count == 1
        assert mock_fetch.call_args[0][0].params["country"] == "za"

    def test_no_location_is_one_global_call(self, mock_fetch) -> None:
        mock_fetch.return_value = []
        aggregate_news_sync(Filters(q="elections"), _config())

        assert mock_fetch.call_count == 1
        request = mock_fetch.call_args[0][0]
        assert request.jurisdiction is None
        assert request.params["q"] == "elections"

    def test_duplicates_across_jurisdictions_collapse(self, mock_fetch) -> None:
        shared = _record("Continental summit opens", "summit")
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [shared],
            ("ng", "general"): [shared],
        })
        result = aggregate_news_sync(Filters(region="africa", category="general"), _config())

        assert result.total == 1
        assert result.items[0].country == "za"

    def test_province_filter_runs_before_clustering(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [
                _record("Gauteng taxi strike leaves commuters stranded", "a"),
                _record("Taxi strike leaves commuters stranded", "b"),
            ],
        })
        result = aggregate_news_sync(Filters(country="za", province="za-gp"), _config())

        assert result.total == 1
        assert not is_cluster(result.items[0])
        assert result.items[0].title == "Gauteng taxi strike leaves commuters stranded"

    def test_time_window_drops_old_articles(self, mock_fetch) -> None:
        now = datetime.now(timezone.utc)
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [
                _record("Fresh story", "fresh", (now - timedelta(hours=2)).isoformat()),
                _record("Stale story", "stale", (now - timedelta(days=10)).isoformat()),
            ],
        })
        result = aggregate_news_sync(Filters(country="za", time="24h"), _config())

        assert [item.title for item in result.items] == ["Fresh story"]

    def test_sorted_newest_first(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [
                _record("Earthquake strikes coast", "a", "2024-05-01T08:00:00Z"),
                _record("Local bakery wins national award", "b", "2024-05-01T12:00:00Z"),
            ],
        })
        result = aggregate_news_sync(Filters(country="za"), _config())
        assert [item.title for item in result.items] == [
            "Local bakery wins national award",
            "Earthquake strikes coast",
        ]

    def test_relevancy_keeps_newest_first_within_groups(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [
                _record("Old bakery wins national award", "a", "2024-05-01T08:00:00Z"),
                _record("Earthquake strikes northern coast", "b", "2024-05-01T12:00:00Z"),
            ],
        })
        result = aggregate_news_sync(Filters(country="za", sort="relevancy"), _config())
        assert [item.title for item in result.items] == [
            "Earthquake strikes northern coast",
            "Old bakery wins national award",
        ]

    def test_empty_category_with_failed_retry_is_empty_feed(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "science"): [],
            ("za", "general"): UpstreamRateLimited("slow"),
        })
        result = aggregate_news_sync(Filters(country="za", category="science"), _config())
        assert result.items == []

    def test_same_input_same_output(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [
                _record("Fed raises rates again", "a", "2024-05-01T10:00:00Z"),
                _record("Federal Reserve raises interest rates", "b", "2024-05-01T11:00:00Z"),
                _record("Local bakery wins national award", "c"),
            ],
        })
        first = aggregate_news_sync(Filters(country="za"), _config())
        second = aggregate_news_sync(Filters(country="za"), _config())
        assert first.items == second.items

    def test_partial_failure_keeps_successes(self, mock_fetch) -> None:
        mock_fetch.side_effect = _fake_upstream({
            ("za", "general"): [_record("Continental summit opens", "summit")],
            ("ng", "general"): UpstreamError("boom"),
        })
        result = aggregate_news_sync(Filters(region="africa", category="general"), _config())
        assert result.total == 1

    def test_total_failure_is_empty_success(self, mock_fetch) -> None:
        mock_fetch.side_effect = UpstreamError("boom")
        result = aggregate_news_sync(Filters(country="za"), _config())
        assert result.items == []

    def test_all_rate_limited_raises(self, mock_fetch) -> None:
        mock_fetch.side_effect = UpstreamRateLimited("Rate limit exceeded. Please try again later.")
        with pytest.raises(UpstreamRateLimited):
            aggregate_news_sync(Filters(region="oceania"), _config())

    def test_missing_key_aborts_before_fetching(self, mock_fetch) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            aggregate_news_sync(Filters(country="za"), _config(api_key=None))
        assert exc_info.value.reason == "missing"
        mock_fetch.assert_not_called()
