"""Tests for resolve_locales.detect_location module."""

from resolve_locales.detect_location import detect_location_in_query


class TestDetectLocationInQuery:
    def test_detects_country_and_strips_it(self) -> None:
        result = detect_location_in_query("elections in South Africa")
        assert result.country == "za"
        assert result.province is None
        assert result.remaining_query == "elections in"

    def test_alias(self) -> None:
        result = detect_location_in_query("UK inflation")
        assert result.country == "gb"
        assert result.remaining_query == "inflation"

    def test_country_and_province(self) -> None:
        result = detect_location_in_query("Gauteng, South Africa water outage")
        assert result.country == "za"
        assert result.province == "za-gp"
        assert result.remaining_query == "water outage"

    def test_province_without_country(self) -> None:
        result = detect_location_in_query("wildfires California")
        assert result.country is None
        assert result.province == "us-ca"
        assert result.remaining_query == "wildfires"

    def test_no_location(self) -> None:
        result = detect_location_in_query("interest rates")
        assert result.country is None
        assert result.province is None
        assert result.remaining_query == "interest rates"

    def test_word_boundaries(self) -> None:
        result = detect_location_in_query("ukraine talks")
        assert result.country is None

    def test_empty_query(self) -> None:
        result = detect_location_in_query("  ")
        assert result.country is None
        assert result.remaining_query == "  "
