"""Validate raw query parameters into immutable Filters."""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from typing import Mapping, Optional
from urllib.parse import urlencode

from common.errors import ValidationError
from common.models import Filters
from rank_articles.rank import SORT_OPTIONS, SORT_PUBLISHED_AT
from resolve_locales.detect_location import detect_location_in_query
from resolve_locales.regions import (
    REGION_TO_COUNTRIES,
    get_all_countries,
    get_province_country,
)

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 200
CATEGORIES = ("business", "entertainment", "general", "health", "science", "sports", "technology")
TIME_OPTIONS = ("24h", "7d", "30d")
FILTER_KEYS = ("q", "category", "country", "region", "province", "time", "sort")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _choice(name: str, value: Optional[str], options) -> Optional[str]:
    if value is None:
        return None
    if value not in options:
        raise ValidationError(f"Invalid {name}: must be one of {', '.join(options)}")
    return value


def _parse_query(value: Optional[str]) -> Optional[str]:
    q = _clean(value)
    if q is not None and len(q) > MAX_QUERY_LENGTH:
        raise ValidationError(f"Query must be at most {MAX_QUERY_LENGTH} characters")
    return q


def _parse_region(value: Optional[str]) -> Optional[str]:
    region = _clean(value)
    if region is None:
        return None
    return _choice("region", region.lower().replace("-", "_"), tuple(REGION_TO_COUNTRIES))


def _parse_province(value: Optional[str], country: Optional[str]) -> Optional[str]:
    province = _clean(value)
    if province is None:
        return None
    province = province.lower()
    owner = get_province_country(province)
    if owner is None or (country and owner != country):
        scope = f"country {country}" if country else "any supported country"
        raise ValidationError(f"Invalid province: {province} is not a province of {scope}")
    return province


def parse_filters(params: Mapping[str, Optional[str]], detect_locations: bool = False) -> Filters:
    """Build Filters from raw request values.

    Raises:
        ValidationError: for oversized queries or values outside the allowed sets
    """
    q = _parse_query(params.get("q"))
    category = _clean(params.get("category"))
    category = _choice("category", category.lower() if category else None, CATEGORIES)

    country = _clean(params.get("country"))
    if country is not None:
        country = country.lower()
        if country not in get_all_countries():
            raise ValidationError(f"Invalid country: {country} is not supported")

    region = _parse_region(params.get("region"))
    province = _parse_province(params.get("province"), country)
    time = _choice("time", _clean(params.get("time")), TIME_OPTIONS)
    sort = _choice("sort", _clean(params.get("sort")), SORT_OPTIONS) or SORT_PUBLISHED_AT

    filters = Filters(
        q=q,
        category=category,
        country=country,
        region=region,
        province=province,
        time=time,
        sort=sort,
    )
    if detect_locations:
        filters = apply_detected_location(filters)
    return filters


def apply_detected_location(filters: Filters) -> Filters:
    """Move a country/province named in the query into the structured filters.

    Only applies when the caller gave neither a country nor a region.
    """
    if not filters.q or filters.country or filters.region:
        return filters
    detected = detect_location_in_query(filters.q)
    if not detected.country and not detected.province:
        return filters
    logger.info("Detected location in query: country=%s province=%s", detected.country, detected.province)
    return replace(
        filters,
        q=detected.remaining_query or None,
        country=detected.country,
        province=filters.province or detected.province,
    )


def filters_to_dict(filters: Filters) -> dict[str, str]:
    """Echo filters with absent values dropped."""
    return {key: value for key, value in asdict(filters).items() if value is not None}


def build_query_string(filters: Filters) -> str:
    """Render filters back to a URL query string in canonical key order."""
    data = filters_to_dict(filters)
    return urlencode([(key, data[key]) for key in FILTER_KEYS if key in data])
