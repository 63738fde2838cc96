"""Map country/region filters onto the jurisdictions to fetch."""

from __future__ import annotations

import logging

from resolve_locales.regions import get_countries_for_region

logger = logging.getLogger(__name__)

MAX_JURISDICTIONS = 10


def resolve_jurisdictions(country: str | None = None, region: str | None = None) -> list[str]:
    """Resolve the ordered, duplicate-free list of jurisdiction codes to query.

    A country wins over a region. An empty list means one global fetch
    with no jurisdiction. Provinces are never a fetch parameter.
    """
    if country:
        jurisdictions = [country]
    elif region:
        jurisdictions = get_countries_for_region(region)
    else:
        return []

    unique = list(dict.fromkeys(jurisdictions))
    if len(unique) > MAX_JURISDICTIONS:
        logger.info("Truncating %d jurisdictions to %d", len(unique), MAX_JURISDICTIONS)
        unique = unique[:MAX_JURISDICTIONS]
    return unique
