"""Concurrent per-jurisdiction fetch with partial-failure tolerance."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from common.config import AppConfig
from common.errors import ConfigurationError, NewsError, UpstreamError, UpstreamRateLimited
from common.models import Filters
from fetch_articles.models import FetchOutcome
from fetch_articles.provider import HEADLINES_MODE, build_request, fetch_upstream, select_mode

logger = logging.getLogger(__name__)


def _should_retry(outcome: FetchOutcome, filters: Filters, mode: str, config: AppConfig) -> bool:
    """Retry once with the default category after an empty result or an ordinary failure."""
    if mode != HEADLINES_MODE:
        return False
    if not filters.category or filters.category == config.fetch.default_category:
        return False
    if outcome.error is None:
        return not outcome.articles
    return type(outcome.error) is UpstreamError


def _attempt(filters: Filters, jurisdiction: Optional[str], config: AppConfig, category: Optional[str] = None) -> FetchOutcome:
    request = build_request(filters, jurisdiction, config, category=category)
    try:
        articles = fetch_upstream(request, config)
    except NewsError as e:
        return FetchOutcome(jurisdiction=jurisdiction, category=request.category, error=e)
    return FetchOutcome(jurisdiction=jurisdiction, articles=articles, category=request.category)


def fetch_jurisdiction(filters: Filters, jurisdiction: Optional[str], config: AppConfig) -> FetchOutcome:
    """Fetch one jurisdiction, falling back to the default category once if needed.

    Never raises; failures come back on the outcome.
    """
    try:
        outcome = _attempt(filters, jurisdiction, config)
        mode = select_mode(filters.q, filters.category, jurisdiction)
        if jurisdiction and _should_retry(outcome, filters, mode, config):
            logger.info(
                "No usable results for %s in category %s, retrying with %s",
                jurisdiction, filters.category, config.fetch.default_category,
            )
            retry = _attempt(filters, jurisdiction, config, category=config.fetch.default_category)
            if retry.ok or not outcome.ok or isinstance(retry.error, ConfigurationError):
                return retry
            # An empty first answer is still a valid result.
            logger.warning("Retry for %s failed, keeping empty result: %s", jurisdiction, retry.error)
        return outcome
    except Exception as e:
        logger.exception("Unexpected error fetching %s", jurisdiction or "global")
        return FetchOutcome(jurisdiction=jurisdiction, error=UpstreamError(str(e)))


def settle_outcomes(outcomes: list[FetchOutcome]) -> list[FetchOutcome]:
    """Keep the successful outcomes in jurisdiction order, surfacing fatal errors.

    Raises:
        ConfigurationError: if any call was refused for credential reasons
        UpstreamRateLimited: if every call failed and all failures were rate limits
    """
    for outcome in outcomes:
        if isinstance(outcome.error, ConfigurationError):
            raise outcome.error

    failed = [outcome for outcome in outcomes if not outcome.ok]
    for outcome in failed:
        logger.warning("Fetch failed for %s: %s", outcome.jurisdiction or "global", outcome.error)

    if outcomes and len(failed) == len(outcomes):
        if all(isinstance(outcome.error, UpstreamRateLimited) for outcome in failed):
            raise failed[0].error
        logger.warning("All %d upstream fetches failed, returning empty result", len(outcomes))
        return []

    return [outcome for outcome in outcomes if outcome.ok]


async def fetch_all_outcomes(
    jurisdictions: list[str],
    filters: Filters,
    config: AppConfig,
) -> list[FetchOutcome]:
    """Run one fetch per jurisdiction concurrently and wait for all to settle.

    Results come back in jurisdiction order regardless of completion order.
    """
    if not config.upstream.api_key:
        raise ConfigurationError("News provider credential is not configured", reason="missing")

    targets: list[Optional[str]] = list(jurisdictions) or [None]
    loop = asyncio.get_running_loop()
    tasks = [
        loop.run_in_executor(None, fetch_jurisdiction, filters, jurisdiction, config)
        for jurisdiction in targets
    ]
    return list(await asyncio.gather(*tasks))


async def fetch_all(
    jurisdictions: list[str],
    filters: Filters,
    config: AppConfig,
) -> list[FetchOutcome]:
    """Fan out, then keep the successful outcomes in jurisdiction order.

    Raises:
        ConfigurationError: credential missing or rejected
        UpstreamRateLimited: every call was rate limited
    """
    outcomes = await fetch_all_outcomes(jurisdictions, filters, config)
    settled = settle_outcomes(outcomes)
    logger.info(
        "Fetched %d raw articles from %d of %d upstream calls",
        sum(len(outcome.articles) for outcome in settled), len(settled), len(outcomes),
    )
    return settled
