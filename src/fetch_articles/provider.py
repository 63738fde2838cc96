"""Upstream news provider client (newsapi.org v2)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import requests

from common.config import AppConfig
from common.errors import ConfigurationError, UpstreamError, UpstreamRateLimited
from common.models import Filters
from fetch_articles.models import UpstreamRequest
from resolve_locales.regions import get_language_for_country

logger = logging.getLogger(__name__)

SEARCH_MODE = "search"
HEADLINES_MODE = "headlines"

ENDPOINTS = {
    SEARCH_MODE: "everything",
    HEADLINES_MODE: "top-headlines",
}

TIME_WINDOWS = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}

AUTH_ERROR_CODES = {"apiKeyInvalid", "apiKeyMissing", "apiKeyDisabled", "apiKeyExhausted"}


def select_mode(q: Optional[str], category: Optional[str], jurisdiction: Optional[str]) -> str:
    """Free text, or no structured filter at all, means search; otherwise headlines."""
    if q:
        return SEARCH_MODE
    if category or jurisdiction:
        return HEADLINES_MODE
    return SEARCH_MODE


def time_window(time: Optional[str], default_days: int) -> timedelta:
    return TIME_WINDOWS.get(time or "", timedelta(days=default_days))


def build_request(
    filters: Filters,
    jurisdiction: Optional[str],
    config: AppConfig,
    category: Optional[str] = None,
    now: Optional[datetime] = None,
) -> UpstreamRequest:
    """Build the upstream call for one jurisdiction (or the global call when None).

    category overrides filters.category, used for the fallback retry.
    """
    category = category or filters.category
    mode = select_mode(filters.q, category, jurisdiction)
    params: dict[str, Any] = {}

    if mode == SEARCH_MODE:
        now = now or datetime.now(timezone.utc)
        start = now - time_window(filters.time, config.fetch.default_window_days)
        params["q"] = filters.q or config.fetch.fallback_query
        params["sortBy"] = "relevancy" if filters.sort == "relevancy" else "publishedAt"
        if jurisdiction:
            params["language"] = get_language_for_country(jurisdiction)
        params["from"] = start.isoformat()
        params["to"] = now.isoformat()
    else:
        params["category"] = category or config.fetch.default_category
        if jurisdiction:
            params["country"] = jurisdiction

    params["pageSize"] = config.upstream.page_size

    return UpstreamRequest(
        mode=mode,
        endpoint=f"{config.upstream.base_url.rstrip('/')}/{ENDPOINTS[mode]}",
        params=params,
        jurisdiction=jurisdiction,
        category=params.get("category"),
    )


def _error_message(response: requests.Response) -> tuple[Optional[str], Optional[str]]:
    try:
        body = response.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    return body.get("code"), body.get("message")


def fetch_upstream(request: UpstreamRequest, config: AppConfig) -> list[dict[str, Any]]:
    """Issue one upstream call and return its raw article records.

    Raises:
        ConfigurationError: credential missing or rejected upstream
        UpstreamRateLimited: upstream answered 429
        UpstreamError: any other failure
    """
    api_key = config.upstream.api_key
    if not api_key:
        raise ConfigurationError("News provider credential is not configured", reason="missing")

    logger.info(
        "Fetching %s (jurisdiction=%s, params=%s)",
        request.endpoint, request.jurisdiction or "global", request.params,
    )
    try:
        response = requests.get(
            request.endpoint,
            params={**request.params, "apiKey": api_key},
            timeout=config.upstream.request_timeout,
            headers={"User-Agent": config.upstream.user_agent},
        )
    except requests.exceptions.RequestException as e:
        # The exception text can embed the full URL, credential included.
        raise UpstreamError(f"Request to news provider failed: {type(e).__name__}") from None

    if response.status_code == 429:
        raise UpstreamRateLimited("Rate limit exceeded. Please try again later.")

    code, message = _error_message(response)
    if response.status_code == 401 or code in AUTH_ERROR_CODES:
        raise ConfigurationError("News provider rejected the configured credential", reason="invalid")
    if not response.ok:
        raise UpstreamError(f"News provider error: {response.status_code} {code or ''}".strip())

    try:
        data = response.json()
    except ValueError:
        raise UpstreamError("News provider returned a non-JSON body") from None

    if not isinstance(data, dict):
        raise UpstreamError("News provider returned an unexpected body")
    if data.get("status") == "error":
        raise UpstreamError(message or "News provider returned an error")

    articles = data.get("articles") or []
    return [article for article in articles if isinstance(article, dict)]
