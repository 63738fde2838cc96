"""News API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.config import AppConfig, get_config
from news_api.models.news import ErrorResponse, NewsResponse
from news_api.services.news_service import NewsService

router = APIRouter(prefix="/news", tags=["news"])


def get_news_service(config: Annotated[AppConfig, Depends(get_config)]) -> NewsService:
    """Dependency to get news service."""
    return NewsService(config)


@router.get(
    "",
    response_model=NewsResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_news(
    service: Annotated[NewsService, Depends(get_news_service)],
    q: Annotated[str | None, Query(description="Free-text search, at most 200 characters")] = None,
    category: Annotated[str | None, Query(description="business, entertainment, general, health, science, sports or technology")] = None,
    country: Annotated[str | None, Query(description="Country code (za, us, gb, ...)")] = None,
    region: Annotated[str | None, Query(description="Region (africa, europe, americas, asia, middle_east, oceania)")] = None,
    province: Annotated[str | None, Query(description="Province code (za-gp, us-ca, ...)")] = None,
    time: Annotated[str | None, Query(description="24h, 7d or 30d")] = None,
    sort: Annotated[str | None, Query(description="publishedAt (default) or relevancy")] = None,
):
    """Aggregate, deduplicate, cluster and rank news.

    Values are validated by the service itself so that bad input comes back
    as {"error": ...} with status 400.
    """
    params = {
        "q": q,
        "category": category,
        "country": country,
        "region": region,
        "province": province,
        "time": time,
        "sort": sort,
    }
    result = await service.get_news(params)
    return service.to_response(result)
