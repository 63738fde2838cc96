"""News aggregation service."""

from typing import Mapping, Optional

from aggregate_news.aggregate_news import NewsResult, aggregate_news
from aggregate_news.filters import filters_to_dict, parse_filters
from common.config import AppConfig
from common.serialization import serialize_item
from news_api.models.news import ArticleResponse, NewsResponse, StoryClusterResponse


class NewsService:
    """Runs the aggregation pipeline for API requests."""

    def __init__(self, config: AppConfig):
        self.config = config

    async def get_news(self, params: Mapping[str, Optional[str]]) -> NewsResult:
        """Validate params and run the pipeline.

        Raises:
            ValidationError: invalid or oversized params
            ConfigurationError: upstream credential missing or rejected
            UpstreamRateLimited: every upstream call was rate limited
        """
        filters = parse_filters(params, detect_locations=self.config.search.detect_locations)
        return await aggregate_news(filters, self.config)

    @staticmethod
    def to_response(result: NewsResult) -> NewsResponse:
        items = []
        for item in result.items:
            data = serialize_item(item)
            if "articles" in data:
                items.append(StoryClusterResponse(**data))
            else:
                items.append(ArticleResponse(**data))
        return NewsResponse(
            filters=filters_to_dict(result.filters),
            total=result.total,
            items=items,
        )
