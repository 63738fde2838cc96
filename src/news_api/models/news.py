"""News Pydantic models."""

from pydantic import BaseModel, Field


class ArticleResponse(BaseModel):
    """Single article."""

    id: str
    title: str
    description: str | None = None
    url: str
    imageUrl: str | None = None
    source: str
    publishedAt: str
    country: str | None = None
    category: str | None = None
    province: str | None = None
    tags: list[str] = Field(default_factory=list)


class StoryClusterResponse(BaseModel):
    """Two or more articles covering the same story, newest first."""

    id: str
    title: str
    articles: list[ArticleResponse]
    topSource: str
    publishedAt: str


class NewsResponse(BaseModel):
    """Aggregated, clustered and ranked news."""

    filters: dict[str, str]
    total: int
    items: list[StoryClusterResponse | ArticleResponse]


class ErrorResponse(BaseModel):
    error: str
