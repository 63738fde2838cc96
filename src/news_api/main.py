"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from common.cli_helpers import setup_logging
from common.config import get_config
from common.errors import ConfigurationError, NewsError, UpstreamRateLimited, ValidationError
from news_api.routers import health, locales, news

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to fetch news"

app = FastAPI(
    title="News Aggregator API",
    description="Aggregates, deduplicates and clusters news from country and category feeds",
    version="1.0.0",
)

app.include_router(health.router)
app.include_router(locales.router)
app.include_router(news.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("News provider credential problem (%s)", exc.reason)
    if exc.reason == "invalid":
        return JSONResponse(status_code=401, content={"error": "News provider rejected the service credential"})
    return JSONResponse(status_code=500, content={"error": "News service is not configured"})


@app.exception_handler(UpstreamRateLimited)
async def rate_limited_handler(request: Request, exc: UpstreamRateLimited) -> JSONResponse:
    return JSONResponse(status_code=429, content={"error": str(exc)})


@app.exception_handler(NewsError)
async def news_error_handler(request: Request, exc: NewsError) -> JSONResponse:
    logger.error("News request failed: %s", exc)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error serving %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})


@app.get("/")
async def root():
    """API root - returns basic info."""
    return {
        "name": "News Aggregator API",
        "version": "1.0.0",
        "docs": "/docs",
    }


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    uvicorn.run(
        "news_api.main:app",
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
