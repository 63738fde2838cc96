"""CLI for running the aggregation pipeline once."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone

from aggregate_news.aggregate_news import aggregate_news_sync
from aggregate_news.filters import build_query_string, filters_to_dict, parse_filters
from common.cli_helpers import save_jsonl_local, setup_logging
from common.config import load_config
from common.errors import NewsError, ValidationError
from common.serialization import serialize_item

logger = logging.getLogger(__name__)


def parse_aggregate_news_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for aggregate_news."""
    parser = argparse.ArgumentParser(description="Fetch, cluster and rank news")
    parser.add_argument("--q", default=None, help="Free-text search query")
    parser.add_argument("--category", default=None)
    parser.add_argument("--country", default=None, help="ISO 3166-1 alpha-2 code")
    parser.add_argument("--region", default=None)
    parser.add_argument("--province", default=None)
    parser.add_argument("--time", default=None, choices=["24h", "7d", "30d"])
    parser.add_argument("--sort", default=None, choices=["publishedAt", "relevancy"])
    parser.add_argument("--config", default=None, help="Config name under configs/ (default: prod)")
    parser.add_argument("--limit", type=int, default=20, help="Items to print")
    parser.add_argument("--load-local", action="store_true", help="Save items to a local JSONL file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_aggregate_news_args(argv)
    setup_logging(args.verbose)
    config = load_config(args.config)

    params = {key: getattr(args, key) for key in ("q", "category", "country", "region", "province", "time", "sort")}
    try:
        filters = parse_filters(params, detect_locations=config.search.detect_locations)
    except ValidationError as e:
        sys.exit(f"error: {e}")
    logger.info("Same request over HTTP: GET /news?%s", build_query_string(filters))

    try:
        result = aggregate_news_sync(filters, config)
    except NewsError as e:
        logger.error("Aggregation failed: %s", e)
        sys.exit(1)

    records = [serialize_item(item) for item in result.items]

    if args.load_local:
        filepath = save_jsonl_local(records, "news_items", datetime.now(timezone.utc))
        logger.info("Saved %d items to %s", len(records), filepath)

    print(json.dumps(
        {"filters": filters_to_dict(filters), "total": result.total, "items": records[: args.limit]},
        indent=2,
        ensure_ascii=False,
    ))


if __name__ == "__main__":
    main()
