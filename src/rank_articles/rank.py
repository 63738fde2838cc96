"""Order feed items by the requested sort policy."""

from common.models import FeedItem, effective_time, is_cluster

SORT_PUBLISHED_AT = "publishedAt"
SORT_RELEVANCY = "relevancy"
SORT_OPTIONS = (SORT_PUBLISHED_AT, SORT_RELEVANCY)


def rank_items(items: list[FeedItem], sort: str = SORT_PUBLISHED_AT) -> list[FeedItem]:
    """Stable sort, newest first.

    For relevancy, clusters then move ahead of single articles; each group
    stays newest first.
    """
    if sort not in SORT_OPTIONS:
        raise ValueError(f"Unknown sort: {sort}")
    newest_first = sorted(items, key=effective_time, reverse=True)
    if sort == SORT_RELEVANCY:
        return sorted(newest_first, key=lambda item: 0 if is_cluster(item) else 1)
    return newest_first
