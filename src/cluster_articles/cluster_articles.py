"""Group near-duplicate articles into story clusters by headline similarity."""

from __future__ import annotations

import logging

from cluster_articles.similarity import jaccard, normalize_headline
from common.models import Article, FeedItem, StoryCluster

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.5
CLUSTER_ID_SUFFIX = "-cluster"


def build_cluster(members: list[Article]) -> StoryCluster:
    """Build a cluster from a seed-first member list of two or more articles."""
    newest_first = sorted(members, key=lambda a: a.published_at, reverse=True)
    best_title = newest_first[0].title
    for article in newest_first[1:]:
        if len(article.title) > len(best_title):
            best_title = article.title

    newest = newest_first[0]
    return StoryCluster(
        id=members[0].id + CLUSTER_ID_SUFFIX,
        title=best_title,
        articles=tuple(newest_first),
        top_source=newest.source,
        published_at=newest.published_at,
    )


def group_articles(articles: list[Article]) -> list[list[Article]]:
    """Greedy single pass: each unassigned article seeds a group and absorbs
    every later unassigned article similar enough to the seed.

    Later members are compared to the seed only, so two members of one group
    can be dissimilar to each other.
    """
    tokens = [frozenset(normalize_headline(article.title)) for article in articles]
    assigned = [False] * len(articles)
    groups = []

    for i, seed in enumerate(articles):
        if assigned[i]:
            continue
        assigned[i] = True
        group = [seed]
        for j in range(i + 1, len(articles)):
            if assigned[j]:
                continue
            if jaccard(tokens[i], tokens[j]) >= SIMILARITY_THRESHOLD:
                group.append(articles[j])
                assigned[j] = True
        groups.append(group)

    return groups


def cluster_articles(articles: list[Article]) -> list[FeedItem]:
    """Partition articles into story clusters and bare singletons.

    Items come back in the input order of each group's seed.
    """
    if not articles:
        return []

    items: list[FeedItem] = []
    cluster_count = 0
    for group in group_articles(articles):
        if len(group) == 1:
            items.append(group[0])
        else:
            items.append(build_cluster(group))
            cluster_count += 1

    logger.info(
        "Clustered %d articles into %d clusters and %d singletons",
        len(articles), cluster_count, len(items) - cluster_count,
    )
    return items
