"""Store-wide statistics."""

from datetime import datetime
from typing import Optional

import pendulum

from ..db.base import ArticleFilter, ArticleStore
from .models import ArticleStats
from .ranker import CHRONOLOGICAL_SORT

RECENT_ARTICLES = 5


def collect_stats(store: ArticleStore, now: Optional[datetime] = None) -> ArticleStats:
    """
    Gather article counts for operator reporting.

    Args:
        store: Article store
        now: Reference time, defaults to the current time

    Returns:
        Totals, today's count, per-source counts and the latest articles
    """
    now = pendulum.instance(now) if now is not None else pendulum.now("UTC")
    today_start = now.in_timezone("UTC").start_of("day")

    return ArticleStats(
        total_articles=store.count_matching(),
        today_articles=store.count_matching(ArticleFilter(created_since=today_start)),
        source_stats=store.count_by_source(),
        recent_articles=store.find_many(sort=CHRONOLOGICAL_SORT, limit=RECENT_ARTICLES),
    )
