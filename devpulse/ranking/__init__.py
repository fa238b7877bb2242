"""Article querying, ranking and statistics."""

from .models import ArticleStats, Pagination, QueryResult
from .ranker import ArticleQueryEngine, paginate, resolve_sources
from .scorers import relevance_score, tag_match_score
from .stats import collect_stats

__all__ = [
    "ArticleQueryEngine",
    "ArticleStats",
    "Pagination",
    "QueryResult",
    "collect_stats",
    "paginate",
    "relevance_score",
    "resolve_sources",
    "tag_match_score",
]
