"""Scoring functions for preference ranking and search relevance."""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Tuple

from ..models import Article

# Field weights for search relevance, title matches count most.
RELEVANCE_WEIGHTS: Dict[str, int] = {
    "title": 10,
    "summary": 5,
    "tags": 3,
    "source": 1,
    "author": 1,
}

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def tag_match_score(article: Article, preferred_tags: Iterable[str]) -> int:
    """Number of distinct preferred tags the article carries."""
    return len(set(article.tags) & set(preferred_tags))


def relevance_score(article: Article, keywords: Iterable[str]) -> int:
    """
    Weighted keyword hits across searchable fields.

    Each keyword contributes the weight of every field it occurs in
    (case-insensitive substring match).
    """
    fields = {
        "title": [article.title],
        "summary": [article.summary],
        "tags": list(article.tags),
        "source": [article.source],
        "author": [article.author or ""],
    }
    lowered = {name: [v.lower() for v in values] for name, values in fields.items()}

    score = 0
    for keyword in keywords:
        needle = keyword.lower()
        if not needle:
            continue
        for name, values in lowered.items():
            if any(needle in value for value in values):
                score += RELEVANCE_WEIGHTS[name]
    return score


def _recency(article: Article) -> float:
    created = article.created_at or _EPOCH
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.timestamp()


def preference_sort_key(article: Article, preferred_tags: Iterable[str]) -> Tuple[int, int, float, int]:
    """Descending key: tag matches, then popularity, then recency, then id."""
    return (
        -tag_match_score(article, preferred_tags),
        -article.score,
        -_recency(article),
        -(article.id or 0),
    )


def relevance_sort_key(article: Article, keywords: List[str]) -> Tuple[int, float, int]:
    """Descending key: relevance, then recency, then id."""
    return (
        -relevance_score(article, keywords),
        -_recency(article),
        -(article.id or 0),
    )
