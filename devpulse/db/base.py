"""Article store interface and filter model."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from ..models import Article

ASCENDING = 1
DESCENDING = -1

SortSpec = Sequence[Tuple[str, int]]

SORTABLE_FIELDS = {"id", "created_at", "updated_at", "score", "title"}
WRITABLE_FIELDS = {"title", "source", "author", "score", "tags", "summary", "source_icon", "updated_at"}
INSERT_ONLY_FIELDS = {"created_at"}


class ArticleFilter(BaseModel):
    """Store-level article filter.

    Empty or missing criteria do not restrict the result.
    """

    sources: Optional[List[str]] = Field(None, description="Allowed sources")
    keywords: Optional[List[str]] = Field(
        None,
        description="Match when any keyword occurs in title, summary, tags, source or author",
    )
    created_since: Optional[datetime] = Field(None, description="Lower bound on created_at")


def article_matches(article: Article, article_filter: ArticleFilter) -> bool:
    """Evaluate a filter against one article (case-insensitive keyword match)."""
    if article_filter.sources and article.source not in article_filter.sources:
        return False

    if article_filter.created_since and (
        article.created_at is None or article.created_at < article_filter.created_since
    ):
        return False

    if article_filter.keywords:
        fields = [article.title, article.summary, article.source, article.author or ""] + list(article.tags)
        haystack = [f.lower() for f in fields]
        if not any(k.lower() in value for k in article_filter.keywords for value in haystack):
            return False

    return True


def validate_sort(sort: Optional[SortSpec]) -> List[Tuple[str, int]]:
    """Reject unknown sort fields or directions."""
    checked = []
    for field_name, direction in sort or []:
        if field_name not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{field_name}'")
        if direction not in (ASCENDING, DESCENDING):
            raise ValueError(f"Invalid sort direction {direction} for '{field_name}'")
        checked.append((field_name, direction))
    return checked


def validate_upsert_fields(
    set_fields: Mapping[str, Any],
    set_on_insert_fields: Mapping[str, Any],
) -> None:
    """Enforce that id, url and created_at are never overwritten."""
    unknown = set(set_fields) - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields not updatable on upsert: {', '.join(sorted(unknown))}")

    unknown = set(set_on_insert_fields) - INSERT_ONLY_FIELDS - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields not settable on insert: {', '.join(sorted(unknown))}")


class ArticleStore(ABC):
    """Persistent article collection keyed by canonical URL.

    ``upsert_by_url`` is the only write path.
    """

    @abstractmethod
    def find_many(
        self,
        article_filter: Optional[ArticleFilter] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Article]:
        """
        Find articles.

        Args:
            article_filter: Criteria, None for all articles
            sort: (field, direction) pairs, applied left to right
            skip: Number of leading matches to skip
            limit: Maximum number of articles, None for no limit

        Returns:
            Matching articles in sort order
        """
        pass

    @abstractmethod
    def upsert_by_url(
        self,
        url: str,
        set_fields: Dict[str, Any],
        set_on_insert_fields: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Atomically insert or update the article with this URL.

        ``set_fields`` apply in both cases; ``set_on_insert_fields`` only
        when a new article is created.

        Returns:
            True if a new article was inserted, False if one was updated

        Raises:
            StoreError: If the store rejects the write
        """
        pass

    @abstractmethod
    def count_matching(self, article_filter: Optional[ArticleFilter] = None) -> int:
        """Count articles matching a filter."""
        pass

    @abstractmethod
    def count_by_source(self) -> Dict[str, int]:
        """Count articles per source."""
        pass
