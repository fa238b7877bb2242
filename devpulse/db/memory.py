"""In-process article store."""

import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..errors import StoreError
from ..models import Article
from .base import (
    ArticleFilter,
    ArticleStore,
    SortSpec,
    article_matches,
    validate_sort,
    validate_upsert_fields,
)


class InMemoryArticleStore(ArticleStore):
    """Article store held in memory.

    Used for dry-run ingestion and tests. A lock serializes upserts so
    concurrent runs behave like the database's atomic upsert.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._rows: Dict[str, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def _snapshot(self) -> List[Article]:
        with self._lock:
            return [Article.model_validate(row) for row in self._rows.values()]

    def find_many(
        self,
        article_filter: Optional[ArticleFilter] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Article]:
        """Find articles."""
        article_filter = article_filter or ArticleFilter()
        articles = [a for a in self._snapshot() if article_matches(a, article_filter)]

        # Stable sorts applied from the least significant key.
        for field_name, direction in reversed(validate_sort(sort)):
            articles.sort(key=lambda a: getattr(a, field_name), reverse=direction < 0)

        articles = articles[skip:]
        if limit is not None:
            articles = articles[:limit]
        return articles

    def upsert_by_url(
        self,
        url: str,
        set_fields: Dict[str, Any],
        set_on_insert_fields: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Insert or update the article with this URL."""
        set_on_insert_fields = set_on_insert_fields or {}
        validate_upsert_fields(set_fields, set_on_insert_fields)

        with self._lock:
            existing = self._rows.get(url)
            if existing is not None:
                row = {**existing, **set_fields}
            else:
                row = {"id": self._next_id, "url": url, **set_on_insert_fields, **set_fields}

            try:
                Article.model_validate(row)
            except ValidationError as e:
                raise StoreError(f"Rejected article {url}: {e}") from e

            self._rows[url] = row
            if existing is not None:
                return False
            self._next_id += 1
            return True

    def count_matching(self, article_filter: Optional[ArticleFilter] = None) -> int:
        """Count articles matching a filter."""
        return len(self.find_many(article_filter))

    def count_by_source(self) -> Dict[str, int]:
        """Count articles per source."""
        counts: Dict[str, int] = {}
        for article in self._snapshot():
            counts[article.source] = counts.get(article.source, 0) + 1
        return counts
