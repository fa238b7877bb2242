"""Postgres-backed article store."""

from typing import Any, Dict, List, Optional, Tuple

import psycopg

from ..errors import StoreError
from ..models import Article
from .base import (
    ArticleFilter,
    ArticleStore,
    SortSpec,
    validate_sort,
    validate_upsert_fields,
)
from .connection import get_connection

ARTICLE_COLUMNS = (
    "id, url, title, source, author, score, tags, summary, source_icon, created_at, updated_at"
)

KEYWORD_CLAUSE = (
    "(title ILIKE %s OR summary ILIKE %s OR source ILIKE %s"
    " OR COALESCE(author, '') ILIKE %s"
    " OR EXISTS (SELECT 1 FROM unnest(tags) AS tag WHERE tag ILIKE %s))"
)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so a keyword matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where_clause(article_filter: Optional[ArticleFilter]) -> Tuple[str, List[Any]]:
    """
    Translate a filter into a WHERE clause.

    Returns:
        Tuple of (sql, params); sql is empty when nothing is restricted
    """
    if article_filter is None:
        return "", []

    clauses: List[str] = []
    params: List[Any] = []

    if article_filter.sources:
        clauses.append("source = ANY(%s)")
        params.append(list(article_filter.sources))

    if article_filter.created_since is not None:
        clauses.append("created_at >= %s")
        params.append(article_filter.created_since)

    if article_filter.keywords:
        keyword_clauses = []
        for keyword in article_filter.keywords:
            pattern = f"%{escape_like(keyword)}%"
            keyword_clauses.append(KEYWORD_CLAUSE)
            params.extend([pattern] * 5)
        clauses.append("(" + " OR ".join(keyword_clauses) + ")")

    if not clauses:
        return "", []
    return " WHERE " + " AND ".join(clauses), params


def build_order_clause(sort: Optional[SortSpec]) -> str:
    """Translate sort keys into an ORDER BY clause."""
    parts = [
        f"{field_name} {'DESC' if direction < 0 else 'ASC'}"
        for field_name, direction in validate_sort(sort)
    ]
    return " ORDER BY " + ", ".join(parts) if parts else ""


def build_upsert(
    url: str,
    set_fields: Dict[str, Any],
    set_on_insert_fields: Dict[str, Any],
) -> Tuple[str, List[Any]]:
    """
    Build a single-statement upsert.

    ``xmax = 0`` holds only for a freshly inserted row, which tells
    inserts from updates without a second query.
    """
    insert_fields = {"url": url, **set_on_insert_fields, **set_fields}
    columns = list(insert_fields)
    placeholders = ", ".join(["%s"] * len(columns))

    updates = ", ".join(f"{name} = EXCLUDED.{name}" for name in set_fields)
    conflict = f"DO UPDATE SET {updates}" if updates else "DO UPDATE SET url = EXCLUDED.url"

    query = (
        f"INSERT INTO articles ({', '.join(columns)}) VALUES ({placeholders}) "
        f"ON CONFLICT (url) {conflict} "
        "RETURNING (xmax = 0) AS inserted"
    )
    return query, [insert_fields[name] for name in columns]


class PostgresArticleStore(ArticleStore):
    """Article store on a Postgres ``articles`` table."""

    def __init__(self, db_config: Dict[str, Any]) -> None:
        """
        Initialize Postgres store.

        Args:
            db_config: Database configuration dict
        """
        self.db_config = db_config

    def find_many(
        self,
        article_filter: Optional[ArticleFilter] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Article]:
        """Find articles."""
        where, params = build_where_clause(article_filter)
        query = f"SELECT {ARTICLE_COLUMNS} FROM articles{where}{build_order_clause(sort)}"

        if limit is not None:
            query += " LIMIT %s"
            params.append(limit)
        if skip:
            query += " OFFSET %s"
            params.append(skip)

        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    rows = cur.fetchall()
        except psycopg.Error as e:
            raise StoreError(f"Failed to query articles: {e}") from e

        return [Article.model_validate(row) for row in rows]

    def upsert_by_url(
        self,
        url: str,
        set_fields: Dict[str, Any],
        set_on_insert_fields: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Insert or update the article with this URL."""
        set_on_insert_fields = set_on_insert_fields or {}
        validate_upsert_fields(set_fields, set_on_insert_fields)
        query, params = build_upsert(url, set_fields, set_on_insert_fields)

        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as e:
            raise StoreError(f"Failed to upsert {url}: {e}") from e

        return bool(row["inserted"])

    def count_matching(self, article_filter: Optional[ArticleFilter] = None) -> int:
        """Count articles matching a filter."""
        where, params = build_where_clause(article_filter)
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(f"SELECT COUNT(*) AS total FROM articles{where}", params)
                    row = cur.fetchone()
        except psycopg.Error as e:
            raise StoreError(f"Failed to count articles: {e}") from e

        return int(row["total"])

    def count_by_source(self) -> Dict[str, int]:
        """Count articles per source."""
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        SELECT source, COUNT(*) AS total
                        FROM articles
                        GROUP BY source
                        ORDER BY source
                        """
                    )
                    rows = cur.fetchall()
        except psycopg.Error as e:
            raise StoreError(f"Failed to count articles by source: {e}") from e

        return {row["source"]: int(row["total"]) for row in rows}
