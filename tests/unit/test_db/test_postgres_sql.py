"""Unit tests for the Postgres store's SQL builders and error handling."""

from contextlib import contextmanager
from unittest.mock import MagicMock

import psycopg
import pytest
from psycopg.conninfo import conninfo_to_dict

from devpulse.db import articles as pg_articles
from devpulse.db.articles import (
    PostgresArticleStore,
    build_order_clause,
    build_upsert,
    build_where_clause,
    escape_like,
)
from devpulse.db.connection import build_conninfo
from devpulse.db.base import DESCENDING, ArticleFilter
from devpulse.errors import StoreError

from tests.helpers.clock import FIXED_NOW


class TestBuildWhereClause:
    """Tests for build_where_clause()."""

    def test_no_filter(self) -> None:
        """Test that an empty filter yields no clause."""
        assert build_where_clause(None) == ("", [])
        assert build_where_clause(ArticleFilter()) == ("", [])

    def test_sources_and_since(self) -> None:
        """Test source and date restrictions."""
        sql, params = build_where_clause(ArticleFilter(sources=["GitHub"], created_since=FIXED_NOW))
        assert sql == " WHERE source = ANY(%s) AND created_at >= %s"
        assert params == [["GitHub"], FIXED_NOW]

    def test_keywords(self) -> None:
        """Test that each keyword binds five escaped patterns."""
        sql, params = build_where_clause(ArticleFilter(keywords=["50%", "go"]))
        assert sql.count("ILIKE") == 10
        assert " OR (title ILIKE" in sql
        assert params[:5] == ["%50\\%%"] * 5
        assert params[5:] == ["%go%"] * 5


class TestOtherBuilders:
    """Tests for order and upsert builders."""

    def test_escape_like(self) -> None:
        """Test wildcard escaping."""
        assert escape_like("a_b%c\\") == "a\\_b\\%c\\\\"

    def test_order_clause(self) -> None:
        """Test ORDER BY rendering."""
        clause = build_order_clause([("created_at", DESCENDING), ("id", DESCENDING)])
        assert clause == " ORDER BY created_at DESC, id DESC"
        assert build_order_clause(None) == ""

    def test_upsert(self) -> None:
        """Test that created_at is insert-only and the update set excludes it."""
        query, params = build_upsert(
            "https://a",
            {"title": "T", "updated_at": FIXED_NOW},
            {"created_at": FIXED_NOW},
        )
        assert query.startswith("INSERT INTO articles (url, created_at, title, updated_at)")
        assert "ON CONFLICT (url) DO UPDATE SET title = EXCLUDED.title, updated_at = EXCLUDED.updated_at" in query
        assert "created_at = EXCLUDED" not in query
        assert query.endswith("RETURNING (xmax = 0) AS inserted")
        assert params == ["https://a", FIXED_NOW, "T", FIXED_NOW]


class TestPostgresArticleStore:
    """Tests for PostgresArticleStore with a mocked connection."""

    def _patch_connection(self, monkeypatch, cursor) -> MagicMock:
        conn = MagicMock()
        conn.cursor.return_value.__enter__.return_value = cursor

        @contextmanager
        def fake_connection(config):
            yield conn

        monkeypatch.setattr(pg_articles, "get_connection", fake_connection)
        return conn

    def test_upsert_reports_insert(self, monkeypatch) -> None:
        """Test that the RETURNING flag is surfaced and the write committed."""
        cursor = MagicMock()
        cursor.fetchone.return_value = {"inserted": True}
        conn = self._patch_connection(monkeypatch, cursor)

        store = PostgresArticleStore({})
        assert store.upsert_by_url("https://a", {"title": "T"}, {"created_at": FIXED_NOW}) is True
        conn.commit.assert_called_once()

    def test_driver_error_wrapped(self, monkeypatch) -> None:
        """Test that psycopg errors surface as StoreError."""
        cursor = MagicMock()
        cursor.execute.side_effect = psycopg.OperationalError("connection lost")
        self._patch_connection(monkeypatch, cursor)

        with pytest.raises(StoreError):
            PostgresArticleStore({}).count_matching()

    def test_find_many_limit_offset(self, monkeypatch) -> None:
        """Test LIMIT/OFFSET binding and row mapping."""
        cursor = MagicMock()
        cursor.fetchall.return_value = [
            {
                "id": 1,
                "url": "https://a",
                "title": "T",
                "source": "GitHub",
                "author": None,
                "score": 3,
                "tags": ["AI"],
                "summary": "S",
                "source_icon": None,
                "created_at": FIXED_NOW,
                "updated_at": FIXED_NOW,
            }
        ]
        self._patch_connection(monkeypatch, cursor)

        found = PostgresArticleStore({}).find_many(skip=10, limit=11)

        query, params = cursor.execute.call_args.args
        assert query.endswith(" LIMIT %s OFFSET %s")
        assert params == [11, 10]
        assert found[0].url == "https://a"


class TestBuildConninfo:
    """Tests for build_conninfo()."""

    def test_password_from_env(self, monkeypatch) -> None:
        """Test password lookup and quoting."""
        monkeypatch.setenv("TEST_PG_PW", "p@ss word'")
        info = conninfo_to_dict(
            build_conninfo({"host": "db", "port": 5433, "database": "news", "user": "u", "password_env": "TEST_PG_PW"})
        )
        assert info["host"] == "db"
        assert info["port"] == "5433"
        assert info["dbname"] == "news"
        assert info["password"] == "p@ss word'"

    def test_explicit_password_wins(self, monkeypatch) -> None:
        """Test that an explicit password beats the environment."""
        monkeypatch.setenv("TEST_PG_PW", "from-env")
        info = conninfo_to_dict(build_conninfo({"password": "inline", "password_env": "TEST_PG_PW"}))
        assert info["password"] == "inline"

    def test_no_password(self) -> None:
        """Test that no password is omitted from the string."""
        info = conninfo_to_dict(build_conninfo({}))
        assert "password" not in info
        assert info["user"] == "devpulse"
