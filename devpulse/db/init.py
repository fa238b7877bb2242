"""Database initialization and schema management."""

from typing import Any, Dict

from psycopg.errors import DatabaseError

from .connection import get_connection


SCHEMA_SQL = """
-- Articles table, one row per canonical URL
CREATE TABLE IF NOT EXISTS articles (
    id SERIAL PRIMARY KEY,
    url TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL CHECK (title <> ''),
    source TEXT NOT NULL,
    author TEXT,
    score INTEGER NOT NULL DEFAULT 0 CHECK (score >= 0),
    tags TEXT[] NOT NULL DEFAULT '{}',
    summary TEXT NOT NULL CHECK (summary <> ''),
    source_icon TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- Create indexes
CREATE INDEX IF NOT EXISTS idx_articles_created_at ON articles(created_at DESC, id DESC);
CREATE INDEX IF NOT EXISTS idx_articles_source ON articles(source);
CREATE INDEX IF NOT EXISTS idx_articles_score ON articles(score DESC);
CREATE INDEX IF NOT EXISTS idx_articles_tags ON articles USING GIN (tags);
"""


def validate_connection(config: Dict[str, Any]) -> bool:
    """Validate database connection."""
    try:
        with get_connection(config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 AS ok")
                result = cur.fetchone()
                return result is not None and result["ok"] == 1
    except Exception as e:
        print(f"Database connection failed: {e}")
        return False


def init_database(config: Dict[str, Any]) -> None:
    """Initialize database schema."""
    try:
        with get_connection(config) as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
                conn.commit()
                print("Database schema initialized successfully")
    except DatabaseError as e:
        print(f"Failed to initialize database schema: {e}")
        raise
