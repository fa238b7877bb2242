"""Article storage for DevPulse."""

from .articles import PostgresArticleStore
from .base import ASCENDING, DESCENDING, ArticleFilter, ArticleStore
from .connection import build_conninfo, close_connection_pool, get_connection, get_connection_pool
from .init import init_database, validate_connection
from .memory import InMemoryArticleStore

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "ArticleFilter",
    "ArticleStore",
    "InMemoryArticleStore",
    "PostgresArticleStore",
    "build_conninfo",
    "close_connection_pool",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
