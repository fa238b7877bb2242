"""Postgres connection pool shared by the article store and schema setup."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

_connection_pool: Optional[ConnectionPool] = None


def resolve_password(config: Dict[str, Any]) -> Optional[str]:
    """Explicit password first, then the variable named by ``password_env``."""
    if config.get("password"):
        return config["password"]
    env_name = config.get("password_env")
    if env_name:
        return os.environ.get(env_name) or None
    return None


def build_conninfo(config: Dict[str, Any]) -> str:
    """
    Build a libpq connection string from a postgres config dict.

    Values are quoted by psycopg, so passwords may contain any character.
    """
    return make_conninfo(
        host=config.get("host", "localhost"),
        port=config.get("port", 5432),
        dbname=config.get("database", "devpulse"),
        user=config.get("user", "devpulse"),
        password=resolve_password(config),
    )


def get_connection_pool(config: Dict[str, Any]) -> ConnectionPool:
    """Get or create the process-wide pool."""
    global _connection_pool
    if _connection_pool is None:
        _connection_pool = ConnectionPool(
            build_conninfo(config),
            min_size=1,
            max_size=config.get("pool_max_size", 10),
            kwargs={"row_factory": dict_row},
            open=True,
        )
    return _connection_pool


def close_connection_pool() -> None:
    """Close the pool, if one was opened."""
    global _connection_pool
    if _connection_pool is not None:
        _connection_pool.close()
        _connection_pool = None


@contextmanager
def get_connection(config: Dict[str, Any]) -> Generator[psycopg.Connection, None, None]:
    """Borrow a connection; rows come back as dicts."""
    with get_connection_pool(config).connection() as conn:
        yield conn
