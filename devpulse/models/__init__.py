"""Data models for DevPulse."""

from .article import Article
from .base import DBModel
from .preferences import ALL_SOURCES, UserPreferences

__all__ = ["ALL_SOURCES", "Article", "DBModel", "UserPreferences"]
