"""Source adapters, normalization and categorization."""

from .base import SourceAdapter
from .categorizer import CATEGORY_KEYWORDS, categorize
from .devto import DevToAdapter
from .github import GitHubAdapter
from .hacker_news import HackerNewsAdapter
from .models import FetchResult, NormalizedItem, RawSourceItem, parse_raw_item
from .registry import ADAPTERS, create_adapters
from .url import canonicalize_url

__all__ = [
    "ADAPTERS",
    "CATEGORY_KEYWORDS",
    "DevToAdapter",
    "FetchResult",
    "GitHubAdapter",
    "HackerNewsAdapter",
    "NormalizedItem",
    "RawSourceItem",
    "SourceAdapter",
    "canonicalize_url",
    "categorize",
    "create_adapters",
    "parse_raw_item",
]
