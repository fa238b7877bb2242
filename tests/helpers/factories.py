"""Builders for articles, items and fake adapters."""

import asyncio
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from devpulse.db import InMemoryArticleStore
from devpulse.ingestion import FetchResult, NormalizedItem

from tests.helpers.clock import FIXED_NOW


def make_item(
    url: str = "https://example.com/post",
    title: str = "Example post",
    source: str = "Hacker News",
    **fields: Any,
) -> NormalizedItem:
    """Create a normalized item."""
    return NormalizedItem(title=title, url=url, source=source, **fields)


def seed_article(
    store: InMemoryArticleStore,
    url: str,
    title: str = "Article",
    source: str = "Hacker News",
    score: int = 0,
    tags: Optional[List[str]] = None,
    summary: str = "Summary",
    author: Optional[str] = None,
    created_at: datetime = FIXED_NOW,
) -> None:
    """Insert one article through the store's upsert."""
    set_fields: Dict[str, Any] = {
        "title": title,
        "source": source,
        "author": author,
        "score": score,
        "tags": tags or [],
        "summary": summary,
        "updated_at": created_at,
    }
    store.upsert_by_url(url, set_fields, {"created_at": created_at})


def seed_sequence(store: InMemoryArticleStore, count: int, source: str = "Hacker News") -> None:
    """Insert ``count`` articles one minute apart, oldest first."""
    for i in range(count):
        seed_article(
            store,
            f"https://example.com/{source.lower().replace(' ', '-')}/{i}",
            title=f"{source} article {i}",
            source=source,
            score=i,
            created_at=FIXED_NOW + timedelta(minutes=i),
        )


class StaticAdapter:
    """Adapter double returning a prepared result."""

    def __init__(
        self,
        name: str,
        items: Optional[List[NormalizedItem]] = None,
        error: Optional[str] = None,
        delay: float = 0.0,
    ) -> None:
        self.name = name
        self.items = items or []
        self.error = error
        self.delay = delay
        self.calls = 0

    async def fetch(self) -> FetchResult:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            return FetchResult(source_name=self.name, source_url="", success=False, error=self.error)
        return FetchResult(source_name=self.name, source_url="", success=True, items=list(self.items))


class ExplodingAdapter:
    """Adapter double whose fetch raises despite the adapter contract."""

    name = "GitHub"

    async def fetch(self) -> FetchResult:
        raise RuntimeError("boom")
