"""Query and ranking models."""

from typing import Dict, List

from pydantic import BaseModel, Field

from ..models import Article

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class Pagination(BaseModel):
    """Offset-based page request."""

    offset: int = Field(0, ge=0, description="Articles to skip")
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size")


class QueryResult(BaseModel):
    """One page of articles."""

    items: List[Article] = Field(default_factory=list, description="Articles in rank order")
    has_more: bool = Field(False, description="Whether a further page exists")


class ArticleStats(BaseModel):
    """Store-wide article statistics."""

    total_articles: int = Field(..., description="All stored articles")
    today_articles: int = Field(..., description="Articles first seen today (UTC)")
    source_stats: Dict[str, int] = Field(default_factory=dict, description="Articles per source")
    recent_articles: List[Article] = Field(default_factory=list, description="Most recently added")
