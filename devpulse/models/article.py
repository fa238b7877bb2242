"""Article model for stored news items."""

from typing import List, Optional

from pydantic import Field

from .base import DBModel


class Article(DBModel):
    """Article model.

    One row per canonical URL. ``created_at`` is written once on insert,
    ``updated_at`` on every re-ingestion.
    """

    title: str = Field(..., min_length=1, description="Article title")
    url: str = Field(..., min_length=1, description="Canonical URL, unique")
    source: str = Field(..., description="Origin feed (Hacker News, GitHub, Dev.to)")
    author: Optional[str] = Field(None, description="Author or owner")
    score: int = Field(0, ge=0, description="Source popularity signal")
    tags: List[str] = Field(default_factory=list, description="Topic tags, most relevant first")
    summary: str = Field(..., min_length=1, description="Short description")
    source_icon: Optional[str] = Field(None, description="Display glyph for the source")
