"""Data models for ingestion."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class NormalizedItem(BaseModel):
    """Source-independent news item produced by every adapter."""

    title: str = Field(..., min_length=1, description="Item title")
    url: str = Field(..., min_length=1, description="Canonical link")
    source: str = Field(..., description="Adapter name")
    author: Optional[str] = Field(None, description="Author or owner")
    score: Optional[int] = Field(None, ge=0, description="Popularity signal")
    tags: List[str] = Field(default_factory=list, description="Topic tags")
    summary: Optional[str] = Field(None, description="Pre-computed summary")
    description: Optional[str] = Field(None, description="Source-provided description")
    source_icon: Optional[str] = Field(None, description="Display glyph")


class FetchResult(BaseModel):
    """Result of fetching one source.

    A failed fetch carries ``success=False``, an error message and no
    items; adapters never raise.
    """

    source_name: str = Field(..., description="Adapter name")
    source_url: str = Field(..., description="Endpoint requested")
    success: bool = Field(..., description="Whether fetch was successful")
    items: List[NormalizedItem] = Field(default_factory=list, description="Normalized items")
    error: Optional[str] = Field(None, description="Error message if failed")
    raw_count: int = Field(0, description="Items present in the payload")
    dropped_count: int = Field(0, description="Items removed by quality or completeness checks")

    @property
    def item_count(self) -> int:
        """Number of normalized items returned."""
        return len(self.items)


# Raw payload shapes, one per feed.


class HackerNewsHit(BaseModel):
    """Story hit from the Algolia Hacker News search API."""

    kind: Literal["hacker_news"] = "hacker_news"
    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    points: Optional[int] = None
    object_id: Optional[str] = Field(None, alias="objectID")


class GitHubOwner(BaseModel):
    """Repository owner."""

    login: str


class GitHubRepository(BaseModel):
    """Repository from the GitHub search API."""

    kind: Literal["github"] = "github"
    name: str
    description: Optional[str] = None
    html_url: Optional[str] = None
    owner: Optional[GitHubOwner] = None
    stargazers_count: int = 0
    topics: List[str] = Field(default_factory=list)


class DevToUser(BaseModel):
    """Dev.to article author."""

    name: Optional[str] = None
    username: Optional[str] = None


class DevToArticle(BaseModel):
    """Article from the Dev.to articles API."""

    kind: Literal["devto"] = "devto"
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    user: Optional[DevToUser] = None
    public_reactions_count: int = 0
    tag_list: List[str] = Field(default_factory=list)

    @field_validator("tag_list", mode="before")
    @classmethod
    def split_tag_string(cls, v):
        """Accept the comma-separated form returned by the single-article endpoint."""
        if v is None:
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v


RawSourceItem = Annotated[
    Union[HackerNewsHit, GitHubRepository, DevToArticle],
    Field(discriminator="kind"),
]

_RAW_ITEM_ADAPTER: TypeAdapter = TypeAdapter(RawSourceItem)


def parse_raw_item(kind: str, entry: Dict[str, Any]) -> RawSourceItem:
    """
    Validate one payload entry as the raw item of the given feed kind.

    Raises:
        ValidationError: If the entry does not fit that feed's shape
    """
    return _RAW_ITEM_ADAPTER.validate_python({**entry, "kind": kind})
