"""User preference model consumed by the ranking engine."""

from typing import List

from pydantic import BaseModel, Field

ALL_SOURCES = "All"


class UserPreferences(BaseModel):
    """Per-user feed preferences.

    ``sources`` may contain the ``"All"`` sentinel, which means no
    restriction.
    """

    sources: List[str] = Field(default_factory=list, description="Preferred sources")
    tags: List[str] = Field(default_factory=list, description="Preferred topic tags")

    def effective_sources(self) -> List[str]:
        """Preferred sources with the "All" sentinel removed."""
        return [s for s in self.sources if s and s != ALL_SOURCES]

    def effective_tags(self) -> List[str]:
        """Preferred tags with blanks removed."""
        return [t for t in self.tags if t]
