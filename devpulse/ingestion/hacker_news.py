"""Hacker News adapter (Algolia search API)."""

from typing import Optional

from .base import SourceAdapter
from .models import HackerNewsHit, NormalizedItem

HN_SEARCH_URL = "https://hn.algolia.com/api/v1/search_by_date"


class HackerNewsAdapter(SourceAdapter):
    """Latest Hacker News stories with more than 50 points."""

    name = "Hacker News"
    kind = "hacker_news"
    icon = "🔥"
    min_score = 50
    array_field = "hits"

    @property
    def endpoint(self) -> str:
        return f"{HN_SEARCH_URL}?tags=story&hitsPerPage={self.page_size}"

    def popularity(self, raw: HackerNewsHit) -> int:
        return raw.points or 0

    def normalize(self, raw: HackerNewsHit) -> Optional[NormalizedItem]:
        # Tags are left empty so the categorizer assigns them from the title.
        return self.build_item(
            raw.title,
            raw.url,
            author=raw.author,
            score=raw.points,
        )
