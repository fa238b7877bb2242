"""Dev.to adapter."""

from typing import Optional

from .base import SourceAdapter
from .models import DevToArticle, NormalizedItem

DEVTO_ARTICLES_URL = "https://dev.to/api/articles"
MAX_TAGS = 3


class DevToAdapter(SourceAdapter):
    """Latest Dev.to articles with more than 5 reactions."""

    name = "Dev.to"
    kind = "devto"
    icon = "💻"
    min_score = 5

    @property
    def endpoint(self) -> str:
        return f"{DEVTO_ARTICLES_URL}?per_page={self.page_size}"

    def popularity(self, raw: DevToArticle) -> int:
        return raw.public_reactions_count

    def normalize(self, raw: DevToArticle) -> Optional[NormalizedItem]:
        author = None
        if raw.user:
            author = raw.user.name or raw.user.username
        return self.build_item(
            raw.title,
            raw.url,
            author=author,
            score=raw.public_reactions_count,
            tags=raw.tag_list[:MAX_TAGS],
            description=raw.description,
        )
