"""GitHub adapter (repository search, recently created and most starred)."""

from typing import Any, Dict, Optional

import pendulum

from .base import SourceAdapter
from .models import GitHubRepository, NormalizedItem

GITHUB_SEARCH_URL = "https://api.github.com/search/repositories"
LOOKBACK_DAYS = 7
MAX_TOPICS = 3


class GitHubAdapter(SourceAdapter):
    """Repositories created in the last week with more than 10 stars."""

    name = "GitHub"
    kind = "github"
    icon = "🐙"
    min_score = 10
    array_field = "items"

    def __init__(self, token: Optional[str] = None, **kwargs: Any) -> None:
        """
        Initialize GitHub adapter.

        Args:
            token: Optional API token, raises the unauthenticated rate limit
            **kwargs: Passed to ``SourceAdapter``
        """
        super().__init__(**kwargs)
        self.token = token

    @property
    def endpoint(self) -> str:
        since = pendulum.now("UTC").subtract(days=LOOKBACK_DAYS).to_date_string()
        return (
            f"{GITHUB_SEARCH_URL}?q=created:>{since}"
            f"&sort=stars&order=desc&per_page={self.page_size}"
        )

    def headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github.v3+json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def popularity(self, raw: GitHubRepository) -> int:
        return raw.stargazers_count

    def normalize(self, raw: GitHubRepository) -> Optional[NormalizedItem]:
        return self.build_item(
            f"{raw.name}: {raw.description or 'No description'}",
            raw.html_url,
            author=raw.owner.login if raw.owner else None,
            score=raw.stargazers_count,
            tags=raw.topics[:MAX_TOPICS],
            description=raw.description,
        )
