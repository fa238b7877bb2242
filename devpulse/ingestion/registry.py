"""Adapter construction from configuration."""

from typing import Dict, List, Optional, Type

import httpx

from ..config import IngestionConfig
from .base import SourceAdapter
from .devto import DevToAdapter
from .github import GitHubAdapter
from .hacker_news import HackerNewsAdapter

ADAPTERS: Dict[str, Type[SourceAdapter]] = {
    HackerNewsAdapter.name: HackerNewsAdapter,
    GitHubAdapter.name: GitHubAdapter,
    DevToAdapter.name: DevToAdapter,
}


def create_adapters(
    config: IngestionConfig,
    github_token: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[SourceAdapter]:
    """
    Build the enabled adapters.

    Args:
        config: Ingestion configuration
        github_token: Optional GitHub API token
        transport: Custom httpx transport shared by all adapters (for testing)

    Returns:
        Adapters in configuration order

    Raises:
        ValueError: If an enabled source has no adapter
    """
    adapters: List[SourceAdapter] = []
    for name in config.enabled_sources:
        adapter_cls = ADAPTERS.get(name)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown source '{name}'. Available: {', '.join(ADAPTERS)}"
            )

        kwargs = {
            "timeout": config.timeout_seconds,
            "page_size": config.page_size,
            "user_agent": config.user_agent,
            "transport": transport,
        }
        if adapter_cls is GitHubAdapter:
            adapters.append(GitHubAdapter(token=github_token, **kwargs))
        else:
            adapters.append(adapter_cls(**kwargs))
    return adapters
