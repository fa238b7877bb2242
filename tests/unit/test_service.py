"""Unit tests for the news service."""

import pytest
from pydantic import ValidationError

from devpulse.config import Config
from devpulse.db import InMemoryArticleStore
from devpulse.errors import RateLimitExceeded
from devpulse.generation import OpenAIProvider
from devpulse.pipeline import IngestionCoordinator
from devpulse.ranking import ArticleQueryEngine
from devpulse.ratelimit import RateLimiter
from devpulse.service import NewsService, build_service

from tests.helpers.clock import ManualMsClock, StepClock
from tests.helpers.factories import StaticAdapter, make_item, seed_article


@pytest.fixture
def service(store: InMemoryArticleStore, ms_clock: ManualMsClock) -> NewsService:
    coordinator = IngestionCoordinator(
        [StaticAdapter("Hacker News", [make_item(url="https://example.com/1", title="Rust news")])],
        store,
        clock=StepClock(),
    )
    return NewsService(
        store,
        coordinator,
        ArticleQueryEngine(store),
        RateLimiter(max_requests=2, window_ms=60_000, clock=ms_clock),
    )


class TestNewsService:
    """Tests for NewsService."""

    def test_list_articles(self, service: NewsService, store: InMemoryArticleStore) -> None:
        """Test listing with a source filter."""
        seed_article(store, "https://a", source="GitHub")
        seed_article(store, "https://b", source="Dev.to")
        page = service.list_articles(source="GitHub")
        assert [a.url for a in page.items] == ["https://a"]

    def test_list_articles_not_rate_limited(self, service: NewsService) -> None:
        """Test that browsing is never limited."""
        for _ in range(5):
            service.list_articles()

    def test_list_articles_validates_limit(self, service: NewsService) -> None:
        """Test that an invalid page size is rejected."""
        with pytest.raises(ValidationError):
            service.list_articles(limit=0)

    @pytest.mark.asyncio
    async def test_trigger_ingestion(self, service: NewsService, store: InMemoryArticleStore) -> None:
        """Test that triggering ingestion writes to the store."""
        result = await service.trigger_ingestion("1.2.3.4")
        assert result.inserted == 1
        assert len(store) == 1

    def test_search_rate_limited(self, service: NewsService, ms_clock: ManualMsClock) -> None:
        """Test that the third search in a window is refused."""
        service.search("1.2.3.4", "rust")
        service.search("1.2.3.4", "rust")
        ms_clock.advance(1500)

        with pytest.raises(RateLimitExceeded) as exc_info:
            service.search("1.2.3.4", "rust")

        assert exc_info.value.retry_after_seconds == 59
        assert exc_info.value.remaining == 0

    @pytest.mark.asyncio
    async def test_ingestion_and_search_share_budget(self, service: NewsService) -> None:
        """Test that both triggers count against one identifier."""
        await service.trigger_ingestion("client")
        service.search("client", "rust")
        with pytest.raises(RateLimitExceeded):
            await service.trigger_ingestion("client")


class TestBuildService:
    """Tests for build_service()."""

    def _config(self, tmp_path, body: str) -> Config:
        path = tmp_path / "config.yaml"
        path.write_text(body)
        return Config(path)

    def test_without_llm(self, tmp_path, monkeypatch) -> None:
        """Test wiring with no API key."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        config = self._config(
            tmp_path,
            "ingestion:\n  enabled_sources: [GitHub]\nrate_limit:\n  max_requests: 3\n",
        )
        store = InMemoryArticleStore()

        service = build_service(config, store=store)

        assert service.store is store
        assert [a.name for a in service.coordinator.adapters] == ["GitHub"]
        assert service.coordinator.summarizer.generator is None
        assert service.engine.keyword_expander.generator is None
        assert service.rate_limiter.max_requests == 3

    def test_llm_flags(self, tmp_path, monkeypatch) -> None:
        """Test that summaries and search can use the LLM independently."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        config = self._config(tmp_path, "llm:\n  use_for_summaries: false\n")

        service = build_service(config, store=InMemoryArticleStore())

        assert service.coordinator.summarizer.generator is None
        assert isinstance(service.engine.keyword_expander.generator, OpenAIProvider)

    def test_defaults_to_postgres(self, tmp_path, monkeypatch) -> None:
        """Test that the Postgres store is used when none is given."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        config = self._config(tmp_path, "postgres:\n  host: db.internal\n")
        service = build_service(config)
        assert service.store.db_config["host"] == "db.internal"
