"""News service: the query surface over ingestion, ranking and rate limiting."""

from typing import Optional, Sequence

from rich.console import Console

from .config import Config
from .db import ArticleStore, PostgresArticleStore
from .errors import RateLimitExceeded
from .generation import KeywordExpander, SummaryGenerator, create_text_generator
from .ingestion import create_adapters
from .models import ALL_SOURCES, UserPreferences
from .pipeline import IngestionCoordinator, IngestionResult
from .ranking import ArticleQueryEngine, Pagination, QueryResult
from .ratelimit import RateLimiter

console = Console()


class NewsService:
    """Entry points used by the CLI (or a web layer) for feeds, search and refresh."""

    def __init__(
        self,
        store: ArticleStore,
        coordinator: IngestionCoordinator,
        engine: ArticleQueryEngine,
        rate_limiter: RateLimiter,
    ) -> None:
        self.store = store
        self.coordinator = coordinator
        self.engine = engine
        self.rate_limiter = rate_limiter

    def _enforce_limit(self, identifier: str) -> None:
        decision = self.rate_limiter.check(identifier)
        if not decision.allowed:
            raise RateLimitExceeded(identifier, decision.remaining, decision.reset_after_ms)

    def list_articles(
        self,
        source: str = ALL_SOURCES,
        preferred_sources: Sequence[str] = (),
        preferred_tags: Sequence[str] = (),
        offset: int = 0,
        limit: int = 10,
    ) -> QueryResult:
        """
        List a page of the feed.

        Args:
            source: Single-source filter, "All" for every source
            preferred_sources: Preferred sources, override ``source`` when set
            preferred_tags: Tags that rank matching articles first
            offset: Articles to skip
            limit: Page size

        Returns:
            Page of articles and whether more exist

        Raises:
            ValidationError: If offset or limit are out of range
        """
        preferences = UserPreferences(sources=list(preferred_sources), tags=list(preferred_tags))
        return self.engine.query(
            source=source,
            preferences=preferences,
            pagination=Pagination(offset=offset, limit=limit),
        )

    async def trigger_ingestion(self, identifier: str) -> IngestionResult:
        """
        Run an ingestion pass on behalf of a client.

        Raises:
            RateLimitExceeded: If the client is over its budget
            IngestionFailed: If the store fails mid-run
        """
        self._enforce_limit(identifier)
        return await self.coordinator.ingest()

    def search(self, identifier: str, query: str, offset: int = 0, limit: int = 10) -> QueryResult:
        """
        Keyword search on behalf of a client.

        Raises:
            RateLimitExceeded: If the client is over its budget
        """
        self._enforce_limit(identifier)
        return self.engine.search(query, Pagination(offset=offset, limit=limit))


def build_service(config: Config, store: Optional[ArticleStore] = None) -> NewsService:
    """
    Wire a service from configuration.

    Args:
        config: Configuration manager
        store: Article store, Postgres from configuration when omitted

    Returns:
        Ready-to-use service
    """
    settings = config.config
    llm_config = config.get_llm_config()
    generator = create_text_generator(llm_config)
    if generator is None:
        console.print("[dim]No LLM configured; using template summaries and basic search.[/dim]")

    if store is None:
        store = PostgresArticleStore(config.get_db_config())

    summarizer = SummaryGenerator(generator if settings.llm.use_for_summaries else None)
    expander = KeywordExpander(
        generator if settings.llm.use_for_search else None,
        max_keywords=settings.query.max_search_keywords,
    )

    coordinator = IngestionCoordinator(
        adapters=create_adapters(settings.ingestion, github_token=config.get_github_token()),
        store=store,
        summarizer=summarizer,
    )
    engine = ArticleQueryEngine(store, keyword_expander=expander)
    rate_limiter = RateLimiter(
        max_requests=settings.rate_limit.max_requests,
        window_ms=settings.rate_limit.window_ms,
    )
    return NewsService(store, coordinator, engine, rate_limiter)
