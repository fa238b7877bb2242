"""Article query engine: filtering, preference ranking, search and pagination."""

from typing import List, Optional, Sequence

from rich.console import Console

from ..db.base import DESCENDING, ArticleFilter, ArticleStore
from ..generation import KeywordExpander
from ..models import ALL_SOURCES, Article, UserPreferences
from .models import Pagination, QueryResult
from .scorers import preference_sort_key, relevance_sort_key

console = Console()

CHRONOLOGICAL_SORT = [("created_at", DESCENDING), ("id", DESCENDING)]


def resolve_sources(source: Optional[str], preferences: Optional[UserPreferences]) -> Optional[List[str]]:
    """
    Decide the source restriction.

    Preferred sources (without the "All" sentinel) override the single
    source filter; "All" or no filter means unrestricted.
    """
    if preferences is not None:
        preferred = preferences.effective_sources()
        if preferred:
            return preferred

    if source and source != ALL_SOURCES:
        return [source]
    return None


def paginate(ranked: Sequence[Article], pagination: Pagination) -> QueryResult:
    """Slice a fully ranked list the same way the store path does."""
    window = list(ranked[pagination.offset : pagination.offset + pagination.limit + 1])
    return page_from_window(window, pagination.limit)


def page_from_window(window: List[Article], limit: int) -> QueryResult:
    """Turn a ``limit + 1`` window into a page and a has-more flag."""
    has_more = len(window) > limit
    return QueryResult(items=window[:limit], has_more=has_more)


class ArticleQueryEngine:
    """Serve ranked, paginated article listings and keyword search."""

    def __init__(
        self,
        store: ArticleStore,
        keyword_expander: Optional[KeywordExpander] = None,
    ) -> None:
        """
        Initialize query engine.

        Args:
            store: Article store to read from
            keyword_expander: Search keyword derivation, raw tokens when omitted
        """
        self.store = store
        self.keyword_expander = keyword_expander or KeywordExpander()

    def query(
        self,
        source: Optional[str] = ALL_SOURCES,
        preferences: Optional[UserPreferences] = None,
        pagination: Optional[Pagination] = None,
        search_query: Optional[str] = None,
    ) -> QueryResult:
        """
        List articles for a feed page.

        Args:
            source: Single-source filter from the UI, "All" for none
            preferences: User preferences, may override ``source``
            pagination: Page request
            search_query: When given, run a keyword search instead

        Returns:
            Page of articles and whether more exist
        """
        pagination = pagination or Pagination()

        if search_query is not None:
            return self.search(search_query, pagination)

        article_filter = ArticleFilter(sources=resolve_sources(source, preferences))
        preferred_tags = preferences.effective_tags() if preferences else []

        if not preferred_tags:
            window = self.store.find_many(
                article_filter,
                sort=CHRONOLOGICAL_SORT,
                skip=pagination.offset,
                limit=pagination.limit + 1,
            )
            return page_from_window(window, pagination.limit)

        # Tag matches are computed here rather than in the store.
        candidates = self.store.find_many(article_filter)
        ranked = sorted(candidates, key=lambda a: preference_sort_key(a, preferred_tags))
        return paginate(ranked, pagination)

    def search(self, search_query: str, pagination: Optional[Pagination] = None) -> QueryResult:
        """
        Keyword search ordered by relevance.

        Args:
            search_query: Free-text query
            pagination: Page request

        Returns:
            Page of matching articles; empty for a blank query
        """
        pagination = pagination or Pagination()
        keywords = self.keyword_expander.expand(search_query)
        if not keywords:
            return QueryResult()

        console.print(f"[dim]Searching with keywords: {', '.join(keywords)}[/dim]")
        candidates = self.store.find_many(ArticleFilter(keywords=keywords))
        ranked = sorted(candidates, key=lambda a: relevance_sort_key(a, keywords))
        return paginate(ranked, pagination)
