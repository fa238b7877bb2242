"""Unit tests for store statistics."""

from datetime import timedelta

from devpulse.db import InMemoryArticleStore
from devpulse.ranking import collect_stats

from tests.helpers.clock import FIXED_NOW
from tests.helpers.factories import seed_article


class TestCollectStats:
    """Tests for collect_stats()."""

    def test_counts(self, store: InMemoryArticleStore) -> None:
        """Test totals, today's count and per-source counts."""
        seed_article(store, "https://yesterday", source="GitHub", created_at=FIXED_NOW - timedelta(days=1))
        seed_article(store, "https://midnight", source="GitHub", created_at=FIXED_NOW.replace(hour=0))
        seed_article(store, "https://noon", source="Dev.to", created_at=FIXED_NOW)

        stats = collect_stats(store, now=FIXED_NOW + timedelta(hours=1))

        assert stats.total_articles == 3
        assert stats.today_articles == 2
        assert stats.source_stats == {"GitHub": 2, "Dev.to": 1}

    def test_recent_articles(self, store: InMemoryArticleStore) -> None:
        """Test that the five newest articles are listed newest first."""
        for i in range(8):
            seed_article(store, f"https://example.com/{i}", created_at=FIXED_NOW + timedelta(minutes=i))

        stats = collect_stats(store, now=FIXED_NOW)

        assert [a.url for a in stats.recent_articles] == [f"https://example.com/{i}" for i in (7, 6, 5, 4, 3)]

    def test_empty_store(self, store: InMemoryArticleStore) -> None:
        """Test statistics of an empty store."""
        stats = collect_stats(store)
        assert stats.total_articles == 0
        assert stats.today_articles == 0
        assert stats.source_stats == {}
        assert stats.recent_articles == []
