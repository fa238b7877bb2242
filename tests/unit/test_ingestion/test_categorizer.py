"""Unit tests for title categorization."""

from devpulse.ingestion.categorizer import CATEGORY_KEYWORDS, FALLBACK_TAG, categorize


class TestCategorize:
    """Tests for categorize()."""

    def test_single_category(self) -> None:
        """Test a title matching one category."""
        assert categorize("Understanding Kubernetes operators") == ["DevOps"]

    def test_no_match_falls_back(self) -> None:
        """Test that an unmatched title is tagged Tech."""
        assert categorize("Thoughts on gardening") == [FALLBACK_TAG]

    def test_empty_title(self) -> None:
        """Test that an empty title is tagged Tech."""
        assert categorize("") == [FALLBACK_TAG]

    def test_case_insensitive(self) -> None:
        """Test that matching ignores case."""
        assert categorize("POSTGRES TIPS") == ["Database"]

    def test_table_order_and_cap(self) -> None:
        """Test that at most three tags are returned in table order."""
        tags = categorize("Python AI tool for Docker with React frontend")
        assert tags == ["JavaScript", "AI", "Python"]

    def test_tags_come_from_table(self) -> None:
        """Test that every tag is a known category or the fallback."""
        titles = ["Rust async runtime", "GraphQL API security breach", "Startup raises funding"]
        for title in titles:
            tags = categorize(title)
            assert 1 <= len(tags) <= 3
            assert all(tag in CATEGORY_KEYWORDS or tag == FALLBACK_TAG for tag in tags)
