"""Unit tests for summary generation."""

from unittest.mock import MagicMock

import pytest

from devpulse.errors import GenerationUnavailable
from devpulse.generation import SummaryGenerator, extract_keywords, template_summary
from devpulse.generation.summary import SUMMARY_MAX_TOKENS, SUMMARY_TEMPLATES

from tests.helpers.factories import make_item


class TestExtractKeywords:
    """Tests for extract_keywords()."""

    def test_known_keywords(self) -> None:
        """Test that up to two tech keywords are named."""
        assert extract_keywords("Python and Docker and AWS") == "Focuses on Python and Docker"

    def test_fallback_first_words(self) -> None:
        """Test the first-four-words fallback."""
        assert extract_keywords("Why I left my job today") == "About Why I left my"


class TestTemplateSummary:
    """Tests for template_summary()."""

    @pytest.mark.parametrize("source", ["Hacker News", "GitHub", "Dev.to", "Lobsters"])
    def test_non_empty_for_every_source(self, source: str) -> None:
        """Test that every source yields a filled-in summary."""
        item = make_item(source=source, score=42, author="ada")
        summary = template_summary(item)
        assert summary.strip()
        assert "{" not in summary

    def test_deterministic(self) -> None:
        """Test that the same item always gets the same wording."""
        item = make_item(url="https://example.com/stable", score=7)
        assert template_summary(item) == template_summary(item)

    def test_uses_source_templates(self) -> None:
        """Test that a GitHub item is described with a GitHub template."""
        item = make_item(source="GitHub", score=99, author="alice", description="Tiny web server")
        summary = template_summary(item)
        assert "99" in summary
        assert any(t.split("{")[0] in summary for t in SUMMARY_TEMPLATES["GitHub"])

    def test_missing_author_and_score(self) -> None:
        """Test placeholders when the source omits author and score."""
        item = make_item(source="Hacker News")
        assert template_summary(item)


class TestSummaryGenerator:
    """Tests for SummaryGenerator."""

    def test_uses_generator(self) -> None:
        """Test that generated text is returned when available."""
        generator = MagicMock()
        generator.generate.return_value = "  A generated summary.  "
        summarizer = SummaryGenerator(generator)

        assert summarizer.summarize(make_item()) == "A generated summary."
        assert summarizer.generated == 1
        assert summarizer.fallbacks == 0
        assert generator.generate.call_args.kwargs["max_tokens"] == SUMMARY_MAX_TOKENS

    def test_fallback_on_generation_error(self) -> None:
        """Test template fallback when the provider fails."""
        generator = MagicMock()
        generator.generate.side_effect = GenerationUnavailable("quota")
        summarizer = SummaryGenerator(generator)
        item = make_item()

        assert summarizer.summarize(item) == template_summary(item)
        assert summarizer.fallbacks == 1

    def test_fallback_on_unexpected_error(self) -> None:
        """Test that any provider exception still yields a summary."""
        generator = MagicMock()
        generator.generate.side_effect = RuntimeError("socket closed")
        assert SummaryGenerator(generator).summarize(make_item()).strip()

    def test_fallback_on_blank_output(self) -> None:
        """Test that blank generated text is not accepted."""
        generator = MagicMock()
        generator.generate.return_value = "   "
        item = make_item()
        assert SummaryGenerator(generator).summarize(item) == template_summary(item)

    def test_no_generator(self) -> None:
        """Test template-only operation."""
        item = make_item(source="Dev.to", score=12)
        assert SummaryGenerator().summarize(item) == template_summary(item)
