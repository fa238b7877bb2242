"""Unit tests for the text-generation provider."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from openai import OpenAIError

from devpulse.errors import GenerationUnavailable
from devpulse.generation import OpenAIProvider, create_text_generator


def completion(content, total_tokens: int = 30) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(total_tokens=total_tokens),
    )


class TestOpenAIProvider:
    """Tests for OpenAIProvider."""

    def _provider(self) -> OpenAIProvider:
        provider = OpenAIProvider(api_key="test-key")
        provider.client = MagicMock()
        return provider

    def test_generate(self) -> None:
        """Test a successful completion and usage accounting."""
        provider = self._provider()
        provider.client.chat.completions.create.return_value = completion(" hello ")

        assert provider.generate("prompt", max_tokens=50, temperature=0.3) == "hello"
        stats = provider.get_usage_stats()
        assert stats["api_calls"] == 1
        assert stats["total_tokens"] == 30
        kwargs = provider.client.chat.completions.create.call_args.kwargs
        assert kwargs["max_tokens"] == 50

    def test_api_error(self) -> None:
        """Test that client errors become GenerationUnavailable."""
        provider = self._provider()
        provider.client.chat.completions.create.side_effect = OpenAIError("quota exceeded")

        with pytest.raises(GenerationUnavailable):
            provider.generate("prompt")
        assert provider.failures == 1

    def test_empty_completion(self) -> None:
        """Test that an empty completion is an error."""
        provider = self._provider()
        provider.client.chat.completions.create.return_value = completion(None)

        with pytest.raises(GenerationUnavailable):
            provider.generate("prompt")


class TestCreateTextGenerator:
    """Tests for create_text_generator()."""

    def test_without_key(self) -> None:
        """Test that a missing API key disables generation."""
        assert create_text_generator({"provider": "openai", "api_key": None}) is None

    def test_unknown_provider(self) -> None:
        """Test that unknown providers disable generation."""
        assert create_text_generator({"provider": "mystery", "api_key": "k"}) is None

    def test_openai(self) -> None:
        """Test building the OpenAI provider."""
        generator = create_text_generator({"provider": "openai", "api_key": "k", "model": "gpt-4o-mini"})
        assert isinstance(generator, OpenAIProvider)
        assert generator.model == "gpt-4o-mini"
