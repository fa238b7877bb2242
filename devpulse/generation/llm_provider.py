"""Text-generation provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError
from rich.console import Console

from ..errors import GenerationUnavailable

console = Console()


class TextGenerator(ABC):
    """Abstract base class for text-generation providers."""

    @abstractmethod
    def generate(self, prompt: str, max_tokens: int = 150, temperature: float = 0.3) -> str:
        """
        Generate a completion for a prompt.

        Args:
            prompt: Prompt text
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature

        Returns:
            Generated text

        Raises:
            GenerationUnavailable: If the provider fails or returns nothing
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(TextGenerator):
    """OpenAI implementation of the text-generation provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        timeout: float = 20.0,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            base_url: Custom base URL (for OpenAI-compatible servers)
            timeout: Request timeout in seconds
        """
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=1)
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0
        self.failures = 0

    def generate(self, prompt: str, max_tokens: int = 150, temperature: float = 0.3) -> str:
        """Generate text using the chat completions API."""
        try:
            self.api_calls += 1
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            self.failures += 1
            raise GenerationUnavailable(f"OpenAI request failed: {e}") from e

        if response.usage:
            self.total_tokens += response.usage.total_tokens

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            self.failures += 1
            raise GenerationUnavailable("OpenAI returned an empty completion")

        return content.strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "failures": self.failures,
            "model": self.model,
        }


def create_text_generator(llm_config: Dict[str, Any]) -> Optional[TextGenerator]:
    """
    Build the configured provider.

    Returns None when the capability is not configured; every caller has a
    deterministic fallback for that case.
    """
    provider = llm_config.get("provider")
    if provider != "openai":
        console.print(f"[yellow]Warning: Unknown LLM provider '{provider}'. Using fallbacks only.[/yellow]")
        return None

    api_key = llm_config.get("api_key")
    if not api_key:
        return None

    return OpenAIProvider(
        api_key=api_key,
        model=llm_config.get("model", "gpt-4o-mini"),
        base_url=llm_config.get("base_url"),
    )
