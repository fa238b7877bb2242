"""Search keyword derivation."""

from typing import List, Optional

from rich.console import Console

from ..errors import GenerationUnavailable
from .llm_provider import TextGenerator

console = Console()

KEYWORD_MAX_TOKENS = 50
KEYWORD_TEMPERATURE = 0.3
DEFAULT_MAX_KEYWORDS = 12


def tokenize_query(query: str) -> List[str]:
    """Split a query on whitespace."""
    return [token for token in (query or "").split() if token.strip()]


def _dedupe(keywords: List[str]) -> List[str]:
    seen = set()
    unique = []
    for keyword in keywords:
        key = keyword.lower()
        if key not in seen:
            seen.add(key)
            unique.append(keyword)
    return unique


def build_keyword_prompt(query: str) -> str:
    """Prompt asking for related search terms."""
    return f"""Given the user's search query, generate a comma-separated list of 5-10 relevant keywords that can be used to find tech articles. Focus on technologies, concepts, and topics.

User Query: "{query}"
Keywords:"""


class KeywordExpander:
    """Turn a free-text query into a small keyword set.

    The raw tokens are always kept; a configured text generator may add
    related terms. Generation problems leave the raw tokens alone.
    """

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        max_keywords: int = DEFAULT_MAX_KEYWORDS,
    ) -> None:
        self.generator = generator
        self.max_keywords = max_keywords

    def _generate(self, query: str) -> List[str]:
        if self.generator is None:
            return []
        try:
            text = self.generator.generate(
                build_keyword_prompt(query),
                max_tokens=KEYWORD_MAX_TOKENS,
                temperature=KEYWORD_TEMPERATURE,
            )
        except GenerationUnavailable as e:
            console.print(f"[dim]Keyword expansion unavailable, using basic query: {e}[/dim]")
            return []
        except Exception as e:
            console.print(f"[dim]Keyword expansion failed, using basic query: {e}[/dim]")
            return []

        return [k.strip().strip('"\'') for k in text.split(",") if k.strip().strip('"\'')]

    def expand(self, query: str) -> List[str]:
        """
        Derive search keywords for a query.

        Args:
            query: User query

        Returns:
            Case-insensitively unique keywords, raw tokens first
        """
        tokens = tokenize_query(query)
        if not tokens:
            return []
        return _dedupe(tokens + self._generate(query))[: self.max_keywords]
