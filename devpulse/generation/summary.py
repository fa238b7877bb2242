"""Article summary generation with a deterministic template fallback."""

import hashlib
from typing import Dict, List, Optional

from rich.console import Console

from ..errors import GenerationUnavailable
from ..ingestion.models import NormalizedItem
from .llm_provider import TextGenerator

console = Console()

SUMMARY_MAX_TOKENS = 150
SUMMARY_TEMPERATURE = 0.5

TECH_KEYWORDS = [
    "JavaScript", "Python", "React", "Node.js", "AI", "Machine Learning",
    "Docker", "Kubernetes", "AWS", "TypeScript", "Vue", "Angular",
    "Database", "API", "Frontend", "Backend", "DevOps", "Security",
    "Blockchain", "Web3", "Crypto", "Ethereum", "Bitcoin", "DeFi",
    "NFTs", "Smart Contracts",
]

# Fields filled by template_summary().
SUMMARY_TEMPLATES: Dict[str, List[str]] = {
    "Hacker News": [
        "Popular discussion on Hacker News with {score} points by {author}. {topic}.",
        "Trending tech story with {score} upvotes. Community discussing {topic_lower}.",
        "Hot topic on HN: {topic_lower}. {score} points and active discussion.",
    ],
    "GitHub": [
        "New repository by {author} with {score} stars. {details}.",
        "Trending GitHub project: {topic_lower}. {score} developers starred this repo.",
        "Popular open-source project with {score} stars. {description_or_repo}.",
    ],
    "Dev.to": [
        "Developer article by {author} with {score} reactions. {details}.",
        "Community favorite: {topic_lower}. {score} developers found this helpful.",
        "Popular dev article with {score} reactions. {description_or_read}.",
    ],
}
DEFAULT_TEMPLATE_SOURCE = "Hacker News"


def extract_keywords(title: str) -> str:
    """Describe a title by the tech keywords it mentions."""
    title_lower = title.lower()
    found = [k for k in TECH_KEYWORDS if k.lower() in title_lower]
    if found:
        return f"Focuses on {' and '.join(found[:2])}"

    words = " ".join(title.split()[:4])
    return f"About {words}"


def _template_index(item: NormalizedItem, count: int) -> int:
    """Stable template choice so re-ingestion keeps the same wording."""
    digest = hashlib.sha256(item.url.encode()).hexdigest()
    return int(digest[:8], 16) % count


def template_summary(item: NormalizedItem) -> str:
    """
    Build a summary from the per-source templates.

    Args:
        item: Normalized item

    Returns:
        Non-empty summary text
    """
    templates = SUMMARY_TEMPLATES.get(item.source) or SUMMARY_TEMPLATES[DEFAULT_TEMPLATE_SOURCE]
    template = templates[_template_index(item, len(templates))]

    topic = extract_keywords(item.title)
    description = (item.description or "").strip().rstrip(".")
    return template.format(
        score=item.score or 0,
        author=item.author or "unknown",
        topic=topic,
        topic_lower=topic[0].lower() + topic[1:],
        details=description or topic,
        description_or_repo=description or "Check out this interesting repository",
        description_or_read=description or "Worth reading for developers",
    )


def build_summary_prompt(item: NormalizedItem) -> str:
    """Prompt for the generated summary."""
    return f"""Summarize this tech article in 2-3 sentences for developers. Focus on key technical points and why it matters.

Title: {item.title}
Source: {item.source}
Author: {item.author or "unknown"}
Score: {item.score or 0}
URL: {item.url}

Summary:"""


class SummaryGenerator:
    """Produce a short summary for every item.

    Uses the text generator when one is configured and falls back to
    ``template_summary`` on absence or failure; ``summarize`` never raises.
    """

    def __init__(self, generator: Optional[TextGenerator] = None) -> None:
        """
        Initialize summary generator.

        Args:
            generator: Optional text-generation provider
        """
        self.generator = generator
        self.generated = 0
        self.fallbacks = 0

    def summarize(self, item: NormalizedItem) -> str:
        """Return a non-empty summary for an item."""
        if self.generator is not None:
            try:
                text = self.generator.generate(
                    build_summary_prompt(item),
                    max_tokens=SUMMARY_MAX_TOKENS,
                    temperature=SUMMARY_TEMPERATURE,
                ).strip()
                if text:
                    self.generated += 1
                    return text
            except GenerationUnavailable as e:
                console.print(f"[dim]Summary generation unavailable for '{item.title[:50]}': {e}[/dim]")
            except Exception as e:
                console.print(f"[dim]Summary generation failed for '{item.title[:50]}': {e}[/dim]")

        self.fallbacks += 1
        return template_summary(item)
