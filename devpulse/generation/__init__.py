"""Summary and search keyword generation."""

from .keywords import KeywordExpander, tokenize_query
from .llm_provider import OpenAIProvider, TextGenerator, create_text_generator
from .summary import SummaryGenerator, extract_keywords, template_summary

__all__ = [
    "KeywordExpander",
    "OpenAIProvider",
    "SummaryGenerator",
    "TextGenerator",
    "create_text_generator",
    "extract_keywords",
    "template_summary",
    "tokenize_query",
]
