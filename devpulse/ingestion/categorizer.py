"""Keyword-based topic categorization."""

from typing import Dict, List

FALLBACK_TAG = "Tech"
MAX_TAGS = 3

# Declaration order is priority order.
CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "JavaScript": ["javascript", "js", "node", "react", "vue", "angular", "typescript", "npm", "webpack"],
    "AI": ["ai", "machine learning", "ml", "gpt", "openai", "artificial intelligence", "neural", "llm"],
    "Python": ["python", "django", "flask", "pandas", "numpy", "pytorch", "tensorflow"],
    "Web Development": ["web", "frontend", "backend", "css", "html", "api", "rest", "graphql"],
    "DevOps": ["docker", "kubernetes", "aws", "cloud", "deployment", "ci/cd", "terraform", "ansible"],
    "Mobile": ["mobile", "ios", "android", "react native", "flutter", "swift", "kotlin"],
    "Startups": ["startup", "funding", "vc", "entrepreneur", "saas", "business"],
    "Security": ["security", "vulnerability", "hack", "breach", "auth", "encryption"],
    "Database": ["database", "sql", "mongodb", "postgres", "redis", "elasticsearch"],
    "Blockchain": [
        "blockchain", "crypto", "bitcoin", "ethereum", "web3",
        "nft", "defi", "smart contract", "tokenomics",
    ],
    "Open Source": ["open source", "github", "license", "contribution", "community"],
    "Design": ["design", "ui", "ux", "web design", "graphic design"],
}


def categorize(title: str) -> List[str]:
    """
    Assign topic tags to a title.

    A category matches when any of its keywords is a substring of the
    lowercased title. At most three categories are returned, in table
    order; a title matching nothing is tagged ``["Tech"]``.

    Args:
        title: Item title

    Returns:
        One to three tags
    """
    title_lower = (title or "").lower()
    tags = [
        category
        for category, keywords in CATEGORY_KEYWORDS.items()
        if any(keyword in title_lower for keyword in keywords)
    ]
    return tags[:MAX_TAGS] if tags else [FALLBACK_TAG]
