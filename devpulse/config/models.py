"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("devpulse", description="Database name")
    user: str = Field("devpulse", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")
    pool_max_size: int = Field(10, description="Maximum pooled connections", ge=1, le=100)


class LLMConfig(BaseModel):
    """Text-generation provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai)")
    model: str = Field("gpt-4o-mini", description="Model name")
    api_key_env: Optional[str] = Field("OPENAI_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for an OpenAI-compatible API")
    use_for_summaries: bool = Field(True, description="Generate article summaries with the LLM")
    use_for_search: bool = Field(True, description="Expand search queries with the LLM")


class IngestionConfig(BaseModel):
    """Source adapter configuration."""

    timeout_seconds: float = Field(15.0, description="Per-source network timeout", gt=0, le=120)
    page_size: int = Field(10, description="Items requested from each source", ge=1, le=100)
    enabled_sources: List[str] = Field(
        default_factory=lambda: ["Hacker News", "GitHub", "Dev.to"],
        description="Adapters to run",
    )
    github_token_env: Optional[str] = Field("GITHUB_TOKEN", description="Environment variable for a GitHub token")
    user_agent: str = Field("DevPulse-News-Aggregator", description="User-Agent header for feed requests")


class RateLimitConfig(BaseModel):
    """Rate limiting for ingestion and search triggers."""

    max_requests: int = Field(10, description="Requests allowed per window", ge=1)
    window_ms: int = Field(60_000, description="Window length in milliseconds", ge=1)


class QueryConfig(BaseModel):
    """Default query parameters."""

    page_size: int = Field(10, description="Default page size", ge=1, le=100)
    max_search_keywords: int = Field(12, description="Cap on search keywords", ge=1, le=50)


class PreferencesConfig(BaseModel):
    """Default feed preferences for the CLI user."""

    sources: List[str] = Field(default_factory=list, description="Preferred sources")
    tags: List[str] = Field(default_factory=list, description="Preferred topic tags")


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)
