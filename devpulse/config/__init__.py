"""Configuration management for DevPulse."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import (
    ConfigModel,
    IngestionConfig,
    LLMConfig,
    PostgresConfig,
    PreferencesConfig,
    QueryConfig,
    RateLimitConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "DEFAULT_CONFIG_PATH",
    "IngestionConfig",
    "LLMConfig",
    "PostgresConfig",
    "PreferencesConfig",
    "QueryConfig",
    "RateLimitConfig",
    "load_config",
    "save_config",
]
