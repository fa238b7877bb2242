"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "devpulse" / "config.yaml"
CONFIG_PATH_ENV = "DEVPULSE_CONFIG"

# Inline secrets are never written back to disk.
SECRET_FIELDS = {"postgres": {"password"}, "llm": {"api_key"}}


def secret_from_env(explicit: Optional[str], env_name: Optional[str]) -> Optional[str]:
    """Resolve a secret: explicit value first, then the named environment variable."""
    if explicit:
        return explicit
    if env_name:
        return os.environ.get(env_name) or None
    return None


class Config:
    """Configuration manager.

    Loads lazily from ``config_path`` (or ``$DEVPULSE_CONFIG``); a missing
    file means all defaults.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if config_path is None:
            config_path = Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            self._config = load_config(self.config_path) if self.config_path.exists() else ConfigModel()
        return self._config

    def get_db_config(self) -> Dict[str, Any]:
        """Postgres settings with the password resolved."""
        db_config = self.config.postgres.model_dump()
        db_config["password"] = secret_from_env(db_config.get("password"), db_config.get("password_env"))
        return db_config

    def get_llm_config(self) -> Dict[str, Any]:
        """LLM settings with the API key resolved."""
        llm_config = self.config.llm.model_dump()
        llm_config["api_key"] = secret_from_env(llm_config.get("api_key"), llm_config.get("api_key_env"))
        return llm_config

    def get_github_token(self) -> Optional[str]:
        """GitHub API token, if the configured variable is set."""
        return secret_from_env(None, self.config.ingestion.github_token_env)


def load_config(config_path: Path) -> ConfigModel:
    """
    Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML or its values are invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to a YAML file, leaving out inline secrets."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(
            config.model_dump(exclude=SECRET_FIELDS),
            f,
            default_flow_style=False,
            sort_keys=False,
        )
