"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .defaults import create_default_sources
from .models import ConfigModel, FeedSource, SourcesModel, SubredditSource

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "saycheese" / "config.yaml"

# env var -> (section, field)
ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "SAYCHEESE_RECENCY_DAYS": ("filters", "recency_days"),
    "SAYCHEESE_MAX_ITEMS_PER_CATEGORY": ("ranking", "max_items_per_category"),
    "SAYCHEESE_MAX_PER_SOURCE": ("ranking", "max_per_source"),
    "SAYCHEESE_TELUGU_CACHE_TTL": ("cache", "telugu_ttl_seconds"),
    "SAYCHEESE_ALTERNATIVE_CACHE_TTL": ("cache", "alternative_ttl_seconds"),
    "SAYCHEESE_URL_CACHE_TTL": ("cache", "url_ttl_seconds"),
    "SAYCHEESE_VALIDATE_URLS": ("http", "validate_urls"),
    "SAYCHEESE_LOG_LEVEL": ("", "log_level"),
}

SOURCE_GROUPS = {
    "telugu_feeds": FeedSource,
    "telugu_subreddits": SubredditSource,
    "general_feeds": FeedSource,
    "general_subreddits": SubredditSource,
}


class Config:
    """Configuration manager."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config manager.

        Args:
            config_path: Explicit config file. When omitted the default location is
                used and silently falls back to built-in defaults if absent.
            environ: Environment mapping for overrides and API keys (defaults to os.environ)
        """
        self._explicit = config_path is not None
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.environ = environ if environ is not None else os.environ
        self._config: Optional[ConfigModel] = None
        self._sources: Optional[SourcesModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config with environment overrides applied."""
        if self._config is None:
            if self.config_path.exists() or self._explicit:
                try:
                    base = load_config(self.config_path)
                except FileNotFoundError as e:
                    raise ConfigurationError(str(e)) from e
                except ValueError as e:
                    raise ConfigurationError(str(e)) from e
            else:
                base = ConfigModel()
            self._config = apply_env_overrides(base, self.environ)
        return self._config

    @property
    def sources_path(self) -> Path:
        """Sources file next to the config file."""
        return self.config_path.parent / "sources.yaml"

    @property
    def sources(self) -> SourcesModel:
        """Get configured sources, falling back to the built-in lists."""
        if self._sources is None:
            if self.sources_path.exists():
                try:
                    self._sources = load_sources(self.sources_path)
                except ValueError as e:
                    raise ConfigurationError(str(e)) from e
            else:
                self._sources = create_default_sources()
        return self._sources

    def get_api_key(self, name: str) -> Optional[str]:
        """Resolve an optional upstream API key (``news_api`` or ``guardian``)."""
        env_name = self.config.api_keys.env_var(name)
        if not env_name:
            return None
        value = self.environ.get(env_name, "").strip()
        return value or None


def apply_env_overrides(config: ConfigModel, environ: Mapping[str, str]) -> ConfigModel:
    """Return a copy of config with SAYCHEESE_* environment overrides applied."""
    data = config.model_dump()
    changed = False
    for env_name, (section, field) in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        target = data[section] if section else data
        target[field] = raw
        changed = True

    if not changed:
        return config

    try:
        return ConfigModel(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment override: {e}") from e


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def load_sources(sources_path: Path) -> SourcesModel:
    """Load sources from YAML file, skipping invalid entries."""
    if not sources_path.exists():
        raise FileNotFoundError(f"Sources file not found: {sources_path}")

    try:
        with open(sources_path) as f:
            sources_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in sources file: {e}")

    valid: Dict[str, list] = {}
    for group, model in SOURCE_GROUPS.items():
        entries = []
        for entry in sources_data.get(group) or []:
            try:
                entries.append(model(**entry))
            except (ValidationError, TypeError) as e:
                name = entry.get("name", "unknown") if isinstance(entry, dict) else entry
                logger.warning("Skipping invalid source %s in %s: %s", name, group, e)
        valid[group] = entries

    return SourcesModel(**valid)


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def save_sources(sources: SourcesModel, sources_path: Path) -> None:
    """Save sources to YAML file."""
    sources_path.parent.mkdir(parents=True, exist_ok=True)

    with open(sources_path, "w") as f:
        yaml.safe_dump(sources.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
