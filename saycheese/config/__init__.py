"""Configuration management for the trending aggregator."""

from .defaults import create_default_sources
from .loader import Config, apply_env_overrides, load_config, load_sources, save_config, save_sources
from .models import (
    ApiKeysConfig,
    CacheConfig,
    ConfigModel,
    FeedSource,
    FilterConfig,
    HttpConfig,
    RankingConfig,
    SourcesModel,
    SubredditSource,
)

__all__ = [
    "ApiKeysConfig",
    "CacheConfig",
    "Config",
    "ConfigModel",
    "FeedSource",
    "FilterConfig",
    "HttpConfig",
    "RankingConfig",
    "SourcesModel",
    "SubredditSource",
    "apply_env_overrides",
    "create_default_sources",
    "load_config",
    "load_sources",
    "save_config",
    "save_sources",
]
