"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models import Platform, Priority


class FilterConfig(BaseModel):
    """Temporal and quality filter thresholds."""

    recency_days: int = Field(7, description="Recency window in days", ge=1, le=90)
    min_year: int = Field(2020, description="Timestamps before Jan 1 of this year are rejected")
    future_tolerance_days: int = Field(1, description="How far in the future a timestamp may be", ge=0, le=7)
    min_title_length: int = Field(15, description="Shorter titles are rejected", ge=1)
    max_punctuation_ratio: float = Field(0.1, description="Max share of ! and ? in a title", ge=0.0, le=1.0)
    max_caps_ratio: float = Field(0.3, description="Max share of uppercase letters in a title", ge=0.0, le=1.0)


class RankingConfig(BaseModel):
    """Trending score bonuses and selection limits."""

    max_items_per_category: int = Field(10, description="Items kept per category", ge=1, le=100)
    max_per_source: int = Field(2, description="Source diversity cap per category", ge=1, le=50)
    recency_bonus: float = Field(0.3, ge=0.0, le=1.0)
    high_priority_bonus: float = Field(0.2, ge=0.0, le=1.0)
    low_priority_penalty: float = Field(0.1, ge=0.0, le=1.0)
    upvote_threshold: int = Field(100, description="Community upvotes needed for the upvote bonus")
    upvote_bonus: float = Field(0.25, ge=0.0, le=1.0)
    comment_threshold: int = Field(20, description="Comments needed for the discussion bonus")
    comment_bonus: float = Field(0.2, ge=0.0, le=1.0)
    upvote_ratio_threshold: float = Field(0.9, ge=0.0, le=1.0)
    upvote_ratio_bonus: float = Field(0.15, ge=0.0, le=1.0)
    flagship_communities: List[str] = Field(
        default_factory=lambda: ["r/Ni_Bondha"],
        description="Communities that receive a fixed bonus",
    )
    flagship_bonus: float = Field(0.25, ge=0.0, le=1.0)
    cinema_bonus: float = Field(0.1, ge=0.0, le=1.0)
    all_bonus: float = Field(0.15, ge=0.0, le=1.0)
    view_count_threshold: int = Field(100_000)
    volume_threshold: int = Field(10_000)
    magnitude_bonus: float = Field(0.2, ge=0.0, le=1.0)


class CacheConfig(BaseModel):
    """TTL settings for the aggregate-result and URL-validation caches."""

    telugu_ttl_seconds: int = Field(300, description="Telugu aggregate cache TTL", ge=0)
    alternative_ttl_seconds: int = Field(1800, description="General aggregate cache TTL", ge=0)
    url_ttl_seconds: int = Field(1800, description="URL validation cache TTL", ge=0)
    url_cache_max_entries: int = Field(1000, description="Size that triggers lazy purge", ge=1)


class HttpConfig(BaseModel):
    """Outbound HTTP settings."""

    user_agent: str = Field("SayCheese-Aggregator/1.0", description="User-Agent header")
    adapter_timeout_seconds: float = Field(10.0, description="Per-adapter timeout", gt=0, le=60)
    url_timeout_seconds: float = Field(5.0, description="Per-URL validation timeout", gt=0, le=30)
    url_validation_concurrency: int = Field(5, description="URL validation window size", ge=1, le=50)
    validate_urls: bool = Field(True, description="Disable to skip link checks entirely")


class ApiKeysConfig(BaseModel):
    """Environment variable names for optional upstream API keys."""

    news_api_key_env: str = Field("NEWS_API_KEY", description="NewsAPI key variable")
    guardian_api_key_env: str = Field("GUARDIAN_API_KEY", description="Guardian key variable")

    def env_var(self, name: str) -> Optional[str]:
        """Environment variable holding the key for ``news_api`` or ``guardian``."""
        return {"news_api": self.news_api_key_env, "guardian": self.guardian_api_key_env}.get(name)


class ConfigModel(BaseModel):
    """Main configuration model."""

    filters: FilterConfig = Field(default_factory=FilterConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    api_keys: ApiKeysConfig = Field(default_factory=ApiKeysConfig)
    taxonomy_path: Optional[str] = Field(None, description="YAML keyword taxonomy overriding the built-in one")
    log_level: str = Field("INFO", description="Root log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class FeedSource(BaseModel):
    """RSS/Atom feed entry from sources.yaml."""

    name: str = Field(..., description="Source name")
    url: str = Field(..., description="Feed URL")
    backup_urls: List[str] = Field(default_factory=list, description="Tried in order if the primary fails")
    priority: Priority = Field(Priority.MEDIUM, description="Trust tier")
    category: str = Field("news", description="Source-declared category")
    platform: Platform = Field(Platform.RSS, description="Platform recorded on items")
    enabled: bool = Field(True, description="Whether source is enabled")


class SubredditSource(BaseModel):
    """Subreddit entry from sources.yaml."""

    name: str = Field(..., description="Subreddit name without the r/ prefix")
    priority: Priority = Field(Priority.MEDIUM, description="Trust tier")
    category: str = Field("community", description="Source-declared category")
    enabled: bool = Field(True, description="Whether source is enabled")


class SourcesModel(BaseModel):
    """All configured sources, split by pipeline."""

    telugu_feeds: List[FeedSource] = Field(default_factory=list)
    telugu_subreddits: List[SubredditSource] = Field(default_factory=list)
    general_feeds: List[FeedSource] = Field(default_factory=list)
    general_subreddits: List[SubredditSource] = Field(default_factory=list)
