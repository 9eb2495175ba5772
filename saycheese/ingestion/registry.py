"""Build adapter lists from configuration."""

import logging
from typing import Any, Dict, List

import httpx

from ..config import Config
from .base import SourceAdapter
from .google_trends import GoogleTrendsAdapter
from .news_apis import GuardianAdapter, NewsAPIAdapter
from .reddit import RedditAdapter
from .rss_fetcher import RSSAdapter
from .tech import DevToAdapter, GitHubAdapter, HackerNewsAdapter, LobstersAdapter

logger = logging.getLogger(__name__)

KEYED_APIS = (
    {"name": "NewsAPI", "key": "news_api", "url": "https://newsapi.org/"},
    {"name": "The Guardian", "key": "guardian", "url": "https://open-platform.theguardian.com/"},
)

FREE_APIS = ("Hacker News", "GitHub", "Dev.to", "Lobsters", "Google Trends", "Reddit")


def _http_kwargs(config: Config) -> Dict[str, Any]:
    http = config.config.http
    return {"user_agent": http.user_agent, "timeout": http.adapter_timeout_seconds}


def build_telugu_adapters(config: Config, client: httpx.AsyncClient) -> List[SourceAdapter]:
    """Regional feeds and community subreddits."""
    kwargs = _http_kwargs(config)
    sources = config.sources

    adapters: List[SourceAdapter] = [
        RSSAdapter(client, feed, **kwargs) for feed in sources.telugu_feeds if feed.enabled
    ]
    adapters.extend(
        RedditAdapter(client, subreddit, **kwargs)
        for subreddit in sources.telugu_subreddits
        if subreddit.enabled
    )
    return adapters


def build_general_adapters(
    config: Config, client: httpx.AsyncClient, region: str = "IN"
) -> List[SourceAdapter]:
    """National and international sources for the general pipeline."""
    kwargs = _http_kwargs(config)
    sources = config.sources

    adapters: List[SourceAdapter] = [
        RSSAdapter(client, feed, **kwargs) for feed in sources.general_feeds if feed.enabled
    ]
    adapters.extend(
        RedditAdapter(client, subreddit, **kwargs)
        for subreddit in sources.general_subreddits
        if subreddit.enabled
    )
    adapters.extend([
        HackerNewsAdapter(client, limit=15, **kwargs),
        GitHubAdapter(client, limit=10, **kwargs),
        DevToAdapter(client, limit=15, **kwargs),
        LobstersAdapter(client, limit=10, **kwargs),
        GoogleTrendsAdapter(client, geo=region, **kwargs),
    ])

    news_api_key = config.get_api_key("news_api")
    if news_api_key:
        adapters.append(NewsAPIAdapter(client, news_api_key, country=region, limit=15, **kwargs))
    else:
        logger.debug("NewsAPI key not configured, skipping")

    guardian_key = config.get_api_key("guardian")
    if guardian_key:
        adapters.append(GuardianAdapter(client, guardian_key, **kwargs))
    else:
        logger.debug("Guardian key not configured, skipping")

    return adapters


def describe_sources(config: Config) -> Dict[str, Any]:
    """Enabled sources and which optional APIs need keys."""
    sources = config.sources
    api_keys = config.config.api_keys
    return {
        "telugu": {
            "feeds": [f.name for f in sources.telugu_feeds if f.enabled],
            "subreddits": [f"r/{s.name}" for s in sources.telugu_subreddits if s.enabled],
        },
        "general": {
            "feeds": [f.name for f in sources.general_feeds if f.enabled],
            "subreddits": [f"r/{s.name}" for s in sources.general_subreddits if s.enabled],
        },
        "freeAPIs": [{"name": name, "status": "enabled"} for name in FREE_APIS],
        "requiresApiKey": [
            {
                "name": api["name"],
                "env": api_keys.env_var(api["key"]),
                "url": api["url"],
                "configured": config.get_api_key(api["key"]) is not None,
            }
            for api in KEYED_APIS
        ],
    }
