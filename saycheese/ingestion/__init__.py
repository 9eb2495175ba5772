"""Source adapters."""

from .base import SourceAdapter, clean_text
from .google_trends import GoogleTrendsAdapter, parse_traffic, strip_jsonp
from .models import FetchResult
from .news_apis import GuardianAdapter, NewsAPIAdapter
from .reddit import RedditAdapter
from .registry import build_general_adapters, build_telugu_adapters, describe_sources
from .rss_fetcher import RSSAdapter
from .tech import DevToAdapter, GitHubAdapter, HackerNewsAdapter, LobstersAdapter

__all__ = [
    "DevToAdapter",
    "FetchResult",
    "GitHubAdapter",
    "GoogleTrendsAdapter",
    "GuardianAdapter",
    "HackerNewsAdapter",
    "LobstersAdapter",
    "NewsAPIAdapter",
    "RSSAdapter",
    "RedditAdapter",
    "SourceAdapter",
    "build_general_adapters",
    "build_telugu_adapters",
    "clean_text",
    "describe_sources",
    "parse_traffic",
    "strip_jsonp",
]
