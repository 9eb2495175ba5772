"""Adapters for developer community sources (no API key required)."""

import asyncio
import logging
from typing import List

import httpx
import pendulum

from ..filters.temporal import from_epoch, parse_timestamp
from ..models import ContentItem, Engagement, Platform
from .base import SourceAdapter, clean_text, unparsed_timestamp

logger = logging.getLogger(__name__)


class HackerNewsAdapter(SourceAdapter):
    """Top stories from the Hacker News Firebase API."""

    name = "Hacker News"
    base_url = "https://hacker-news.firebaseio.com/v0"

    def __init__(self, client: httpx.AsyncClient, limit: int = 20, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        story_ids = await self.get_json(f"{self.base_url}/topstories.json")
        stories = await asyncio.gather(
            *(self.get_json(f"{self.base_url}/item/{story_id}.json") for story_id in story_ids[: self.limit]),
            return_exceptions=True,
        )

        items = []
        for story in stories:
            if isinstance(story, BaseException):
                logger.debug("%s: story fetch failed: %s", self.name, story)
                continue
            if not story or story.get("deleted") or story.get("dead") or not story.get("title"):
                continue
            published = from_epoch(story.get("time"))
            items.append(
                ContentItem(
                    title=story["title"],
                    link=story.get("url") or f"https://news.ycombinator.com/item?id={story['id']}",
                    published_at=published,
                    published_raw=unparsed_timestamp(story.get("time"), published),
                    source=self.name,
                    platform=Platform.HACKERNEWS,
                    category_hint="tech",
                    author=story.get("by"),
                    engagement=Engagement(score=story.get("score"), comments=story.get("descendants", 0)),
                )
            )
        return items


class GitHubAdapter(SourceAdapter):
    """Repositories created since yesterday, by stars."""

    name = "GitHub"
    base_url = "https://api.github.com"

    def __init__(self, client: httpx.AsyncClient, limit: int = 10, language: str = "", **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.limit = limit
        self.language = language

    async def fetch_items(self) -> List[ContentItem]:
        since = pendulum.now("UTC").subtract(days=1).to_date_string()
        query = f"created:>{since}"
        if self.language:
            query += f" language:{self.language}"

        data = await self.get_json(
            f"{self.base_url}/search/repositories",
            params={"q": query, "sort": "stars", "order": "desc", "per_page": self.limit},
            headers={"Accept": "application/vnd.github.v3+json"},
        )

        items = []
        for repo in data["items"]:
            description = clean_text(repo.get("description"))
            published = parse_timestamp(repo.get("created_at"))
            items.append(
                ContentItem(
                    title=f"{repo['full_name']}: {description}" if description else repo["full_name"],
                    description=description,
                    link=repo["html_url"],
                    published_at=published,
                    published_raw=unparsed_timestamp(repo.get("created_at"), published),
                    source=self.name,
                    platform=Platform.GITHUB,
                    category_hint="tech",
                    author=(repo.get("owner") or {}).get("login"),
                    engagement=Engagement(score=repo.get("stargazers_count")),
                )
            )
        return items


class DevToAdapter(SourceAdapter):
    """Top Dev.to articles of the past week."""

    name = "Dev.to"
    base_url = "https://dev.to/api"

    def __init__(self, client: httpx.AsyncClient, limit: int = 15, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        posts = await self.get_json(f"{self.base_url}/articles", params={"top": 7, "per_page": self.limit})
        items = []
        for post in posts:
            if not post.get("title") or not post.get("url"):
                continue
            published = parse_timestamp(post.get("published_at"))
            items.append(
                ContentItem(
                    title=post["title"],
                    description=clean_text(post.get("description")),
                    link=post["url"],
                    published_at=published,
                    published_raw=unparsed_timestamp(post.get("published_at"), published),
                    source=self.name,
                    platform=Platform.DEVTO,
                    category_hint="tech",
                    author=(post.get("user") or {}).get("name"),
                    engagement=Engagement(
                        score=post.get("positive_reactions_count"),
                        comments=post.get("comments_count"),
                    ),
                )
            )
        return items


class LobstersAdapter(SourceAdapter):
    """Hottest Lobsters stories."""

    name = "Lobsters"
    base_url = "https://lobste.rs"

    def __init__(self, client: httpx.AsyncClient, limit: int = 10, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        stories = await self.get_json(f"{self.base_url}/hottest.json")
        items = []
        for story in stories[: self.limit]:
            if not story.get("title"):
                continue
            submitter = story.get("submitter_user")
            author = submitter.get("username") if isinstance(submitter, dict) else submitter
            published = parse_timestamp(story.get("created_at"))
            items.append(
                ContentItem(
                    title=story["title"],
                    description=", ".join(story.get("tags") or []),
                    link=story.get("url") or story.get("short_id_url"),
                    published_at=published,
                    published_raw=unparsed_timestamp(story.get("created_at"), published),
                    source=self.name,
                    platform=Platform.LOBSTERS,
                    category_hint="tech",
                    author=author,
                    engagement=Engagement(score=story.get("score"), comments=story.get("comment_count")),
                )
            )
        return items
