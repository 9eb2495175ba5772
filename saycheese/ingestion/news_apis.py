"""Key-gated news API adapters."""

import logging
from typing import List

import httpx

from ..filters.temporal import parse_timestamp
from ..models import ContentItem, Platform, Priority
from .base import SourceAdapter, clean_text

logger = logging.getLogger(__name__)


class NewsAPIAdapter(SourceAdapter):
    """Top headlines from newsapi.org for one country."""

    name = "NewsAPI"
    requires_api_key = True
    base_url = "https://newsapi.org/v2"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        country: str = "in",
        category: str = "",
        limit: int = 20,
        **kwargs,
    ) -> None:
        super().__init__(client, **kwargs)
        self.api_key = api_key
        self.country = country.lower()
        self.category = category
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        params = {"country": self.country, "pageSize": self.limit}
        if self.category:
            params["category"] = self.category

        data = await self.get_json(
            f"{self.base_url}/top-headlines",
            params=params,
            headers={"X-Api-Key": self.api_key},
        )

        items = []
        for article in data["articles"]:
            title = article.get("title")
            if not title or title == "[Removed]":
                continue
            raw = article.get("publishedAt")
            published = parse_timestamp(raw)
            items.append(
                ContentItem(
                    title=title,
                    description=clean_text(article.get("description")),
                    link=article.get("url"),
                    published_at=published,
                    published_raw=raw if published is None else None,
                    source=(article.get("source") or {}).get("name") or self.name,
                    platform=Platform.NEWS,
                    priority=Priority.MEDIUM,
                    category_hint="news",
                    author=article.get("author"),
                )
            )
        return items


class GuardianAdapter(SourceAdapter):
    """Most relevant recent Guardian articles."""

    name = "The Guardian"
    requires_api_key = True
    base_url = "https://content.guardianapis.com"

    def __init__(self, client: httpx.AsyncClient, api_key: str, limit: int = 15, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.api_key = api_key
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        data = await self.get_json(
            f"{self.base_url}/search",
            params={
                "order-by": "relevance",
                "page-size": self.limit,
                "api-key": self.api_key,
                "show-fields": "trailText,byline",
            },
        )

        items = []
        for article in data["response"]["results"]:
            fields = article.get("fields") or {}
            raw = article.get("webPublicationDate")
            published = parse_timestamp(raw)
            items.append(
                ContentItem(
                    title=article["webTitle"],
                    description=clean_text(fields.get("trailText")),
                    link=article.get("webUrl"),
                    published_at=published,
                    published_raw=raw if published is None else None,
                    source=self.name,
                    platform=Platform.NEWS,
                    category_hint="news",
                    author=fields.get("byline"),
                )
            )
        return items
