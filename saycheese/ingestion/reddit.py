"""Reddit JSON adapter."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import SubredditSource
from ..filters.temporal import from_epoch
from ..models import ContentItem, Engagement, Platform
from .base import SourceAdapter, clean_text

logger = logging.getLogger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"


class RedditAdapter(SourceAdapter):
    """Hot and top-of-day posts for one subreddit."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        subreddit: SubredditSource,
        hot_limit: int = 25,
        top_limit: int = 15,
        **kwargs,
    ) -> None:
        super().__init__(client, **kwargs)
        self.subreddit = subreddit
        self.name = f"r/{subreddit.name}"
        self.hot_limit = hot_limit
        self.top_limit = top_limit

    async def fetch_items(self) -> List[ContentItem]:
        base = f"{REDDIT_BASE_URL}/r/{self.subreddit.name}"
        hot, top = await asyncio.gather(
            self.get_json(f"{base}/hot.json", params={"limit": self.hot_limit}),
            self.get_json(f"{base}/top.json", params={"t": "day", "limit": self.top_limit}),
        )

        items: List[ContentItem] = []
        seen = set()
        for listing in (hot, top):
            for child in listing["data"]["children"]:
                post = child.get("data") or {}
                key = post.get("id") or post.get("permalink")
                if not post.get("title") or key in seen:
                    continue
                seen.add(key)
                item = self.parse_post(post)
                if item is not None:
                    items.append(item)
        return items

    def parse_post(self, post: Dict[str, Any]) -> Optional[ContentItem]:
        """Normalize one post. ``created_utc`` is epoch seconds."""
        created = post.get("created_utc")
        published_at = from_epoch(created, unit="s")
        published_raw = str(created) if created is not None and published_at is None else None

        permalink = post.get("permalink")
        link = f"{REDDIT_BASE_URL}{permalink}" if permalink else post.get("url")

        ratio = post.get("upvote_ratio")
        if not isinstance(ratio, (int, float)) or not 0.0 <= ratio <= 1.0:
            ratio = None

        return ContentItem(
            title=clean_text(post["title"], max_length=300) or post["title"],
            description=clean_text(post.get("selftext")),
            link=link,
            published_at=published_at,
            published_raw=published_raw,
            source=self.name,
            platform=Platform.REDDIT,
            priority=self.subreddit.priority,
            category_hint=self.subreddit.category,
            author=post.get("author"),
            engagement=Engagement(
                score=post.get("score"),
                comments=post.get("num_comments"),
                upvote_ratio=ratio,
            ),
        )
