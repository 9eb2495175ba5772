"""RSS/Atom feed adapter."""

import calendar
import logging
from typing import List, Optional

import feedparser
import httpx
from pydantic import ValidationError

from ..config import FeedSource
from ..errors import AdapterError
from ..filters.temporal import from_epoch, parse_timestamp
from ..models import ContentItem, Engagement
from .base import SourceAdapter, clean_text

logger = logging.getLogger(__name__)


class RSSAdapter(SourceAdapter):
    """Fetch a feed, falling back to its backup URLs in order."""

    def __init__(self, client: httpx.AsyncClient, source: FeedSource, max_items: int = 30, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.source = source
        self.name = source.name
        self.max_items = max_items

    async def fetch_items(self) -> List[ContentItem]:
        errors = []
        for url in [self.source.url, *self.source.backup_urls]:
            try:
                body = await self.get_text(url)
            except httpx.HTTPError as e:
                errors.append(f"{url}: {e}")
                continue

            feed = feedparser.parse(body)
            if not feed.entries:
                reason = feed.bozo_exception if feed.bozo else "no entries"
                errors.append(f"{url}: invalid feed ({reason})")
                continue

            if url != self.source.url:
                logger.info("%s: using backup feed %s", self.name, url)
            return self.parse_entries(feed.entries)

        raise AdapterError(self.name, "; ".join(errors) or "no feed URLs configured")

    def parse_entries(self, entries) -> List[ContentItem]:
        """Normalize feedparser entries."""
        items = []
        for entry in entries[: self.max_items]:
            title = clean_text(entry.get("title"), max_length=300)
            if not title:
                continue

            published_at, published_raw = self._published(entry)
            description = entry.get("summary") or entry.get("description") or ""

            views = None
            stats = entry.get("media_statistics")
            if stats and stats.get("views"):
                try:
                    views = int(stats["views"])
                except (TypeError, ValueError):
                    views = None

            try:
                items.append(
                    ContentItem(
                        title=title,
                        description=clean_text(description),
                        link=entry.get("link") or None,
                        published_at=published_at,
                        published_raw=published_raw,
                        source=self.source.name,
                        platform=self.source.platform,
                        priority=self.source.priority,
                        category_hint=self.source.category,
                        author=entry.get("author") or None,
                        engagement=Engagement(view_count=views),
                    )
                )
            except ValidationError as e:
                logger.debug("%s: skipping malformed entry: %s", self.name, e)
        return items

    @staticmethod
    def _published(entry):
        """Parsed publication time plus the raw value when it could not be parsed."""
        for key in ("published_parsed", "updated_parsed"):
            parsed = entry.get(key)
            if parsed:
                published = from_epoch(calendar.timegm(parsed))
                if published is not None:
                    return published, None

        raw: Optional[str] = entry.get("published") or entry.get("updated")
        if not raw:
            return None, None
        published = parse_timestamp(raw)
        return (published, None) if published is not None else (None, raw)
