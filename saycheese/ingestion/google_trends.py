"""Google Trends daily-trends adapter."""

import json
import logging
import re
from typing import List, Optional

import httpx
import pendulum

from ..models import ContentItem, Engagement, Platform
from .base import SourceAdapter, clean_text

logger = logging.getLogger(__name__)

JSONP_PREFIX = ")]}'"

_TRAFFIC = re.compile(r"([\d.,]+)\s*([KMB]?)", re.IGNORECASE)
_MULTIPLIERS = {"": 1, "K": 1_000, "M": 1_000_000, "B": 1_000_000_000}


def parse_traffic(value: Optional[str]) -> Optional[int]:
    """Convert formatted traffic like ``200K+`` or ``2M+`` to an integer."""
    if not value:
        return None
    match = _TRAFFIC.search(value)
    if not match:
        return None
    try:
        number = float(match.group(1).replace(",", ""))
    except ValueError:
        return None
    return int(number * _MULTIPLIERS[match.group(2).upper()])


def strip_jsonp(body: str) -> str:
    """Remove the anti-hijacking prefix Google puts in front of JSON."""
    body = body.lstrip()
    if body.startswith(JSONP_PREFIX):
        body = body[len(JSONP_PREFIX):].lstrip(",\n ")
    return body


class GoogleTrendsAdapter(SourceAdapter):
    """Daily trending searches for a region."""

    name = "Google Trends"
    base_url = "https://trends.google.com/trends/api"

    def __init__(self, client: httpx.AsyncClient, geo: str = "IN", limit: int = 20, **kwargs) -> None:
        super().__init__(client, **kwargs)
        self.geo = geo.upper()
        self.limit = limit

    async def fetch_items(self) -> List[ContentItem]:
        body = await self.get_text(
            f"{self.base_url}/dailytrends",
            params={"hl": "en-US", "tz": "-330", "geo": self.geo, "ns": 15},
        )
        data = json.loads(strip_jsonp(body))

        days = data["default"]["trendingSearchesDays"]
        if not days:
            return []

        # Daily trends carry no per-item timestamp and are always current
        now = pendulum.now("UTC")
        items = []
        for trend in days[0].get("trendingSearches", [])[: self.limit]:
            query = (trend.get("title") or {}).get("query")
            if not query:
                continue
            articles = trend.get("articles") or []
            first = articles[0] if articles else {}
            items.append(
                ContentItem(
                    title=query,
                    description=clean_text(first.get("title") or first.get("snippet")),
                    link=first.get("url"),
                    published_at=now,
                    source=self.name,
                    platform=Platform.GOOGLE_TRENDS,
                    category_hint="trends",
                    engagement=Engagement(volume=parse_traffic(trend.get("formattedTraffic"))),
                )
            )
        return items
