"""Link reachability checks with a TTL cache."""

import asyncio
import logging
import re
from typing import Dict, Iterable, List, Optional, Union
from urllib.parse import urlparse

import httpx

from ..cache import TTLCache

logger = logging.getLogger(__name__)

TRUSTED_DOMAINS = ("reddit.com", "redd.it")
YOUTUBE_DOMAINS = ("youtube.com", "youtu.be")
YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"

_YOUTUBE_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^&\n?#]+)"),
)


def extract_youtube_video_id(url: str) -> Optional[str]:
    """Pull the video id out of the common YouTube URL shapes."""
    for pattern in _YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def _host_matches(hostname: str, domains: Iterable[str]) -> bool:
    return any(hostname == d or hostname.endswith("." + d) for d in domains)


class URLValidator:
    """Check that links resolve before they are shown."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout: float = 5.0,
        cache: Optional[TTLCache] = None,
        user_agent: str = "SayCheese-URLValidator/1.0",
    ) -> None:
        """
        Initialize URL validator.

        Args:
            client: Shared HTTP client
            timeout: Per-request timeout in seconds
            cache: Result cache; a 30 minute cache is created when omitted
            user_agent: User-Agent header for probes
        """
        self.client = client
        self.timeout = timeout
        self.cache = cache if cache is not None else TTLCache(default_ttl=1800, max_entries=1000, name="url cache")
        self.headers = {"User-Agent": user_agent}

    async def validate(self, url: Optional[str]) -> bool:
        """Return whether the URL is reachable. Never raises."""
        if not url or not isinstance(url, str):
            return False

        cached = self.cache.get(url)
        if cached is not None:
            return cached

        try:
            is_valid = await self._check(url)
        except Exception as e:
            logger.warning("URL validation failed for %s: %s", url, e)
            is_valid = False

        self.cache.set(url, is_valid)
        return is_valid

    async def _check(self, url: str) -> bool:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            return False

        hostname = parsed.hostname.lower()
        if _host_matches(hostname, TRUSTED_DOMAINS):
            return True
        if _host_matches(hostname, YOUTUBE_DOMAINS):
            return await self._check_youtube(url)
        return await self._check_generic(url)

    async def _check_youtube(self, url: str) -> bool:
        """Probe the oEmbed endpoint; a video without a title is treated as gone."""
        video_id = extract_youtube_video_id(url)
        if not video_id:
            return False

        try:
            response = await self.client.get(
                YOUTUBE_OEMBED_URL,
                params={"url": f"https://www.youtube.com/watch?v={video_id}", "format": "json"},
                headers=self.headers,
                timeout=self.timeout,
            )
            if response.status_code != 200:
                return False
            return bool(response.json().get("title"))
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("YouTube URL validation failed for %s: %s", url, e)
            return False

    async def _check_generic(self, url: str) -> bool:
        """HEAD first, then a ranged GET for servers that reject HEAD."""
        try:
            response = await self.client.head(
                url, headers=self.headers, timeout=self.timeout, follow_redirects=True
            )
            if response.status_code < 400:
                return True
        except httpx.HTTPError as e:
            logger.debug("HEAD failed for %s: %s", url, e)

        try:
            response = await self.client.get(
                url,
                headers={**self.headers, "Range": "bytes=0-1023"},
                timeout=self.timeout,
                follow_redirects=True,
            )
            return response.status_code < 400
        except httpx.HTTPError as e:
            logger.warning("URL validation failed for %s: %s", url, e)
            return False

    async def validate_batch(
        self, urls: List[str], concurrency: int = 5
    ) -> List[Dict[str, Union[str, bool]]]:
        """Validate URLs in windows of ``concurrency``; one result per input URL."""
        results: List[Dict[str, Union[str, bool]]] = []

        for start in range(0, len(urls), concurrency):
            window = urls[start:start + concurrency]
            outcomes = await asyncio.gather(
                *(self.validate(url) for url in window), return_exceptions=True
            )
            for url, outcome in zip(window, outcomes):
                results.append({"url": url, "is_valid": outcome is True})

        valid = sum(1 for r in results if r["is_valid"])
        logger.info("URL validation: %d/%d links valid", valid, len(results))
        return results

    def get_stats(self) -> Dict[str, int]:
        """Counts of fresh cached results."""
        entries = [value for _, value in self.cache.items()]
        valid = sum(1 for value in entries if value)
        return {"total_cached": len(entries), "valid": valid, "invalid": len(entries) - valid}
