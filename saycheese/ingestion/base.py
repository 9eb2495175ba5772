"""Source adapter base class."""

import logging
import re
import time
from abc import ABC, abstractmethod
from datetime import datetime
from html import unescape
from typing import Any, Dict, List, Optional

import httpx

from ..errors import AdapterError
from ..models import ContentItem
from .models import FetchResult

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "SayCheese-Aggregator/1.0"

_TAG = re.compile(r"<[^>]+>")
_SPACE = re.compile(r"\s+")


def unparsed_timestamp(raw: Any, published: Optional[datetime]) -> Optional[str]:
    """Upstream timestamp worth keeping: present but not parseable."""
    if published is not None or raw is None or raw == "":
        return None
    return str(raw)


def clean_text(value: Optional[str], max_length: int = 500) -> str:
    """Strip markup and collapse whitespace in upstream text."""
    if not value:
        return ""
    text = _SPACE.sub(" ", unescape(_TAG.sub(" ", value))).strip()
    if len(text) > max_length:
        text = text[:max_length].rsplit(" ", 1)[0] + "..."
    return text


class SourceAdapter(ABC):
    """
    Fetch one upstream source and normalize it into ContentItems.

    Subclasses implement ``fetch_items`` and may raise; ``fetch`` turns any
    upstream failure into a failed FetchResult.
    """

    name: str = "adapter"
    requires_api_key: bool = False

    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize adapter.

        Args:
            client: Shared HTTP client
            user_agent: User-Agent header sent upstream
            timeout: Per-request timeout in seconds
        """
        self.client = client
        self.user_agent = user_agent
        self.timeout = timeout

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        """GET a URL and decode its JSON body."""
        headers = {**self.headers, **kwargs.pop("headers", {})}
        response = await self.client.get(url, headers=headers, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response.json()

    async def get_text(self, url: str, **kwargs: Any) -> str:
        """GET a URL and return its body as text."""
        headers = {**self.headers, **kwargs.pop("headers", {})}
        response = await self.client.get(
            url, headers=headers, timeout=self.timeout, follow_redirects=True, **kwargs
        )
        response.raise_for_status()
        return response.text

    @abstractmethod
    async def fetch_items(self) -> List[ContentItem]:
        """Fetch and normalize upstream items."""

    async def fetch(self) -> FetchResult:
        """Fetch items, converting upstream failures into a failed result."""
        started = time.monotonic()
        try:
            items = await self.fetch_items()
        except httpx.HTTPError as e:
            error = f"HTTP error: {e}"
        except AdapterError as e:
            error = e.message
        except (KeyError, TypeError, ValueError) as e:
            error = f"Malformed response: {e!r}"
        else:
            duration = time.monotonic() - started
            logger.info("%s: %d items", self.name, len(items))
            return FetchResult.ok(self.name, items, duration)

        logger.warning("%s failed: %s", self.name, error)
        return FetchResult.failed(self.name, error, time.monotonic() - started)
