"""De-duplication of merged adapter output."""

import logging
import re
from typing import Iterable, List, Optional, Set
from urllib.parse import urlparse

from ..models import ContentItem

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]", re.UNICODE)
_WHITESPACE = re.compile(r"\s+")


def normalize_url(url: Optional[str]) -> Optional[str]:
    """Scheme, ``www.``, query, fragment and trailing slash insensitive URL key."""
    if not url or not url.strip() or url.strip() == "#":
        return None
    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()
    if host.startswith("www."):
        host = host[4:]
    path = parsed.path.rstrip("/")
    # Query strings carry the identity for some hosts
    if host.endswith("youtube.com") or host.endswith("news.ycombinator.com"):
        return f"{host}{path}?{parsed.query}"
    return f"{host}{path}"


def normalize_title(title: str) -> str:
    """Lowercase title with punctuation and repeated whitespace removed."""
    text = _NON_WORD.sub(" ", title.lower())
    return _WHITESPACE.sub(" ", text).strip()


def deduplicate(items: Iterable[ContentItem]) -> List[ContentItem]:
    """Drop repeats by normalized link, then by normalized title. First occurrence wins."""
    seen_urls: Set[str] = set()
    seen_titles: Set[str] = set()
    unique: List[ContentItem] = []
    total = 0

    for item in items:
        total += 1
        url_key = normalize_url(item.link)
        title_key = normalize_title(item.title)

        if url_key and url_key in seen_urls:
            continue
        if title_key and title_key in seen_titles:
            continue

        if url_key:
            seen_urls.add(url_key)
        if title_key:
            seen_titles.add(title_key)
        unique.append(item)

    if total != len(unique):
        logger.info("De-duplication removed %d of %d items", total - len(unique), total)
    return unique
