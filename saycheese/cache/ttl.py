"""In-process TTL cache."""

import logging
import time
from typing import Any, Awaitable, Callable, Dict, Hashable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

_MISSING = object()


class TTLCache:
    """
    Key/value store with per-entry expiry.

    Expired entries are dropped when read, and swept in bulk once the cache
    grows past ``max_entries``. There is no background timer. All access
    happens on one event loop, so no locking is needed.
    """

    def __init__(
        self,
        default_ttl: float = 300.0,
        max_entries: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ) -> None:
        """
        Initialize cache.

        Args:
            default_ttl: Seconds an entry stays fresh when no ttl is given
            max_entries: Size above which expired entries are purged
            clock: Monotonic time source, injectable for tests
            name: Label used in log messages
        """
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self.clock = clock
        self.name = name
        self._entries: Dict[Hashable, Tuple[float, Any]] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return a fresh value or default."""
        entry = self._entries.get(key)
        if entry is None:
            return default
        expires_at, value = entry
        if self.clock() >= expires_at:
            del self._entries[key]
            return default
        return value

    def set(self, key: Hashable, value: Any, ttl: Optional[float] = None) -> None:
        """Store a value for ttl seconds (or the default ttl)."""
        ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = (self.clock() + ttl, value)
        if self.max_entries is not None and len(self._entries) > self.max_entries:
            self.purge_expired()

    def clear(self, key: Optional[Hashable] = None) -> None:
        """Drop one key, or everything when no key is given."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def purge_expired(self) -> int:
        """Remove every expired entry and return how many were dropped."""
        now = self.clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("%s: purged %d expired entries", self.name, len(expired))
        return len(expired)

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate over fresh entries."""
        now = self.clock()
        for key, (expires_at, value) in list(self._entries.items()):
            if now < expires_at:
                yield key, value

    async def get_or_fetch(
        self,
        key: Hashable,
        fetch: Callable[[], Awaitable[Any]],
        ttl: Optional[float] = None,
    ) -> Any:
        """Return the cached value or await fetch() and cache its result."""
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            self.hits += 1
            logger.info("%s hit for %s", self.name, key)
            return value

        self.misses += 1
        logger.info("%s miss for %s, fetching fresh data", self.name, key)
        value = await fetch()
        self.set(key, value, ttl)
        return value

    def stats(self) -> Dict[str, int]:
        """Entry and hit/miss counters."""
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}
