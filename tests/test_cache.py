"""Tests for the TTL cache."""

import asyncio

import pytest

from saycheese.cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_entries_expire(clock):
    cache = TTLCache(default_ttl=10, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2, ttl=30)

    clock.now = 9.9
    assert cache.get("a") == 1
    clock.now = 10
    assert cache.get("a") is None
    assert "b" in cache
    assert cache.get("missing", "default") == "default"


def test_falsy_values_are_cached(clock):
    cache = TTLCache(clock=clock)
    cache.set("flag", False)
    assert "flag" in cache
    assert cache.get("flag", "default") is False


def test_clear_and_purge(clock):
    cache = TTLCache(default_ttl=5, max_entries=2, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.clear("a")
    assert "a" not in cache

    clock.now = 6
    cache.set("c", 3)
    cache.set("d", 4)
    # "b" expired and was swept once the cache grew past max_entries
    assert len(cache) == 2
    assert dict(cache.items()) == {"c": 3, "d": 4}

    cache.clear()
    assert len(cache) == 0


def test_get_or_fetch_counts_hits_and_misses(clock):
    cache = TTLCache(default_ttl=60, clock=clock)
    calls = []

    async def fetch():
        calls.append(1)
        return {"value": len(calls)}

    async def run():
        first = await cache.get_or_fetch("key", fetch)
        second = await cache.get_or_fetch("key", fetch)
        return first, second

    first, second = asyncio.run(run())

    assert first is second
    assert len(calls) == 1
    assert cache.stats() == {"entries": 1, "hits": 1, "misses": 1}


def test_get_or_fetch_does_not_cache_failures(clock):
    cache = TTLCache(clock=clock)

    async def fail():
        raise RuntimeError("upstream down")

    with pytest.raises(RuntimeError):
        asyncio.run(cache.get_or_fetch("key", fail))
    assert "key" not in cache
