"""Shared fixtures."""

from typing import Dict, List, Optional, Sequence

import pendulum
import pytest
import yaml

from saycheese.config import Config
from saycheese.ingestion import FetchResult, SourceAdapter
from saycheese.models import ContentItem, Platform, Priority


class StubAdapter(SourceAdapter):
    """Adapter returning canned items, or raising, without touching the network."""

    def __init__(self, name: str, items: Optional[List[ContentItem]] = None, error: Optional[Exception] = None):
        super().__init__(client=None)
        self.name = name
        self.items = items or []
        self.error = error
        self.calls = 0

    async def fetch_items(self) -> List[ContentItem]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)


class CrashingAdapter(StubAdapter):
    """Adapter whose fetch escapes the normal failure handling."""

    async def fetch(self) -> FetchResult:
        self.calls += 1
        raise RuntimeError("adapter crashed")


class StubURLValidator:
    """URL validator with a fixed set of dead links."""

    def __init__(self, dead: Sequence[str] = ()):
        self.dead = set(dead)
        self.checked: List[str] = []

    async def validate_batch(self, urls, concurrency: int = 5) -> List[Dict]:
        self.checked.extend(urls)
        return [{"url": url, "is_valid": url not in self.dead} for url in urls]

    def get_stats(self) -> Dict[str, int]:
        return {"total_cached": len(self.checked), "valid": 0, "invalid": 0}


@pytest.fixture
def now():
    return pendulum.now("UTC")


@pytest.fixture
def make_item(now):
    """Factory for content items published an hour ago by default."""

    def factory(title: str, **kwargs) -> ContentItem:
        kwargs.setdefault("published_at", now.subtract(hours=1))
        kwargs.setdefault("source", "Test Source")
        kwargs.setdefault("link", f"https://example.com/{abs(hash(title))}")
        return ContentItem(title=title, **kwargs)

    return factory


@pytest.fixture
def config_dir(tmp_path):
    data = {
        "http": {"adapter_timeout_seconds": 0.5, "validate_urls": True},
        "cache": {"telugu_ttl_seconds": 300, "alternative_ttl_seconds": 300},
    }
    with open(tmp_path / "config.yaml", "w") as f:
        yaml.safe_dump(data, f)
    return tmp_path


@pytest.fixture
def config(config_dir):
    return Config(config_path=config_dir / "config.yaml", environ={})


@pytest.fixture
def stub_validator():
    return StubURLValidator()


@pytest.fixture
def telugu_items(make_item, now):
    """A small regional mix: politics, cinema, sports and one unrelated item."""
    return [
        make_item(
            "KCR launches new metro project in Hyderabad",
            source="Telangana Today",
            priority=Priority.HIGH,
        ),
        make_item(
            "Revanth Reddy cabinet meets in Hyderabad over Telangana budget",
            source="r/telangana",
            platform=Platform.REDDIT,
        ),
        make_item(
            "Prabhas and Rajamouli reunite for Tollywood epic after Baahubali",
            source="123telugu",
        ),
        make_item(
            "Sunrisers Hyderabad win thriller at Uppal stadium",
            source="r/hyderabad",
            platform=Platform.REDDIT,
        ),
        make_item("New iPhone released with better camera", source="Tech Wire"),
    ]
