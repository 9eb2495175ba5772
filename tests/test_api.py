"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from saycheese.api import create_app
from saycheese.cache import TTLCache
from saycheese.errors import AggregationError
from saycheese.pipeline import AlternativeAggregator, TeluguAggregator

from .conftest import CrashingAdapter, StubAdapter, StubURLValidator


@pytest.fixture
def app_factory(config):
    def factory(telugu_adapters, alternative_adapters=()):
        validator = StubURLValidator()
        telugu = TeluguAggregator(
            config,
            cache=TTLCache(),
            url_validator=validator,
            adapter_factory=lambda region: list(telugu_adapters),
        )
        alternative = AlternativeAggregator(
            config,
            cache=TTLCache(),
            url_validator=validator,
            adapter_factory=lambda region: list(alternative_adapters),
        )
        app = create_app(config, telugu, alternative, configure_logging=False)
        return TestClient(app)

    return factory


def test_root(app_factory):
    with app_factory([]) as client:
        response = client.get("/")
    assert response.status_code == 200
    assert "/api/trending/telugu" in response.json()["endpoints"]


def test_telugu_trending(app_factory, telugu_items):
    adapters = [StubAdapter("feed", telugu_items), CrashingAdapter("crashing")]
    with app_factory(adapters) as client:
        response = client.get("/api/trending/telugu", params={"days": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["categories"] == ["Politics", "Cinema", "All"]
    assert body["dateFilter"] == {"windowDays": 3}
    assert len(body["data"]["Politics"]) == 2
    assert {source["name"]: source["success"] for source in body["sources"]} == {"feed": True, "crashing": False}
    assert body["fallback"] is False


def test_telugu_trending_rejects_bad_window(app_factory):
    with app_factory([]) as client:
        response = client.get("/api/trending/telugu", params={"days": 0})
    assert response.status_code == 422


def test_alternative_trending(app_factory, make_item):
    items = [make_item("Startup launches open source database engine", category_hint="tech")]
    with app_factory([], [StubAdapter("hn", items)]) as client:
        response = client.get("/api/trending/alternative", params={"region": "us", "categories": "tech,news"})

    assert response.status_code == 200
    body = response.json()
    assert body["region"] == "US"
    assert body["categories"] == ["tech", "news"]
    assert [item["title"] for item in body["data"]["tech"]] == ["Startup launches open source database engine"]
    assert body["data"]["news"] == []


def test_aggregation_failure_returns_error_body(config):
    class BrokenAggregator:
        cache = TTLCache()

        async def aggregate(self, *args, **kwargs):
            raise AggregationError("all upstreams unreachable")

    app = create_app(config, BrokenAggregator(), BrokenAggregator(), configure_logging=False)
    with TestClient(app) as client:
        response = client.get("/api/trending/telugu")

    assert response.status_code == 500
    assert response.json() == {"error": "all upstreams unreachable"}


def test_status(app_factory):
    with app_factory([]) as client:
        response = client.get("/api/status")

    body = response.json()
    assert body["status"] == "running"
    assert body["apiKeys"] == {"news_api": False, "guardian": False}
    assert body["cache"]["telugu"] == {"entries": 0, "hits": 0, "misses": 0}
    assert "total_cached" in body["cache"]["urls"]


def test_sources(app_factory):
    with app_factory([]) as client:
        response = client.get("/api/sources")

    assert response.status_code == 200
    body = response.json()
    assert body["telugu"]["feeds"]
    assert {api["name"] for api in body["requiresApiKey"]} == {"NewsAPI", "The Guardian"}
    assert {api["env"] for api in body["requiresApiKey"]} == {"NEWS_API_KEY", "GUARDIAN_API_KEY"}
