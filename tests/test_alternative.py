"""Tests for the general trending pipeline."""

import asyncio

from saycheese.cache import TTLCache
from saycheese.models import Engagement
from saycheese.pipeline import AlternativeAggregator, parse_categories

from .conftest import StubAdapter, StubURLValidator


def make_aggregator(config, adapters):
    return AlternativeAggregator(
        config,
        cache=TTLCache(default_ttl=300),
        url_validator=StubURLValidator(),
        adapter_factory=lambda region: adapters,
    )


def test_parse_categories():
    assert parse_categories(None) == ["all", "tech", "news"]
    assert parse_categories(" Tech, news,tech ,, ") == ["tech", "news"]
    assert parse_categories(",") == ["all", "tech", "news"]


def test_buckets_by_category_hint(config, make_item):
    items = [
        make_item("Startup launches open source database engine", category_hint="tech", source="Hacker News"),
        make_item("Parliament passes new data protection bill", category_hint="news", source="NDTV"),
        make_item("Weekend photo walk around the old city", category_hint="community", source="r/photography"),
    ]
    aggregator = make_aggregator(config, [StubAdapter("mixed", items)])

    result = asyncio.run(aggregator.aggregate("US", ["all", "tech", "news"]))

    assert result.region == "US"
    assert len(result.buckets["all"]) == 3
    assert [item.category_hint for item in result.buckets["tech"]] == ["tech"]
    assert [item.category_hint for item in result.buckets["news"]] == ["news"]
    assert all(item.quality_score == item.trending_score for item in result.buckets["all"])
    assert result.to_response()["data"]["tech"][0]["category"] == "tech"


def test_all_bucket_ordered_by_quality(config, make_item):
    items = [
        make_item("A quiet update on local library hours", source="Blog"),
        make_item(
            "Company announces breakthrough battery research",
            source="r/technology",
            engagement=Engagement(score=4000),
        ),
    ]
    aggregator = make_aggregator(config, [StubAdapter("feed", items)])

    result = asyncio.run(aggregator.aggregate("US", ["all"]))
    scores = [item.trending_score for item in result.buckets["all"]]

    assert result.buckets["all"][0].source == "r/technology"
    assert scores == sorted(scores, reverse=True)


def test_india_region_prefers_indian_items(config, make_item):
    items = [
        make_item("Election results announced across Europe today", source="World Desk"),
        make_item("Sensex closes at record high on bank rally", source="Markets Desk"),
    ]
    aggregator = make_aggregator(config, [StubAdapter("feed", items)])

    result = asyncio.run(aggregator.aggregate("in", ["all"]))

    assert result.region == "IN"
    assert {item.title for item in result.buckets["all"]} == {item.title for item in items}


def test_fallback_per_requested_category(config, make_item):
    aggregator = make_aggregator(config, [StubAdapter("feed", [make_item("Too short")])])

    result = asyncio.run(aggregator.aggregate("US", ["tech", "news"]))

    assert result.used_fallback
    assert list(result.buckets) == ["tech", "news"]
    assert all(len(bucket) == 1 and bucket[0].link is None for bucket in result.buckets.values())


def test_cache_key_includes_categories(config, make_item):
    adapter = StubAdapter("feed", [make_item("Startup launches open source database engine", category_hint="tech")])
    aggregator = make_aggregator(config, [adapter])

    async def run():
        await aggregator.aggregate("US", ["tech"])
        await aggregator.aggregate("us", ["tech"])
        await aggregator.aggregate("US", ["news"])

    asyncio.run(run())

    assert adapter.calls == 2
