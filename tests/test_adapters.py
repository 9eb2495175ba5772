"""Tests for source adapters against mocked upstream responses."""

import asyncio
import json
import time

import httpx
import pendulum

from saycheese.config import FeedSource, SubredditSource
from saycheese.filters import TemporalFilter
from saycheese.filters.temporal import UNPARSEABLE
from saycheese.ingestion import (
    DevToAdapter,
    GitHubAdapter,
    GoogleTrendsAdapter,
    HackerNewsAdapter,
    LobstersAdapter,
    NewsAPIAdapter,
    RedditAdapter,
    RSSAdapter,
    clean_text,
    parse_traffic,
    strip_jsonp,
)
from saycheese.ingestion.base import unparsed_timestamp
from saycheese.models import Platform, Priority

RSS_BODY = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Cinema Feed</title>
    <item>
      <title>Allu Arjun wraps Pushpa schedule in Hyderabad</title>
      <link>https://cinema.example/pushpa</link>
      <description>&lt;p&gt;Shoot &amp; updates&lt;/p&gt;</description>
      <pubDate>{date}</pubDate>
    </item>
    <item>
      <title>Trailer date announced for Devara sequel</title>
      <link>https://cinema.example/devara</link>
      <pubDate>sometime last week</pubDate>
    </item>
  </channel>
</rss>
"""


def client_for(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_clean_text():
    assert clean_text("<p>Hello &amp;   <b>world</b></p>") == "Hello & world"
    assert clean_text(None) == ""
    assert clean_text("word " * 200, max_length=20).endswith("...")


def test_parse_traffic_and_jsonp():
    assert parse_traffic("200K+") == 200_000
    assert parse_traffic("2M+") == 2_000_000
    assert parse_traffic("1,500+") == 1_500
    assert parse_traffic(None) is None
    assert strip_jsonp(')]}\',\n{"a": 1}') == '{"a": 1}'


def test_rss_adapter_uses_backup_url():
    date = pendulum.now("UTC").subtract(hours=2).to_rfc2822_string()

    def handler(request):
        if request.url.host == "primary.example":
            return httpx.Response(503)
        return httpx.Response(200, text=RSS_BODY.format(date=date))

    source = FeedSource(
        name="Cinema Feed",
        url="https://primary.example/rss",
        backup_urls=["https://backup.example/rss"],
        priority=Priority.HIGH,
        category="cinema",
    )
    result = asyncio.run(RSSAdapter(client_for(handler), source).fetch())

    assert result.success
    assert result.item_count == 2
    first, second = result.items
    assert first.description == "Shoot & updates"
    assert first.priority == Priority.HIGH
    assert first.category_hint == "cinema"
    assert first.published_at is not None
    assert second.published_at is None
    assert second.published_raw == "sometime last week"


def test_rss_adapter_fails_when_every_url_fails():
    def handler(request):
        return httpx.Response(200, text="<html>not a feed</html>")

    source = FeedSource(name="Broken", url="https://broken.example/rss")
    result = asyncio.run(RSSAdapter(client_for(handler), source).fetch())

    assert not result.success
    assert "broken.example" in result.error
    assert result.items == []


def test_reddit_adapter_merges_hot_and_top():
    created = time.time() - 3600

    def post(post_id, title, **extra):
        data = {
            "id": post_id,
            "title": title,
            "permalink": f"/r/tollywood/comments/{post_id}/",
            "created_utc": created,
            "score": 150,
            "num_comments": 30,
            "upvote_ratio": 0.95,
            "author": "someone",
        }
        data.update(extra)
        return {"data": data}

    listings = {
        "/r/tollywood/hot.json": [post("a", "First post"), post("b", "Second post")],
        "/r/tollywood/top.json": [post("a", "First post"), post("c", "Third post", created_utc="garbage")],
    }

    def handler(request):
        return httpx.Response(200, json={"data": {"children": listings[request.url.path]}})

    adapter = RedditAdapter(client_for(handler), SubredditSource(name="tollywood", category="cinema"))
    result = asyncio.run(adapter.fetch())

    assert result.success
    assert [item.title for item in result.items] == ["First post", "Second post", "Third post"]
    first = result.items[0]
    assert first.source == "r/tollywood"
    assert first.platform == Platform.REDDIT
    assert first.link == "https://www.reddit.com/r/tollywood/comments/a/"
    assert first.engagement.score == 150
    assert first.engagement.upvote_ratio == 0.95
    assert result.items[2].published_at is None
    assert result.items[2].published_raw == "garbage"


def test_http_errors_become_failed_results():
    def handler(request):
        return httpx.Response(500)

    adapter = RedditAdapter(client_for(handler), SubredditSource(name="telugu"))
    result = asyncio.run(adapter.fetch())

    assert not result.success
    assert result.error.startswith("HTTP error")


def test_malformed_payload_becomes_failed_result():
    def handler(request):
        return httpx.Response(200, json={"unexpected": True})

    adapter = NewsAPIAdapter(client_for(handler), "key")
    result = asyncio.run(adapter.fetch())

    assert not result.success
    assert result.error.startswith("Malformed response")


def test_newsapi_sends_key_and_skips_removed():
    seen = {}

    def handler(request):
        seen["key"] = request.headers.get("X-Api-Key")
        seen["country"] = request.url.params.get("country")
        return httpx.Response(
            200,
            json={
                "articles": [
                    {"title": "[Removed]", "url": "https://removed.example"},
                    {
                        "title": "Monsoon session of parliament begins",
                        "url": "https://news.example/monsoon",
                        "publishedAt": "2024-07-22T05:00:00Z",
                        "source": {"name": "The Hindu"},
                    },
                ]
            },
        )

    result = asyncio.run(NewsAPIAdapter(client_for(handler), "secret", country="IN").fetch())

    assert seen == {"key": "secret", "country": "in"}
    assert [item.source for item in result.items] == ["The Hindu"]
    assert result.items[0].published_at == pendulum.datetime(2024, 7, 22, 5, tz="UTC")


def test_hacker_news_skips_failed_stories():
    def handler(request):
        path = request.url.path
        if path.endswith("topstories.json"):
            return httpx.Response(200, json=[1, 2, 3])
        if path.endswith("/1.json"):
            return httpx.Response(200, json={"id": 1, "title": "Show HN: tiny compiler", "time": 1_700_000_000, "score": 90})
        if path.endswith("/2.json"):
            return httpx.Response(500)
        return httpx.Response(200, json={"id": 3, "deleted": True})

    result = asyncio.run(HackerNewsAdapter(client_for(handler)).fetch())

    assert result.success
    assert [item.title for item in result.items] == ["Show HN: tiny compiler"]
    assert result.items[0].link == "https://news.ycombinator.com/item?id=1"
    assert result.items[0].category_hint == "tech"


def test_google_trends_adapter():
    payload = {
        "default": {
            "trendingSearchesDays": [
                {
                    "trendingSearches": [
                        {
                            "title": {"query": "India vs Australia test match"},
                            "formattedTraffic": "500K+",
                            "articles": [{"title": "Live score", "url": "https://sports.example/live"}],
                        },
                        {"title": {}, "formattedTraffic": "10K+"},
                    ]
                }
            ]
        }
    }

    def handler(request):
        assert request.url.params.get("geo") == "IN"
        return httpx.Response(200, text=")]}',\n" + json.dumps(payload))

    result = asyncio.run(GoogleTrendsAdapter(client_for(handler), geo="in").fetch())

    assert result.success
    item = result.items[0]
    assert len(result.items) == 1
    assert item.engagement.volume == 500_000
    assert item.link == "https://sports.example/live"
    assert item.platform == Platform.GOOGLE_TRENDS
    assert item.published_at is not None


def test_unparsed_timestamp():
    published = pendulum.now("UTC")
    assert unparsed_timestamp("2024-01-01", published) is None
    assert unparsed_timestamp(None, None) is None
    assert unparsed_timestamp("", None) is None
    assert unparsed_timestamp("not-a-date", None) == "not-a-date"
    assert unparsed_timestamp(-5, None) == "-5"


def test_tech_adapters_keep_unparseable_dates_for_the_recency_filter():
    def handler(request):
        host, path = request.url.host, request.url.path
        if host == "dev.to":
            return httpx.Response(
                200, json=[{"title": "Writing parsers by hand", "url": "https://dev.to/x", "published_at": "not-a-date"}]
            )
        if host == "api.github.com":
            return httpx.Response(
                200,
                json={"items": [{"full_name": "o/r", "html_url": "https://github.com/o/r", "created_at": "not-a-date"}]},
            )
        if host == "lobste.rs":
            return httpx.Response(
                200, json=[{"title": "Lexer tricks", "url": "https://lobste.rs/s/1", "created_at": "not-a-date"}]
            )
        if path.endswith("topstories.json"):
            return httpx.Response(200, json=[1])
        return httpx.Response(200, json={"id": 1, "title": "Show HN: a lexer", "time": "not-a-date"})

    client = client_for(handler)
    adapters = [DevToAdapter(client), GitHubAdapter(client), LobstersAdapter(client), HackerNewsAdapter(client)]
    temporal = TemporalFilter()

    for adapter in adapters:
        result = asyncio.run(adapter.fetch())
        assert result.success, adapter.name
        item = result.items[0]
        assert item.published_at is None
        assert item.published_raw == "not-a-date"
        assert temporal.rejection_reason(item) == UNPARSEABLE
        assert not temporal.is_recent(item)
