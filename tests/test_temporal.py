"""Tests for timestamp parsing and the recency filter."""

from datetime import datetime

import pendulum

from saycheese.filters.temporal import (
    BEFORE_FLOOR,
    IN_FUTURE,
    OUTSIDE_WINDOW,
    UNPARSEABLE,
    TemporalFilter,
    from_epoch,
    parse_timestamp,
)
from saycheese.models import ContentItem


def test_parse_timestamp_numbers_are_milliseconds():
    parsed = parse_timestamp(1_700_000_000_000)
    assert parsed == pendulum.datetime(2023, 11, 14, 22, 13, 20, tz="UTC")


def test_parse_timestamp_strings_and_naive_datetimes():
    assert parse_timestamp("2024-03-01T10:00:00+05:30") == pendulum.datetime(2024, 3, 1, 4, 30, tz="UTC")
    assert parse_timestamp(datetime(2024, 3, 1, 12, 0)) == pendulum.datetime(2024, 3, 1, 12, 0, tz="UTC")


def test_parse_timestamp_rejects_garbage():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("garbage") is None
    assert parse_timestamp(True) is None


def test_from_epoch_seconds():
    assert from_epoch(1_700_000_000) == parse_timestamp(1_700_000_000_000)
    assert from_epoch("1700000000") == parse_timestamp(1_700_000_000_000)
    assert from_epoch(0) is None
    assert from_epoch("abc") is None


def test_window_boundaries(make_item, now):
    temporal = TemporalFilter(window_days=7)

    assert temporal.rejection_reason(make_item("Fresh headline for testing"), now=now) is None
    old = make_item("Old headline for testing", published_at=now.subtract(days=8))
    assert temporal.rejection_reason(old, now=now) == OUTSIDE_WINDOW
    assert temporal.rejection_reason(old, window_days=10, now=now) is None


def test_floor_and_future(make_item, now):
    temporal = TemporalFilter(window_days=7)

    ancient = make_item("Ancient headline for testing", published_at=pendulum.datetime(2019, 12, 31, tz="UTC"))
    assert temporal.rejection_reason(ancient, window_days=100_000, now=now) == BEFORE_FLOOR

    skewed = make_item("Slightly ahead headline", published_at=now.add(hours=12))
    assert temporal.rejection_reason(skewed, now=now) is None

    future = make_item("Far future headline text", published_at=now.add(days=3))
    assert temporal.rejection_reason(future, now=now) == IN_FUTURE


def test_missing_and_unparseable_timestamps(now):
    temporal = TemporalFilter()
    missing = ContentItem(title="Headline with no date at all")
    garbled = ContentItem(title="Headline with broken date", published_raw="yesterday-ish")

    assert temporal.is_recent(missing, now=now)
    assert not temporal.has_known_recent_timestamp(missing, now=now)
    assert temporal.rejection_reason(garbled, now=now) == UNPARSEABLE

    strict = TemporalFilter(allow_missing=False)
    assert strict.rejection_reason(missing, now=now) == UNPARSEABLE


def test_partition_counts_rejections_per_source(make_item, now):
    temporal = TemporalFilter(window_days=7)
    items = [
        make_item("Recent one from feed A", source="A"),
        make_item("Stale one from feed A", source="A", published_at=now.subtract(days=30)),
        make_item("Stale one from feed B", source="B", published_at=now.subtract(days=9)),
    ]

    kept, rejected = temporal.partition(items)

    assert [item.title for item in kept] == ["Recent one from feed A"]
    assert rejected["A"][OUTSIDE_WINDOW] == 1
    assert rejected["B"][OUTSIDE_WINDOW] == 1
    assert temporal.filter_recent(items) == kept
