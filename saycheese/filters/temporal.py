"""Timestamp normalization and recency-window filtering."""

import logging
from collections import Counter, defaultdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pendulum

from ..models import ContentItem

logger = logging.getLogger(__name__)

# Rejection reasons
UNPARSEABLE = "unparseable"
BEFORE_FLOOR = "before_floor"
IN_FUTURE = "in_future"
OUTSIDE_WINDOW = "outside_window"


def parse_timestamp(value: Any) -> Optional[pendulum.DateTime]:
    """
    Normalize an upstream timestamp to an aware UTC datetime.

    Numbers are read as epoch milliseconds, the common representation every
    adapter converts to. Returns None when the value is absent or unparseable.
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return pendulum.instance(value, tz="UTC")
            return pendulum.instance(value).in_timezone("UTC")

        if isinstance(value, (int, float)):
            return pendulum.from_timestamp(value / 1000.0, tz="UTC")

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            parsed = pendulum.parse(text, strict=False)
            if not isinstance(parsed, pendulum.DateTime):
                return None
            return parsed.in_timezone("UTC")
    except (ValueError, TypeError, OverflowError, OSError):
        return None

    return None


def from_epoch(value: Any, unit: str = "s") -> Optional[pendulum.DateTime]:
    """Convert epoch seconds (or milliseconds with ``unit="ms"``) to UTC."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number <= 0:
        return None
    if unit == "s":
        number *= 1000.0
    return parse_timestamp(number)


class TemporalFilter:
    """Reject items outside the recency window or with implausible timestamps."""

    def __init__(
        self,
        window_days: int = 7,
        min_year: int = 2020,
        future_tolerance_days: int = 1,
        allow_missing: bool = True,
    ) -> None:
        """
        Initialize temporal filter.

        Args:
            window_days: Default recency window
            min_year: Hard floor; anything before Jan 1 of this year is corrupt
            future_tolerance_days: Clock-skew allowance for future timestamps
            allow_missing: Whether items with no timestamp at all pass (unknown age)
        """
        self.window_days = window_days
        self.floor = pendulum.datetime(min_year, 1, 1, tz="UTC")
        self.future_tolerance_days = future_tolerance_days
        self.allow_missing = allow_missing

    def rejection_reason(
        self,
        item: ContentItem,
        window_days: Optional[int] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> Optional[str]:
        """Return why the item is rejected, or None if it passes."""
        if item.published_at is None:
            if item.published_raw:
                return UNPARSEABLE
            return None if self.allow_missing else UNPARSEABLE

        published = parse_timestamp(item.published_at)
        if published is None:
            return UNPARSEABLE

        now = now or pendulum.now("UTC")
        days = self.window_days if window_days is None else window_days

        if published < self.floor:
            return BEFORE_FLOOR
        if published > now.add(days=self.future_tolerance_days):
            return IN_FUTURE
        if (now - published).total_seconds() > days * 86400:
            return OUTSIDE_WINDOW
        return None

    def is_recent(
        self,
        item: ContentItem,
        window_days: Optional[int] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> bool:
        """Whether the item falls inside the recency window."""
        return self.rejection_reason(item, window_days, now) is None

    def has_known_recent_timestamp(
        self,
        item: ContentItem,
        window_days: Optional[int] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> bool:
        """Stricter variant used for scoring: unknown age does not count as recent."""
        return item.published_at is not None and self.is_recent(item, window_days, now)

    def partition(
        self,
        items: Iterable[ContentItem],
        window_days: Optional[int] = None,
    ) -> Tuple[List[ContentItem], Dict[str, Counter]]:
        """Split items into survivors and per-source rejection counts by reason."""
        now = pendulum.now("UTC")
        kept: List[ContentItem] = []
        rejected: Dict[str, Counter] = defaultdict(Counter)

        for item in items:
            reason = self.rejection_reason(item, window_days, now)
            if reason is None:
                kept.append(item)
            else:
                rejected[item.source][reason] += 1

        return kept, dict(rejected)

    def filter_recent(
        self,
        items: Iterable[ContentItem],
        window_days: Optional[int] = None,
    ) -> List[ContentItem]:
        """Keep only recent items, logging how many each source lost."""
        items = list(items)
        kept, rejected = self.partition(items, window_days)

        for source, reasons in sorted(rejected.items()):
            details = ", ".join(f"{reason}={count}" for reason, count in sorted(reasons.items()))
            logger.info("Temporal filter: %s lost %d items (%s)", source, sum(reasons.values()), details)

        days = self.window_days if window_days is None else window_days
        logger.info("Temporal filter: %d/%d items within %d days", len(kept), len(items), days)
        return kept
