"""Placeholder content used when a run produces nothing to show."""

from typing import Dict, List, Optional

import pendulum

from ..models import Category, ConfidenceLevel, ContentItem, Platform, Priority, TeluguConfidence

FALLBACK_SOURCE = "SayCheese"

TELUGU_FALLBACK = {
    Category.POLITICS: [
        ("Telugu content aggregation service initializing...", "Regional political updates will appear here shortly."),
    ],
    Category.CINEMA: [
        ("Tollywood updates are being collected", "Film news from Telugu cinema sources will appear here shortly."),
    ],
    Category.ALL: [
        ("Telugu trending content is on its way", "Sports, business and culture stories will appear here shortly."),
    ],
}

GENERAL_FALLBACK = (
    ("Trending content is being collected", "Stories from news and community sources will appear here shortly."),
)


def _placeholder(
    title: str,
    description: str,
    category: Optional[Category],
    category_hint: Optional[str],
    now: pendulum.DateTime,
) -> ContentItem:
    return ContentItem(
        title=title,
        description=description,
        published_at=now,
        source=FALLBACK_SOURCE,
        platform=Platform.INTERNAL,
        priority=Priority.LOW,
        category=category,
        category_hint=category_hint,
        telugu_confidence=TeluguConfidence(level=ConfidenceLevel.LOW, category=category, score=0.1)
        if category is not None
        else None,
        trending_score=0.1,
    )


def telugu_fallback(now: Optional[pendulum.DateTime] = None) -> Dict[str, List[ContentItem]]:
    """Fixed placeholder buckets. Items carry no links and are stamped now."""
    now = now or pendulum.now("UTC")
    return {
        category.value: [
            _placeholder(title, description, category, None, now) for title, description in entries
        ]
        for category, entries in TELUGU_FALLBACK.items()
    }


def general_fallback(categories: List[str], now: Optional[pendulum.DateTime] = None) -> Dict[str, List[ContentItem]]:
    """One placeholder per requested category."""
    now = now or pendulum.now("UTC")
    return {
        category: [
            _placeholder(title, description, None, category, now) for title, description in GENERAL_FALLBACK
        ]
        for category in categories
    }
