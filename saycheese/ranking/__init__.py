"""Trending scoring and selection."""

from .diversity import select_top
from .models import ItemScore
from .ranker import TrendingRanker, print_ranked_items
from .scorers import (
    BaseScorer,
    CategoryScorer,
    CommunityEngagementScorer,
    ConfidenceScorer,
    MagnitudeScorer,
    PriorityScorer,
    RecencyScorer,
)

__all__ = [
    "BaseScorer",
    "CategoryScorer",
    "CommunityEngagementScorer",
    "ConfidenceScorer",
    "ItemScore",
    "MagnitudeScorer",
    "PriorityScorer",
    "RecencyScorer",
    "TrendingRanker",
    "print_ranked_items",
    "select_top",
]
