"""Additive components of the trending score."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..filters.temporal import TemporalFilter
from ..models import Category, ContentItem, Platform, Priority


class BaseScorer(ABC):
    """Base class for scoring components."""

    @abstractmethod
    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        """
        Contribution of this component to the trending score.

        Args:
            item: Classified item
            context: Additional context (e.g. the category being ranked)

        Returns:
            Additive amount, possibly negative
        """


class ConfidenceScorer(BaseScorer):
    """Base score carried over from classification."""

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        if item.telugu_confidence is None:
            return 0.0
        return item.telugu_confidence.score


class RecencyScorer(BaseScorer):
    """Flat bonus for items with a known timestamp inside the recency window."""

    def __init__(self, temporal: TemporalFilter, bonus: float = 0.3) -> None:
        self.temporal = temporal
        self.bonus = bonus

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        context = context or {}
        recent = self.temporal.has_known_recent_timestamp(
            item, context.get("window_days"), context.get("now")
        )
        return self.bonus if recent else 0.0


class PriorityScorer(BaseScorer):
    """Reward high-priority sources and penalize low-priority ones."""

    def __init__(self, high_bonus: float = 0.2, low_penalty: float = 0.1) -> None:
        self.high_bonus = high_bonus
        self.low_penalty = low_penalty

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        if item.priority == Priority.HIGH:
            return self.high_bonus
        if item.priority == Priority.LOW:
            return -self.low_penalty
        return 0.0


class CommunityEngagementScorer(BaseScorer):
    """Fixed bumps for community posts that clear engagement thresholds."""

    def __init__(
        self,
        upvote_threshold: int = 100,
        upvote_bonus: float = 0.25,
        comment_threshold: int = 20,
        comment_bonus: float = 0.2,
        ratio_threshold: float = 0.9,
        ratio_bonus: float = 0.15,
        flagship_communities: Optional[List[str]] = None,
        flagship_bonus: float = 0.25,
    ) -> None:
        self.upvote_threshold = upvote_threshold
        self.upvote_bonus = upvote_bonus
        self.comment_threshold = comment_threshold
        self.comment_bonus = comment_bonus
        self.ratio_threshold = ratio_threshold
        self.ratio_bonus = ratio_bonus
        self.flagship_communities = {c.lower() for c in (flagship_communities or [])}
        self.flagship_bonus = flagship_bonus

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        if item.platform != Platform.REDDIT:
            return 0.0

        engagement = item.engagement
        bonus = 0.0
        if engagement.score is not None and engagement.score > self.upvote_threshold:
            bonus += self.upvote_bonus
        if engagement.comments is not None and engagement.comments > self.comment_threshold:
            bonus += self.comment_bonus
        if engagement.upvote_ratio is not None and engagement.upvote_ratio > self.ratio_threshold:
            bonus += self.ratio_bonus
        if item.source.lower() in self.flagship_communities:
            bonus += self.flagship_bonus
        return bonus


class CategoryScorer(BaseScorer):
    """Small boosts that keep Cinema and All competitive with Politics."""

    def __init__(self, cinema_bonus: float = 0.1, all_bonus: float = 0.15) -> None:
        self.cinema_bonus = cinema_bonus
        self.all_bonus = all_bonus

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        category = (context or {}).get("category") or item.category
        if category == Category.CINEMA:
            return self.cinema_bonus
        if category == Category.ALL:
            return self.all_bonus
        return 0.0


class MagnitudeScorer(BaseScorer):
    """Flat bonus for very large view counts or search volumes."""

    def __init__(
        self,
        view_count_threshold: int = 100_000,
        volume_threshold: int = 10_000,
        bonus: float = 0.2,
    ) -> None:
        self.view_count_threshold = view_count_threshold
        self.volume_threshold = volume_threshold
        self.bonus = bonus

    def score(self, item: ContentItem, context: Optional[Dict] = None) -> float:
        engagement = item.engagement
        if engagement.view_count is not None and engagement.view_count > self.view_count_threshold:
            return self.bonus
        if engagement.volume is not None and engagement.volume > self.volume_threshold:
            return self.bonus
        return 0.0
