"""Trending ranker combining additive scoring components."""

from typing import Dict, Iterable, List, Optional

import pendulum
from rich.console import Console
from rich.table import Table

from ..config import RankingConfig
from ..filters.temporal import TemporalFilter
from ..models import Category, ContentItem
from .diversity import select_top
from .models import ItemScore
from .scorers import (
    CategoryScorer,
    CommunityEngagementScorer,
    ConfidenceScorer,
    MagnitudeScorer,
    PriorityScorer,
    RecencyScorer,
)

console = Console()


class TrendingRanker:
    """Score classified items and select the top of each bucket."""

    def __init__(
        self,
        config: Optional[RankingConfig] = None,
        temporal: Optional[TemporalFilter] = None,
    ) -> None:
        """
        Initialize trending ranker.

        Args:
            config: Bonuses, thresholds and selection limits
            temporal: Filter whose window decides the recency bonus
        """
        self.config = config or RankingConfig()
        self.temporal = temporal or TemporalFilter()

        c = self.config
        self.confidence_scorer = ConfidenceScorer()
        self.recency_scorer = RecencyScorer(self.temporal, bonus=c.recency_bonus)
        self.priority_scorer = PriorityScorer(c.high_priority_bonus, c.low_priority_penalty)
        self.engagement_scorer = CommunityEngagementScorer(
            upvote_threshold=c.upvote_threshold,
            upvote_bonus=c.upvote_bonus,
            comment_threshold=c.comment_threshold,
            comment_bonus=c.comment_bonus,
            ratio_threshold=c.upvote_ratio_threshold,
            ratio_bonus=c.upvote_ratio_bonus,
            flagship_communities=c.flagship_communities,
            flagship_bonus=c.flagship_bonus,
        )
        self.category_scorer = CategoryScorer(c.cinema_bonus, c.all_bonus)
        self.magnitude_scorer = MagnitudeScorer(
            c.view_count_threshold, c.volume_threshold, c.magnitude_bonus
        )

    def _generate_reason(self, scores: Dict[str, float], item: ContentItem) -> str:
        """Generate human-readable reason for score."""
        reasons = []

        if scores["base"] >= 0.8:
            reasons.append("Strong regional match")
        elif scores["base"] <= 0.3:
            reasons.append("Weak keyword evidence")

        if scores["recency"] > 0:
            reasons.append("recent")
        if scores["priority"] > 0:
            reasons.append("from high-priority source")
        elif scores["priority"] < 0:
            reasons.append("from low-priority source")
        if scores["engagement"] > 0:
            reasons.append("active community discussion")
        if scores["magnitude"] > 0:
            reasons.append("very high reach")

        if not reasons:
            reasons.append("Balanced scoring across factors")

        return "; ".join(reasons) + f" ({item.source})"

    def score_item(
        self,
        item: ContentItem,
        category: Optional[Category] = None,
        now: Optional[pendulum.DateTime] = None,
        window_days: Optional[int] = None,
    ) -> ItemScore:
        """Score a single item with a full breakdown."""
        context = {
            "category": category or item.category,
            "now": now,
            "window_days": window_days,
        }

        scores = {
            "base": self.confidence_scorer.score(item, context),
            "recency": self.recency_scorer.score(item, context),
            "priority": self.priority_scorer.score(item, context),
            "engagement": self.engagement_scorer.score(item, context),
            "category": self.category_scorer.score(item, context),
            "magnitude": self.magnitude_scorer.score(item, context),
        }

        return ItemScore(
            item_id=item.id,
            total_score=sum(scores.values()),
            base_score=scores["base"],
            recency_bonus=scores["recency"],
            priority_adjustment=scores["priority"],
            engagement_bonus=scores["engagement"],
            category_bonus=scores["category"],
            magnitude_bonus=scores["magnitude"],
            reason=self._generate_reason(scores, item),
            debug_info={
                "title": item.title,
                "source": item.source,
                "platform": item.platform.value,
            },
        )

    def score(self, item: ContentItem, category: Optional[Category] = None) -> float:
        """Total trending score."""
        return self.score_item(item, category).total_score

    def rank_category(
        self,
        items: Iterable[ContentItem],
        category: Category,
        k: Optional[int] = None,
        max_per_source: Optional[int] = None,
        window_days: Optional[int] = None,
    ) -> List[ContentItem]:
        """Score every item in a bucket and apply diversity-limited top-K selection."""
        now = pendulum.now("UTC")
        scored = [
            item.model_copy(
                update={
                    "category": category,
                    "trending_score": self.score_item(item, category, now, window_days).total_score,
                }
            )
            for item in items
        ]
        return select_top(
            scored,
            k=k if k is not None else self.config.max_items_per_category,
            max_per_source=max_per_source if max_per_source is not None else self.config.max_per_source,
        )


def print_ranked_items(title: str, items: List[ContentItem]) -> None:
    """Print a ranked bucket as a table."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Source", style="cyan")
    table.add_column("Title")

    for i, item in enumerate(items, 1):
        score = f"{item.trending_score:.3f}" if item.trending_score is not None else "-"
        table.add_row(str(i), score, item.source, item.title)

    console.print(table)
