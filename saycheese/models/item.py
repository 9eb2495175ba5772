"""Content item model passed between every pipeline stage."""

import hashlib
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from .base import Category, ConfidenceLevel, PipelineModel, Platform, Priority


class Engagement(PipelineModel):
    """Platform-specific engagement signals. Every field is optional."""

    score: Optional[int] = Field(None, description="Upvotes / points / reactions")
    comments: Optional[int] = Field(None, description="Comment count")
    upvote_ratio: Optional[float] = Field(None, description="Reddit upvote ratio", ge=0.0, le=1.0)
    view_count: Optional[int] = Field(None, description="Video views")
    volume: Optional[int] = Field(None, description="Search or tweet volume")


class TeluguConfidence(PipelineModel):
    """Classification verdict attached to an item."""

    is_match: bool = Field(False, description="At least one strong indicator fired")
    level: ConfidenceLevel = Field(ConfidenceLevel.LOW, description="Coarse confidence bucket")
    category: Category = Field(Category.ALL, description="Assigned bucket")
    score: float = Field(0.0, description="Keyword confidence on a 0-1 scale", ge=0.0, le=1.0)
    indicators: List[str] = Field(default_factory=list, description="Strong indicators that fired")


def make_item_id(platform: str, key: str) -> str:
    """Stable short id from platform and link (or title)."""
    digest = hashlib.sha256(f"{platform}:{key}".encode("utf-8")).hexdigest()
    return f"{platform}-{digest[:16]}"


class ContentItem(PipelineModel):
    """Universal item shape produced by adapters and enriched by each stage."""

    id: str = Field("", description="Stable item id")
    title: str = Field(..., description="Item title", min_length=1)
    description: str = Field("", description="Summary or selftext")
    link: Optional[str] = Field(None, description="Canonical link, absent when unlinkable")
    published_at: Optional[datetime] = Field(None, description="Publication time (UTC)")
    published_raw: Optional[str] = Field(
        None, description="Upstream timestamp as received, kept when it could not be parsed"
    )
    source: str = Field("Unknown", description="Human-readable origin, e.g. r/india or Eenadu")
    platform: Platform = Field(Platform.RSS, description="Origin platform")
    priority: Priority = Field(Priority.MEDIUM, description="Source trust tier")
    category_hint: Optional[str] = Field(None, description="Source-declared category")
    author: Optional[str] = Field(None, description="Author or submitter")
    engagement: Engagement = Field(default_factory=Engagement)

    # Derived by pipeline stages
    quality_score: Optional[float] = Field(None, description="Quality ranking score")
    is_valid_url: Optional[bool] = Field(None, description="URL validation outcome")
    telugu_confidence: Optional[TeluguConfidence] = Field(None, description="Classifier verdict")
    category: Optional[Category] = Field(None, description="Output bucket")
    trending_score: Optional[float] = Field(None, description="Final ranking score")

    @model_validator(mode="after")
    def fill_id(self) -> "ContentItem":
        if not self.id:
            self.id = make_item_id(self.platform.value, self.link or self.title)
        return self

    @property
    def has_link(self) -> bool:
        """Whether the item carries a link that must pass URL validation."""
        return bool(self.link and self.link.strip() and self.link.strip() != "#")

    @property
    def display_category(self) -> str:
        """Assigned bucket, else classifier bucket, else the source-declared category."""
        if self.category is not None:
            return self.category.value
        if self.telugu_confidence is not None:
            return self.telugu_confidence.category.value
        return self.category_hint or Category.ALL.value

    def to_public(self) -> Dict[str, Any]:
        """Serialize for API consumers. Platform fields are included only when present."""
        confidence = self.telugu_confidence
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.link,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "source": self.source,
            "category": self.display_category,
            "platform": self.platform.value,
            "priority": self.priority.value,
            "trending_score": round(self.trending_score, 3) if self.trending_score is not None else None,
            "confidence": confidence.level.value if confidence else None,
        }

        optional = {
            "score": self.engagement.score,
            "comments": self.engagement.comments,
            "upvoteRatio": self.engagement.upvote_ratio,
            "viewCount": self.engagement.view_count,
            "tweetVolume": self.engagement.volume if self.platform == Platform.TWITTER else None,
            "searchVolume": self.engagement.volume if self.platform != Platform.TWITTER else None,
            "author": self.author,
        }
        payload.update({k: v for k, v in optional.items() if v is not None})
        return payload
