"""Ranking models."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class ItemScore(BaseModel):
    """Trending score with its additive breakdown."""

    item_id: str = Field(..., description="Scored item id")
    total_score: float = Field(..., description="Sum of all components")
    base_score: float = Field(0.0, description="Classifier confidence", ge=0.0, le=1.0)
    recency_bonus: float = Field(0.0, description="Recency window bonus")
    priority_adjustment: float = Field(0.0, description="Source priority bonus or penalty")
    engagement_bonus: float = Field(0.0, description="Community engagement bonuses")
    category_bonus: float = Field(0.0, description="Bucket bonus")
    magnitude_bonus: float = Field(0.0, description="Views or volume bonus")
    reason: str = Field(..., description="Human-readable scoring reason")
    debug_info: Optional[Dict] = Field(None, description="Additional debug information")
