"""Aggregation result models."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..ingestion import FetchResult
from ..models import ContentItem, PipelineModel
from .stages import PipelineStage


class SourceReport(PipelineModel):
    """Per-adapter outcome included in responses."""

    name: str = Field(..., description="Adapter name")
    success: bool = Field(..., description="Whether the adapter returned data")
    item_count: int = Field(0, description="Items the adapter produced")
    error: Optional[str] = Field(None, description="Failure reason")
    duration_seconds: float = Field(0.0, description="Adapter wall time")

    @classmethod
    def from_fetch(cls, result: FetchResult) -> "SourceReport":
        return cls(
            name=result.adapter,
            success=result.success,
            item_count=result.item_count,
            error=result.error,
            duration_seconds=round(result.duration_seconds, 3),
        )


class StageReport(PipelineModel):
    """Snapshot of a finished pipeline stage."""

    name: str
    success: bool
    duration_seconds: float = 0.0
    error: Optional[str] = None
    stats: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_stage(cls, stage: PipelineStage) -> "StageReport":
        return cls(
            name=stage.name,
            success=stage.success,
            duration_seconds=round(stage.duration, 3),
            error=stage.error,
            stats=dict(stage.stats),
        )


class AggregationResult(PipelineModel):
    """Categorized output of one aggregation run."""

    timestamp: datetime = Field(..., description="When the run finished")
    region: str = Field(..., description="Requested region label")
    categories: List[str] = Field(..., description="Bucket names in display order")
    buckets: Dict[str, List[ContentItem]] = Field(default_factory=dict)
    sources: List[SourceReport] = Field(default_factory=list)
    stages: List[StageReport] = Field(default_factory=list)
    window_days: int = Field(7, description="Recency window applied")
    used_fallback: bool = Field(False, description="Whether placeholder content was substituted")

    @property
    def total_items(self) -> int:
        return sum(len(items) for items in self.buckets.values())

    def to_response(self) -> Dict[str, Any]:
        """JSON body for API consumers."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "region": self.region,
            "data": {
                category: [item.to_public() for item in self.buckets.get(category, [])]
                for category in self.categories
            },
            "categories": list(self.categories),
            "sources": [source.model_dump(mode="json") for source in self.sources],
            "dateFilter": {"windowDays": self.window_days},
            "fallback": self.used_fallback,
        }
