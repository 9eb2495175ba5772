"""Data models for ingestion."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import ContentItem


class FetchResult(BaseModel):
    """Outcome of one adapter call. Failures carry an error instead of raising."""

    adapter: str = Field(..., description="Adapter name, e.g. r/tollywood or Eenadu")
    success: bool = Field(..., description="Whether fetch was successful")
    items: List[ContentItem] = Field(default_factory=list, description="Normalized items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items fetched")
    duration_seconds: float = Field(0.0, description="Wall time spent in the adapter")

    @classmethod
    def ok(cls, adapter: str, items: List[ContentItem], duration: float = 0.0) -> "FetchResult":
        return cls(adapter=adapter, success=True, items=items, item_count=len(items), duration_seconds=duration)

    @classmethod
    def failed(cls, adapter: str, error: str, duration: float = 0.0) -> "FetchResult":
        return cls(adapter=adapter, success=False, error=error, duration_seconds=duration)
