"""Data models for the trending pipeline."""

from .base import Category, ConfidenceLevel, PipelineModel, Platform, Priority
from .item import ContentItem, Engagement, TeluguConfidence, make_item_id

__all__ = [
    "Category",
    "ConfidenceLevel",
    "ContentItem",
    "Engagement",
    "PipelineModel",
    "Platform",
    "Priority",
    "TeluguConfidence",
    "make_item_id",
]
