"""Aggregation pipelines."""

from .alternative import DEFAULT_CATEGORIES, AlternativeAggregator, parse_categories
from .fallback import general_fallback, telugu_fallback
from .models import AggregationResult, SourceReport, StageReport
from .orchestrator import TELUGU_CATEGORIES, BaseAggregator, TeluguAggregator
from .stages import PipelineStage, print_stage_summary

__all__ = [
    "AggregationResult",
    "AlternativeAggregator",
    "BaseAggregator",
    "DEFAULT_CATEGORIES",
    "PipelineStage",
    "SourceReport",
    "StageReport",
    "TELUGU_CATEGORIES",
    "TeluguAggregator",
    "general_fallback",
    "parse_categories",
    "print_stage_summary",
    "telugu_fallback",
]
