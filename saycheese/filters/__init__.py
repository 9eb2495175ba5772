"""Item filters: recency, quality, link reachability and de-duplication."""

from .dedup import deduplicate, normalize_title, normalize_url
from .quality import QualityFilter, community_name
from .temporal import TemporalFilter, from_epoch, parse_timestamp
from .urls import URLValidator, extract_youtube_video_id

__all__ = [
    "QualityFilter",
    "TemporalFilter",
    "URLValidator",
    "community_name",
    "deduplicate",
    "extract_youtube_video_id",
    "from_epoch",
    "normalize_title",
    "normalize_url",
    "parse_timestamp",
]
