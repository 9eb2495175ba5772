"""Base model class and enums shared across the pipeline."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class Platform(str, Enum):
    """Origin platform of a content item."""

    REDDIT = "reddit"
    RSS = "rss"
    NEWS = "news"
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    GITHUB = "github"
    HACKERNEWS = "hackernews"
    DEVTO = "devto"
    LOBSTERS = "lobsters"
    GOOGLE_TRENDS = "google-trends"
    INTERNAL = "internal"


class Priority(str, Enum):
    """Source-declared trust tier."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(str, Enum):
    """Output bucket for a classified item."""

    POLITICS = "Politics"
    CINEMA = "Cinema"
    ALL = "All"


class ConfidenceLevel(str, Enum):
    """Coarse confidence bucket derived from strong-indicator count."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PipelineModel(BaseModel):
    """Base model for everything passed between pipeline stages."""

    class Config:
        """Pydantic config."""

        json_encoders = {
            datetime: lambda v: v.isoformat() if v else None,
        }
