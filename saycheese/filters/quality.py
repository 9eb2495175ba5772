"""Heuristic quality filter and quality-score ordering."""

import logging
import re
from typing import Iterable, List, Optional

import pendulum

from ..models import ContentItem

logger = logging.getLogger(__name__)

# Personal-advice, meme and Q&A communities
EXCLUDED_COMMUNITIES = frozenset({
    "tragedeigh", "amitheasshole", "relationshipadvice", "unpopularopinion",
    "nostupidquestions", "explainlikeimfive", "confessions", "tifu", "petpeeves",
    "rant", "offmychest", "casualconversation", "advice", "askreddit",
    "showerthoughts", "mildlyinteresting", "mildlyinfuriating", "polls", "survey",
    "free", "circlejerk", "wholesomememes", "memes", "dankmemes", "me_irl",
    "teenagers", "college", "jobs", "resume", "personalfinance", "legaladvice",
    "relationships", "dating", "marriage", "parenting", "babies", "pregnant",
    "namenerds",
})

EXCLUDED_PHRASES = (
    "am i the only one", "does anyone else", "unpopular opinion", "change my mind",
    "am i wrong", "what do you think", "help me decide", "should i", "is it just me",
    "rate my", "judge my", "roast me", "advice needed", "what would you do",
    "personal story", "confession", "rant", "shower thought", "random thought",
    "eli5", "explain like", "stupid question", "probably dumb", "might be stupid",
    "baby name", "name suggestion", "what to name", "naming my",
)

PRIORITY_COMMUNITIES = frozenset({
    "worldnews", "news", "technology", "science", "business", "economics", "politics",
    "finance", "investing", "startups", "entrepreneur", "programming", "artificial",
    "machinelearning", "space", "environment", "climate", "energy", "healthcare",
    "medicine", "research", "academia", "datascience", "cybersecurity", "privacy",
    "linux", "android", "apple", "google", "microsoft", "tesla", "electricvehicles",
    "renewableenergy", "cryptocurrency", "blockchain", "stocks", "wallstreetbets",
    "personalfinanceindia", "indiainvestments", "indianstartups", "developersindia",
    "india", "indiaspeaks", "cricket", "bollywood", "indianfood", "travel",
    "photography", "art", "music", "movies", "books", "gaming", "sports",
})

PROFESSIONAL_KEYWORDS = (
    "announces", "launches", "releases", "reports", "study", "research",
    "breakthrough", "innovation", "technology", "develops", "discovers",
    "investment", "funding", "economy", "market", "industry", "company",
)

_PUNCTUATION = re.compile(r"[!?]")
_UPPERCASE = re.compile(r"[A-Z]")


def community_name(source: Optional[str]) -> str:
    """Lowercased community name with any ``r/`` prefix removed."""
    name = (source or "").strip().lower()
    if name.startswith("r/"):
        name = name[2:]
    return name


class QualityFilter:
    """Reject low-signal items and score the rest for ordering."""

    def __init__(
        self,
        min_title_length: int = 15,
        max_punctuation_ratio: float = 0.1,
        max_caps_ratio: float = 0.3,
        excluded_communities: Optional[Iterable[str]] = None,
        excluded_phrases: Optional[Iterable[str]] = None,
        priority_communities: Optional[Iterable[str]] = None,
    ) -> None:
        self.min_title_length = min_title_length
        self.max_punctuation_ratio = max_punctuation_ratio
        self.max_caps_ratio = max_caps_ratio
        self.excluded_communities = frozenset(
            c.lower() for c in (excluded_communities if excluded_communities is not None else EXCLUDED_COMMUNITIES)
        )
        self.excluded_phrases = tuple(
            p.lower() for p in (excluded_phrases if excluded_phrases is not None else EXCLUDED_PHRASES)
        )
        # Whole words only: "rant" must not hit "restaurant" or "warrant".
        self._phrase_patterns = tuple(re.compile(r"\b" + re.escape(p) + r"\b") for p in self.excluded_phrases)
        self.priority_communities = frozenset(
            c.lower() for c in (priority_communities if priority_communities is not None else PRIORITY_COMMUNITIES)
        )

    def rejection_reason(self, item: ContentItem) -> Optional[str]:
        """Return the first rule the item breaks, or None."""
        if community_name(item.source) in self.excluded_communities:
            return "excluded_community"

        title = item.title or ""
        lowered = title.lower()
        if any(pattern.search(lowered) for pattern in self._phrase_patterns):
            return "excluded_phrase"

        if len(title) < self.min_title_length:
            return "short_title"

        punctuation_ratio = len(_PUNCTUATION.findall(title)) / len(title)
        caps_ratio = len(_UPPERCASE.findall(title)) / len(title)
        if punctuation_ratio > self.max_punctuation_ratio or caps_ratio > self.max_caps_ratio:
            return "clickbait"

        return None

    def is_high_quality(self, item: ContentItem) -> bool:
        """Whether the item passes every hard rejection rule."""
        reason = self.rejection_reason(item)
        if reason is not None:
            logger.debug("Quality filter rejected (%s): %s", reason, item.title)
            return False
        return True

    def filter_high_quality(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        """Return the items that pass the hard rejection rules."""
        items = list(items)
        kept = [item for item in items if self.is_high_quality(item)]
        logger.info("Quality filter: %d/%d items passed", len(kept), len(items))
        return kept

    def score(self, item: ContentItem, now: Optional[pendulum.DateTime] = None) -> float:
        """Ranking score: priority community, engagement, freshness, title shape, keywords."""
        score = 0.0
        title = (item.title or "").lower()

        if community_name(item.source) in self.priority_communities:
            score += 5

        if item.engagement.score:
            score += min(item.engagement.score / 1000, 3)

        if item.published_at is not None:
            now = now or pendulum.now("UTC")
            published = pendulum.instance(item.published_at, tz="UTC")
            hours_ago = (now - published).total_seconds() / 3600
            if hours_ago < 6:
                score += 2
            elif hours_ago < 24:
                score += 1

        if 30 <= len(title) < 200:
            score += 1

        if any(keyword in title for keyword in PROFESSIONAL_KEYWORDS):
            score += 2

        return score

    def sort_by_quality(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        """Order items by descending quality score. Inputs are not modified."""
        now = pendulum.now("UTC")
        scored = [(self.score(item, now), item) for item in items]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [item for _, item in scored]
