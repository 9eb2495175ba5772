"""Telugu relevance classifier."""

import logging
from typing import Dict, List, Optional

from ..models import Category, ConfidenceLevel, TeluguConfidence
from .taxonomy import KeywordTaxonomy, TaxonomyMatcher

logger = logging.getLogger(__name__)


class TeluguClassifier:
    """
    Decide whether text is Telugu-relevant and which bucket it belongs to.

    A single generic keyword is never enough: each strong indicator pairs two
    weak signals, except the film-industry name which is specific on its own.
    The classifier is a pure function of its taxonomy and input text.
    """

    def __init__(self, taxonomy: Optional[KeywordTaxonomy] = None) -> None:
        """
        Initialize classifier.

        Args:
            taxonomy: Keyword lists; the built-in Telugu taxonomy when omitted
        """
        self.taxonomy = taxonomy or KeywordTaxonomy()
        self.matcher = TaxonomyMatcher(self.taxonomy)

    @staticmethod
    def _text(title: Optional[str], description: Optional[str]) -> str:
        return f"{title or ''} {description or ''}".strip().lower()

    def signals(self, text: str) -> Dict[str, bool]:
        """Weak keyword signals for lowercased text."""
        m = self.matcher
        return {
            "actor": m.has("actors", text),
            "actress": m.has("actresses", text),
            "director": m.has("directors", text),
            "movie": m.has("movies", text),
            "politician": m.has("politicians", text),
            "party": m.has("parties", text),
            "place": m.has("places", text),
            "media": m.has("media_channels", text),
            "sports": m.has("sports", text),
            "business": m.has("business", text),
            "culture": m.has("culture", text),
            "language": m.has("language_terms", text),
            "industry": m.has("industry_terms", text),
            "hub_city": m.has("hub_cities", text),
            "cinema_terms": m.has("cinema_terms", text),
            "politics_terms": m.has("politics_terms", text),
        }

    def strong_indicators(self, text: str) -> List[str]:
        """Names of the strong indicators that fire for lowercased text."""
        s = self.signals(text)
        checks = {
            "star_with_language": (s["actor"] or s["actress"]) and s["language"],
            "movie_with_crew": s["movie"] and (s["actor"] or s["director"]),
            "politician_with_place": s["politician"] and s["place"],
            "media_with_language": s["media"] and s["language"],
            "sports_with_place": s["sports"] and s["place"],
            "business_with_place": s["business"] and s["place"],
            "culture_with_place": s["culture"] and s["place"],
            "film_industry": s["industry"],
            "hub_city_with_entity": s["hub_city"]
            and (s["actor"] or s["politician"] or s["sports"] or s["business"]),
        }
        return [name for name, fired in checks.items() if fired]

    def categorize(self, text: str) -> Category:
        """Bucket assignment. Politics wins over Cinema, everything else is All."""
        s = self.signals(text)
        if s["politician"] or s["party"] or s["politics_terms"]:
            return Category.POLITICS
        if s["actor"] or s["actress"] or s["director"] or s["movie"] or s["cinema_terms"]:
            return Category.CINEMA
        return Category.ALL

    def confidence_score(self, title: Optional[str], description: Optional[str] = "") -> float:
        """Keyword-weighted confidence on a 0-1 scale."""
        text = self._text(title, description)
        if not text:
            return 0.0

        m = self.matcher
        score = 0.0
        score += min(len(m.matches("actors", text)) * 0.3, 0.6)
        score += min(len(m.matches("movies", text)) * 0.4, 0.8)
        if m.has("anticipated_movies", text):
            score += 0.3
        score += min(len(m.matches("places", text)) * 0.2, 0.4)
        if m.has("identity_terms", text):
            score += 0.5
        if m.has("regional_terms", text):
            score += 0.3

        diverse = (
            len(m.matches("sports", text))
            + len(m.matches("business", text))
            + len(m.matches("culture", text))
        )
        score += min(diverse * 0.2, 0.4)

        return min(score, 1.0)

    def classify(self, title: Optional[str], description: Optional[str] = "") -> TeluguConfidence:
        """Classify text. Never raises; empty text is a non-match in the All bucket."""
        text = self._text(title, description)
        if not text:
            return TeluguConfidence()

        indicators = self.strong_indicators(text)
        if len(indicators) >= 2:
            level = ConfidenceLevel.HIGH
        elif len(indicators) == 1:
            level = ConfidenceLevel.MEDIUM
        else:
            level = ConfidenceLevel.LOW

        return TeluguConfidence(
            is_match=bool(indicators),
            level=level,
            category=self.categorize(text),
            score=self.confidence_score(title, description),
            indicators=indicators,
        )
