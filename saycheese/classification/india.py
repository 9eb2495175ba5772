"""India relevance filter for the general pipeline."""

import logging
import math
import re
from typing import Iterable, List, Optional, Pattern

from ..filters.quality import community_name
from ..models import ContentItem

logger = logging.getLogger(__name__)

INDIAN_KEYWORDS = (
    # Cities
    "mumbai", "delhi", "bangalore", "hyderabad", "chennai", "kolkata", "pune", "ahmedabad",
    "jaipur", "lucknow", "kanpur", "nagpur", "indore", "thane", "bhopal", "visakhapatnam",
    "pimpri", "patna", "vadodara", "ghaziabad", "ludhiana", "agra", "nashik", "faridabad",
    "meerut", "rajkot", "kalyan", "vasai", "varanasi", "srinagar",
    # States
    "maharashtra", "uttar pradesh", "bihar", "west bengal", "madhya pradesh", "tamil nadu",
    "rajasthan", "karnataka", "gujarat", "andhra pradesh", "odisha", "telangana", "kerala",
    "jharkhand", "assam", "punjab", "chhattisgarh", "haryana", "jammu kashmir", "uttarakhand",
    "himachal pradesh", "tripura", "meghalaya", "manipur", "nagaland", "goa",
    "arunachal pradesh", "mizoram", "sikkim",
    # Country
    "india", "indian", "bharath", "bharat", "hindustan",
    # Culture and politics
    "bollywood", "cricket", "ipl", "modi", "bjp", "congress", "lok sabha", "rajya sabha",
    "diwali", "holi", "eid", "ganesh", "durga puja", "navratri", "karva chauth",
    "hindi", "tamil", "telugu", "malayalam", "kannada", "gujarati", "marathi", "bengali", "punjabi",
    # Organizations and brands
    "isro", "drdo", "tata", "reliance", "infosys", "wipro", "airtel", "jio", "paytm", "flipkart",
    "ola", "uber india", "zomato", "swiggy", "byjus", "zerodha",
    # Economy and institutions
    "rupee", "nse", "bse", "sensex", "nifty", "reserve bank", "rbi",
    "iit", "nit", "aiims", "upsc", "neet", "jee",
    # Regions
    "south india", "north india", "east india", "west india", "northeast india",
)

INDIAN_DOMAINS = (
    "zeenews.india.com", "timesofindia.indiatimes.com", "indianexpress.com",
    "hindustantimes.com", "ndtv.com", "news18.com", "indiatoday.in", "firstpost.com",
    "scroll.in", "theprint.in", "livemint.com", "moneycontrol.com",
    "economictimes.indiatimes.com", "cricbuzz.com", "india.com",
)

INDIAN_COMMUNITIES = frozenset({
    "india", "indiaspeaks", "mumbai", "delhi", "bangalore", "hyderabad", "chennai",
    "kolkata", "pune", "indianews", "bollywood", "cricket", "indianfood",
    "indianstartups", "indiainvestments",
})

FOREIGN_KEYWORDS = (
    "china", "pakistan", "bangladesh", "sri lanka", "nepal", "myanmar",
    "trump", "biden", "usa", "america", "uk", "britain", "europe",
    "russia", "ukraine", "putin", "france", "germany", "japan",
)


def _alternation(keywords: Iterable[str]) -> Pattern:
    return re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b")


class IndiaRelevanceFilter:
    """Score and order items by relevance to an Indian audience."""

    def __init__(self, indian_share: float = 0.7) -> None:
        """
        Initialize filter.

        Args:
            indian_share: Fraction of the output reserved for India-relevant items
        """
        self.indian_share = indian_share
        self._indian = _alternation(INDIAN_KEYWORDS)
        self._foreign = _alternation(FOREIGN_KEYWORDS)

    @staticmethod
    def _text(item: ContentItem) -> str:
        parts = [item.title, item.description, item.source, item.author or ""]
        return " ".join(parts).lower()

    def relevance(self, item: ContentItem) -> int:
        """Signed relevance: domain +3, keywords +2, community +2, foreign focus -3."""
        text = self._text(item)
        link = (item.link or "").lower()
        score = 0
        if any(domain in link for domain in INDIAN_DOMAINS):
            score += 3
        if self._indian.search(text):
            score += 2
        if item.source.lower().startswith("r/") and community_name(item.source) in INDIAN_COMMUNITIES:
            score += 2
        if self._foreign.search(text):
            score -= 3
        return score

    def is_indian(self, item: ContentItem) -> bool:
        return self.relevance(item) > 0

    def filter_indian(self, items: Iterable[ContentItem], limit: Optional[int] = None) -> List[ContentItem]:
        """India-relevant items first (up to the configured share), then international ones."""
        items = list(items)
        indian = [item for item in items if self.is_indian(item)]
        other = [item for item in items if not self.is_indian(item)]

        total = len(items) if limit is None else min(limit, len(items))
        max_indian = min(len(indian), math.ceil(total * self.indian_share))
        max_other = min(len(other), total - max_indian)

        logger.info(
            "India filter: %d Indian + %d international of %d items",
            max_indian, max_other, len(items),
        )
        return indian[:max_indian] + other[:max_other]
