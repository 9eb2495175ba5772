"""Keyword classification."""

from .india import IndiaRelevanceFilter
from .taxonomy import KEYWORD_GROUPS, KeywordTaxonomy, TaxonomyMatcher, load_taxonomy
from .telugu import TeluguClassifier

__all__ = [
    "IndiaRelevanceFilter",
    "KEYWORD_GROUPS",
    "KeywordTaxonomy",
    "TaxonomyMatcher",
    "TeluguClassifier",
    "load_taxonomy",
]
