"""Keyword taxonomy model and compiled matcher."""

import re
from pathlib import Path
from typing import Dict, List, Pattern, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from . import defaults


class KeywordTaxonomy(BaseModel):
    """Immutable keyword lists used by the classifier. Defaults are the Telugu set."""

    actors: Tuple[str, ...] = Field(defaults.ACTORS, description="Lead actors")
    actresses: Tuple[str, ...] = Field(defaults.ACTRESSES, description="Lead actresses")
    directors: Tuple[str, ...] = Field(defaults.DIRECTORS, description="Directors and producers")
    movies: Tuple[str, ...] = Field(defaults.MOVIES, description="Current and recent titles")
    anticipated_movies: Tuple[str, ...] = Field(defaults.ANTICIPATED_MOVIES, description="Titles that get an extra boost")
    politicians: Tuple[str, ...] = Field(defaults.POLITICIANS, description="Regional political leaders")
    places: Tuple[str, ...] = Field(defaults.PLACES, description="Cities, districts and landmarks")
    parties: Tuple[str, ...] = Field(defaults.PARTIES, description="Political parties")
    production_houses: Tuple[str, ...] = Field(defaults.PRODUCTION_HOUSES, description="Studios and music labels")
    media_channels: Tuple[str, ...] = Field(defaults.MEDIA_CHANNELS, description="Regional news and film media")
    sports: Tuple[str, ...] = Field(defaults.SPORTS, description="Sports terms")
    business: Tuple[str, ...] = Field(defaults.BUSINESS, description="Business and tech terms")
    culture: Tuple[str, ...] = Field(defaults.CULTURE, description="Festivals, food and heritage")
    language_terms: Tuple[str, ...] = Field(defaults.LANGUAGE_TERMS, description="Language or home-state markers")
    identity_terms: Tuple[str, ...] = Field(defaults.IDENTITY_TERMS, description="Scored language markers")
    regional_terms: Tuple[str, ...] = Field(defaults.REGIONAL_TERMS, description="Scored regional markers")
    industry_terms: Tuple[str, ...] = Field(defaults.INDUSTRY_TERMS, description="Film industry names, strong on their own")
    hub_cities: Tuple[str, ...] = Field(defaults.HUB_CITIES, description="Cities that combine with named entities")
    cinema_terms: Tuple[str, ...] = Field(defaults.CINEMA_TERMS, description="Generic film vocabulary")
    politics_terms: Tuple[str, ...] = Field(defaults.POLITICS_TERMS, description="Generic governance vocabulary")

    class Config:
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def normalize_keywords(cls, v):
        """Lowercase, strip and drop empty keywords."""
        if isinstance(v, (list, tuple)):
            return tuple(str(k).strip().lower() for k in v if str(k).strip())
        return v


KEYWORD_GROUPS = tuple(KeywordTaxonomy.model_fields)


def load_taxonomy(path: Path) -> KeywordTaxonomy:
    """Load a taxonomy from YAML. Groups left out keep their built-in lists."""
    if not path.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return KeywordTaxonomy(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in taxonomy file: {e}")
    except (ValidationError, TypeError) as e:
        raise ValueError(f"Invalid taxonomy: {e}")


def _compile(keyword: str) -> Pattern:
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


class TaxonomyMatcher:
    """Word-boundary matcher precompiled from a taxonomy."""

    def __init__(self, taxonomy: KeywordTaxonomy) -> None:
        self.taxonomy = taxonomy
        self._patterns: Dict[str, List[Tuple[str, Pattern]]] = {
            group: [(keyword, _compile(keyword)) for keyword in getattr(taxonomy, group)]
            for group in KEYWORD_GROUPS
        }

    def matches(self, group: str, text: str) -> List[str]:
        """Distinct keywords from ``group`` found in lowercased ``text``."""
        return [keyword for keyword, pattern in self._patterns[group] if pattern.search(text)]

    def has(self, group: str, text: str) -> bool:
        """Whether any keyword from ``group`` occurs in lowercased ``text``."""
        return any(pattern.search(text) for _, pattern in self._patterns[group])
