"""Tests for the Telugu classifier and keyword taxonomy."""

import pytest
import yaml

from saycheese.classification import (
    IndiaRelevanceFilter,
    KeywordTaxonomy,
    TaxonomyMatcher,
    TeluguClassifier,
    load_taxonomy,
)
from saycheese.models import Category, ConfidenceLevel, Platform


@pytest.fixture(scope="module")
def classifier():
    return TeluguClassifier()


def test_politics_match(classifier):
    verdict = classifier.classify("KCR launches new metro project in Hyderabad")

    assert verdict.is_match
    assert verdict.category == Category.POLITICS
    assert verdict.level in (ConfidenceLevel.MEDIUM, ConfidenceLevel.HIGH)
    assert "politician_with_place" in verdict.indicators


def test_unrelated_headline_is_not_a_match(classifier):
    verdict = classifier.classify("New iPhone released with better camera")

    assert not verdict.is_match
    assert verdict.level == ConfidenceLevel.LOW
    assert verdict.indicators == []


def test_single_generic_keyword_is_not_enough(classifier):
    # A place alone, or a film term alone, is only a weak signal
    assert not classifier.classify("Traffic diversions announced in Warangal today").is_match
    assert not classifier.classify("Box office numbers for the weekend are out").is_match


def test_cinema_bucket(classifier):
    verdict = classifier.classify("Prabhas and Rajamouli reunite for Tollywood epic")

    assert verdict.is_match
    assert verdict.category == Category.CINEMA
    assert verdict.level == ConfidenceLevel.HIGH
    assert {"star_with_language", "film_industry"} <= set(verdict.indicators)


def test_politics_wins_over_cinema(classifier):
    verdict = classifier.classify("Pawan Kalyan skips movie shoot for assembly session in Vijayawada")
    assert verdict.category == Category.POLITICS


def test_other_matches_land_in_all(classifier):
    verdict = classifier.classify("Sunrisers Hyderabad win thriller at Uppal stadium")

    assert verdict.is_match
    assert verdict.category == Category.ALL


def test_word_boundaries(classifier):
    # "ntr" must not fire inside "entries"
    assert classifier.matcher.matches("actors", "contest entries open") == []
    assert classifier.matcher.matches("actors", "jr ntr at the launch") == ["jr ntr", "ntr"]


def test_empty_text_defaults(classifier):
    verdict = classifier.classify("", "")
    assert not verdict.is_match
    assert verdict.category == Category.ALL
    assert verdict.score == 0.0


def test_confidence_score_is_capped(classifier):
    score = classifier.confidence_score(
        "Telugu Tollywood: Prabhas, Allu Arjun, Pushpa 2 and Devara in Hyderabad Telangana",
        "Mahesh Babu, Kalki 2898 AD, cricket, startup and festival buzz in Vijayawada",
    )
    assert score == 1.0
    assert classifier.confidence_score("Nothing relevant here") == 0.0


def test_classification_is_deterministic(classifier):
    title = "Revanth Reddy reviews Hyderabad metro expansion"
    assert classifier.classify(title) == classifier.classify(title)


def test_synthetic_taxonomy():
    taxonomy = KeywordTaxonomy(
        actors=["Ada Star"],
        politicians=["Governor Grey"],
        places=["Lakeside"],
        language_terms=["Lakeshire"],
        industry_terms=[],
        hub_cities=[],
        politics_terms=[],
        cinema_terms=[],
    )
    classifier = TeluguClassifier(taxonomy)

    assert taxonomy.actors == ("ada star",)
    assert classifier.classify("Governor Grey opens bridge in Lakeside").category == Category.POLITICS
    assert classifier.classify("Ada Star signs Lakeshire film").category == Category.CINEMA
    assert not classifier.classify("KCR launches new metro project in Hyderabad").is_match


def test_taxonomy_is_immutable():
    taxonomy = KeywordTaxonomy()
    with pytest.raises(Exception):
        taxonomy.actors = ("someone",)


def test_load_taxonomy(tmp_path):
    path = tmp_path / "taxonomy.yaml"
    with open(path, "w") as f:
        yaml.safe_dump({"actors": ["New Star"]}, f)

    taxonomy = load_taxonomy(path)
    assert taxonomy.actors == ("new star",)
    assert taxonomy.politicians == KeywordTaxonomy().politicians

    with pytest.raises(FileNotFoundError):
        load_taxonomy(tmp_path / "missing.yaml")

    path.write_text("actors: [unclosed")
    with pytest.raises(ValueError):
        load_taxonomy(path)


def test_matcher_has():
    matcher = TaxonomyMatcher(KeywordTaxonomy())
    assert matcher.has("hub_cities", "rain in hyderabad")
    assert not matcher.has("hub_cities", "rain in hyderabadi biryani")


def test_india_relevance(make_item):
    india = IndiaRelevanceFilter()
    domestic = make_item("Sensex closes higher on bank rally", link="https://www.livemint.com/markets/1")
    foreign = make_item("Trump rally draws crowds in Ohio", link="https://foreign.example/1")
    community = make_item("Weekend plans thread for the city", source="r/mumbai", platform=Platform.REDDIT)

    assert india.is_indian(domestic)
    assert not india.is_indian(foreign)
    assert india.is_indian(community)
