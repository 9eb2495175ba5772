"""Tests for configuration loading."""

import pytest
import yaml

from saycheese.config import (
    Config,
    ConfigModel,
    SourcesModel,
    create_default_sources,
    load_sources,
    save_config,
    save_sources,
)
from saycheese.errors import ConfigurationError
from saycheese.ingestion import (
    GuardianAdapter,
    NewsAPIAdapter,
    RedditAdapter,
    RSSAdapter,
    build_general_adapters,
    build_telugu_adapters,
    describe_sources,
)


def test_defaults_without_a_config_file(tmp_path, monkeypatch):
    monkeypatch.setattr("saycheese.config.loader.DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
    config = Config(environ={})

    assert config.config.filters.recency_days == 7
    assert config.config.ranking.max_per_source == 2
    assert config.sources.telugu_feeds


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigurationError):
        Config(tmp_path / "nope.yaml", environ={}).config


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.safe_dump({"filters": {"recency_days": 0}}, f)

    with pytest.raises(ConfigurationError):
        Config(path, environ={}).config


def test_environment_overrides(config_dir):
    config = Config(
        config_dir / "config.yaml",
        environ={
            "SAYCHEESE_RECENCY_DAYS": "3",
            "SAYCHEESE_VALIDATE_URLS": "false",
            "SAYCHEESE_LOG_LEVEL": "debug",
        },
    )

    assert config.config.filters.recency_days == 3
    assert config.config.http.validate_urls is False
    assert config.config.log_level == "DEBUG"
    # file values survive
    assert config.config.http.adapter_timeout_seconds == 0.5


def test_bad_environment_override(config_dir):
    config = Config(config_dir / "config.yaml", environ={"SAYCHEESE_MAX_PER_SOURCE": "many"})
    with pytest.raises(ConfigurationError):
        config.config


def test_api_keys(config_dir):
    config = Config(config_dir / "config.yaml", environ={"NEWS_API_KEY": " abc ", "GUARDIAN_API_KEY": ""})

    assert config.get_api_key("news_api") == "abc"
    assert config.get_api_key("guardian") is None
    assert config.get_api_key("unknown") is None


def test_save_and_load_round_trip(tmp_path):
    save_config(ConfigModel(), tmp_path / "config.yaml")
    save_sources(create_default_sources(), tmp_path / "sources.yaml")

    config = Config(tmp_path / "config.yaml", environ={})

    assert config.config == ConfigModel()
    assert config.sources == create_default_sources()


def test_invalid_sources_are_skipped(tmp_path):
    path = tmp_path / "sources.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(
            {
                "telugu_feeds": [{"name": "Good", "url": "https://good.example/rss"}, {"name": "No URL"}],
                "telugu_subreddits": [{"name": "tollywood", "priority": "urgent"}, {"name": "telangana"}],
            },
            f,
        )

    sources = load_sources(path)

    assert [feed.name for feed in sources.telugu_feeds] == ["Good"]
    assert [sub.name for sub in sources.telugu_subreddits] == ["telangana"]
    assert sources.general_feeds == []


def test_adapter_registry(config_dir):
    save_sources(create_default_sources(), config_dir / "sources.yaml")
    keyless = Config(config_dir / "config.yaml", environ={})
    keyed = Config(config_dir / "config.yaml", environ={"NEWS_API_KEY": "k", "GUARDIAN_API_KEY": "g"})

    telugu = build_telugu_adapters(keyless, client=None)
    assert telugu
    assert all(isinstance(adapter, (RSSAdapter, RedditAdapter)) for adapter in telugu)
    assert all(adapter.timeout == 0.5 for adapter in telugu)

    general_names = {type(adapter) for adapter in build_general_adapters(keyless, client=None)}
    assert NewsAPIAdapter not in general_names
    keyed_names = {type(adapter) for adapter in build_general_adapters(keyed, client=None)}
    assert {NewsAPIAdapter, GuardianAdapter} <= keyed_names


def test_disabled_sources_are_not_built(config_dir):
    sources = SourcesModel(
        telugu_feeds=[{"name": "Off", "url": "https://off.example/rss", "enabled": False}],
        telugu_subreddits=[{"name": "tollywood"}],
    )
    save_sources(sources, config_dir / "sources.yaml")
    config = Config(config_dir / "config.yaml", environ={})

    adapters = build_telugu_adapters(config, client=None)

    assert [adapter.name for adapter in adapters] == ["r/tollywood"]
    described = describe_sources(config)
    assert described["telugu"]["feeds"] == []
    assert described["telugu"]["subreddits"] == ["r/tollywood"]
    assert [api["configured"] for api in described["requiresApiKey"]] == [False, False]


def test_api_key_variable_names_are_configurable(tmp_path):
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.safe_dump({"api_keys": {"news_api_key_env": "MY_NEWS_KEY"}}, f)
    config = Config(path, environ={"MY_NEWS_KEY": "abc", "NEWS_API_KEY": "ignored"})

    assert config.get_api_key("news_api") == "abc"
    assert {type(adapter) for adapter in build_general_adapters(config, client=None)} >= {NewsAPIAdapter}
    described = {api["name"]: api for api in describe_sources(config)["requiresApiKey"]}
    assert described["NewsAPI"] == {
        "name": "NewsAPI",
        "env": "MY_NEWS_KEY",
        "url": "https://newsapi.org/",
        "configured": True,
    }
    assert described["The Guardian"]["env"] == "GUARDIAN_API_KEY"
