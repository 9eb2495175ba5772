"""Tests for CLI commands that do not touch the network."""

import yaml
from typer.testing import CliRunner

from saycheese.cli import app

runner = CliRunner()


def test_classify_match():
    result = runner.invoke(app, ["classify", "KCR launches new metro project in Hyderabad"])

    assert result.exit_code == 0
    assert "Politics" in result.stdout
    assert "politician_with_place" in result.stdout


def test_classify_no_match():
    result = runner.invoke(app, ["classify", "New iPhone released with better camera"])

    assert result.exit_code == 0
    assert "low" in result.stdout


def test_classify_with_missing_taxonomy(tmp_path):
    result = runner.invoke(app, ["classify", "Anything", "--taxonomy", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1


def test_init_writes_config_and_sources(tmp_path):
    result = runner.invoke(app, ["init", "--config-dir", str(tmp_path)])

    assert result.exit_code == 0
    with open(tmp_path / "config.yaml") as f:
        assert yaml.safe_load(f)["filters"]["recency_days"] == 7
    with open(tmp_path / "sources.yaml") as f:
        assert yaml.safe_load(f)["telugu_feeds"]

    again = runner.invoke(app, ["init", "--config-dir", str(tmp_path)])
    assert again.exit_code == 1

    forced = runner.invoke(app, ["init", "--config-dir", str(tmp_path), "--force", "--no-seed-sources"])
    assert forced.exit_code == 0
    with open(tmp_path / "sources.yaml") as f:
        assert yaml.safe_load(f)["telugu_feeds"] == []


def test_sources_list(tmp_path):
    runner.invoke(app, ["init", "--config-dir", str(tmp_path)])

    result = runner.invoke(app, ["sources", "list", "--config", str(tmp_path / "config.yaml")])

    assert result.exit_code == 0
    assert "Configured Sources" in result.stdout
