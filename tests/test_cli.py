"""Tests for CLI commands."""

import json

from click.testing import CliRunner
import pytest

from typo_match.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Typo-Tolerant Text Matching Tool" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_compare_help(runner):
    """Test compare help command."""
    result = runner.invoke(main, ["compare", "--help"])
    assert result.exit_code == 0
    assert "Compare two strings" in result.output


def test_match_help(runner):
    """Test match help command."""
    result = runner.invoke(main, ["match", "--help"])
    assert result.exit_code == 0
    assert "Match queries against text" in result.output


def test_variations_via_main(runner):
    """Test variations subcommand through the root group."""
    result = runner.invoke(main, ["variations", "hello", "-n", "3"])
    assert result.exit_code == 0
    assert "Total variations: 3" in result.output


def test_config_option(runner, tmp_path):
    """Test --config drives the default similarity threshold."""
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"fuzzy": {"similarity_threshold": 0.5}}))

    result = runner.invoke(main, ["--config", str(config_path), "compare", "similar", "cat", "car"])
    assert result.exit_code == 0
    assert "threshold 0.50" in result.output

    result = runner.invoke(main, ["--config", str(config_path), "config", "show"])
    assert result.exit_code == 0
    assert "0.5" in result.output


def test_invalid_config(runner, tmp_path):
    """Test invalid configuration aborts."""
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"fuzzy": {"similarity_threshold": 2}}))

    result = runner.invoke(main, ["--config", str(config_path), "compare", "ratio", "a", "b"])
    assert result.exit_code != 0
    assert "Invalid configuration" in result.output


def test_missing_config(runner, tmp_path):
    """Test missing configuration file aborts."""
    result = runner.invoke(
        main, ["--config", str(tmp_path / "missing.json"), "compare", "ratio", "a", "b"]
    )
    assert result.exit_code != 0
    assert "Config file not found" in result.output
