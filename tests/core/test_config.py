"""Tests for configuration management."""

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from typo_match.core.config import FUZZY_MATCH_CONFIG, Config, FuzzyMatchConfig, load_config


class TestFuzzyMatchConfig:
    """Test the fuzzy matching configuration record."""

    def test_defaults(self):
        """Test default thresholds."""
        assert FUZZY_MATCH_CONFIG.similarity_threshold == 0.75
        assert FUZZY_MATCH_CONFIG.max_edit_distance_short == 1
        assert FUZZY_MATCH_CONFIG.max_edit_distance_medium == 2
        assert FUZZY_MATCH_CONFIG.max_edit_distance_long == 2
        assert FUZZY_MATCH_CONFIG.min_word_length == 3

    def test_frozen(self):
        """Test the record cannot be mutated."""
        with pytest.raises(ValidationError):
            FUZZY_MATCH_CONFIG.similarity_threshold = 0.5

    def test_invalid_threshold(self):
        """Test threshold outside [0, 1] is rejected."""
        with pytest.raises(ValidationError):
            FuzzyMatchConfig(similarity_threshold=1.5)

    def test_negative_distance(self):
        """Test negative edit distance is rejected."""
        with pytest.raises(ValidationError):
            FuzzyMatchConfig(max_edit_distance_short=-1)

    @pytest.mark.parametrize(
        "word,expected",
        [("ab", 0), ("cat", 1), ("word", 1), ("hello", 2), ("example", 2), ("keyboards", 2)],
    )
    def test_max_edit_distance_for(self, word, expected):
        """Test length buckets."""
        assert FUZZY_MATCH_CONFIG.max_edit_distance_for(word) == expected

    def test_custom_long_bucket(self):
        """Test custom budget for long words."""
        config = FuzzyMatchConfig(max_edit_distance_long=3)
        assert config.max_edit_distance_for("keyboards") == 3
        assert config.max_edit_distance_for("hello") == 2

    def test_within_edit_budget(self):
        """Test edit budget check."""
        assert FUZZY_MATCH_CONFIG.within_edit_budget("cat", "car")
        assert FUZZY_MATCH_CONFIG.within_edit_budget("Hello", "hallo")
        assert FUZZY_MATCH_CONFIG.within_edit_budget("keyboard", "kyeboard")
        assert not FUZZY_MATCH_CONFIG.within_edit_budget("cat", "dog")
        # Below min_word_length only exact matches are accepted
        assert not FUZZY_MATCH_CONFIG.within_edit_budget("ab", "ac")
        assert FUZZY_MATCH_CONFIG.within_edit_budget("AB", "ab")


class TestConfig:
    """Test loading and saving configuration."""

    def test_default(self):
        """Test default config wraps the default record."""
        assert Config.get_default().fuzzy == FUZZY_MATCH_CONFIG

    def test_save_and_load(self, tmp_path):
        """Test saved config can be loaded back."""
        config_path = tmp_path / "nested" / "config.json"
        config = Config(fuzzy=FuzzyMatchConfig(similarity_threshold=0.9))

        config.save_to_file(config_path)
        loaded = Config.load_from_file(config_path)

        assert loaded.fuzzy.similarity_threshold == 0.9
        assert loaded.fuzzy.min_word_length == 3

    def test_partial_file(self, tmp_path):
        """Test missing fields fall back to defaults."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"fuzzy": {"min_word_length": 4}}))

        config = load_config(config_path)

        assert config.fuzzy.min_word_length == 4
        assert config.fuzzy.similarity_threshold == 0.75

    def test_invalid_file(self, tmp_path):
        """Test invalid values raise ValidationError."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"fuzzy": {"similarity_threshold": 2}}))

        with pytest.raises(ValidationError):
            load_config(config_path)

    def test_missing_file(self, tmp_path):
        """Test explicit missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_default_locations(self, tmp_path, monkeypatch):
        """Test ./typo-match.json is picked up when no path is given."""
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        monkeypatch.chdir(tmp_path)

        assert load_config().fuzzy == FUZZY_MATCH_CONFIG

        (tmp_path / "typo-match.json").write_text(
            json.dumps({"fuzzy": {"similarity_threshold": 0.6}})
        )
        assert load_config().fuzzy.similarity_threshold == 0.6
