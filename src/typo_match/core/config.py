"""Configuration management for typo-match."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class FuzzyMatchConfig(BaseModel):
    """Shared defaults for length-bucketed fuzzy matching policies.

    The record is frozen. Only best_fuzzy_match reads it (for its default
    threshold); it is exposed for host systems layering their own policy on top.
    """

    model_config = ConfigDict(frozen=True)

    similarity_threshold: float = Field(
        default=0.75, ge=0.0, le=1.0, description="Minimum similarity ratio to consider a match"
    )
    max_edit_distance_short: int = Field(
        default=1, ge=0, description="Maximum edit distance for short words (3-4 chars)"
    )
    max_edit_distance_medium: int = Field(
        default=2, ge=0, description="Maximum edit distance for medium words (5-7 chars)"
    )
    max_edit_distance_long: int = Field(
        default=2, ge=0, description="Maximum edit distance for long words (8+ chars)"
    )
    min_word_length: int = Field(
        default=3, ge=0, description="Minimum word length to apply fuzzy matching"
    )

    def max_edit_distance_for(self, word: str) -> int:
        """Get the allowed number of edits for a word based on its length.

        Args:
            word: Word to look up.

        Returns:
            0 below min_word_length, otherwise the short/medium/long budget.
        """
        length = len(word)
        if length < self.min_word_length:
            return 0
        if length <= 4:
            return self.max_edit_distance_short
        if length <= 7:
            return self.max_edit_distance_medium
        return self.max_edit_distance_long

    def within_edit_budget(self, word_1: str, word_2: str) -> bool:
        """Check if two words are within the edit budget of the longer one.

        Comparison is case-insensitive.
        """
        # Lazy import: the analysis package reads FUZZY_MATCH_CONFIG at import time
        from typo_match.analysis.edit_distance import levenshtein_distance_bounded

        longer = word_1 if len(word_1) >= len(word_2) else word_2
        budget = self.max_edit_distance_for(longer)
        distance = levenshtein_distance_bounded(word_1.lower(), word_2.lower(), budget)
        return distance is not None


FUZZY_MATCH_CONFIG = FuzzyMatchConfig()


class Config(BaseModel):
    """Main configuration for typo-match."""

    fuzzy: FuzzyMatchConfig = Field(default_factory=FuzzyMatchConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, searches the default
            locations and falls back to the default config.

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config_path is given and does not exist.
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "typo-match" / "config.json",
            Path.cwd() / "typo-match.json",
        ]

        for location in default_locations:
            if location.exists():
                logger.debug("Loading config from %s", location)
                return Config.load_from_file(location)

        logger.debug("No config file found, using defaults")
        return Config.get_default()

    return Config.load_from_file(config_path)
