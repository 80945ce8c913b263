"""Constants for typo-tolerant matching.

This module defines the fixed policy values used by the variation generator
and the query matcher. They are not read from the configuration record.
"""

import string


class VariationLimits:
    """Limits for typo variation generation."""

    # Words shorter than this produce no variations (too many false positives)
    MIN_WORD_LENGTH = 3

    # Deletions are only generated for words longer than this
    MIN_DELETION_WORD_LENGTH = 3

    # Number of leading positions considered per edit class
    SUBSTITUTION_POSITIONS = 5
    DELETION_POSITIONS = 3
    INSERTION_POSITIONS = 3

    # Alphabet used for substitutions, and its prefix used for insertions
    ALPHABET = string.ascii_lowercase
    INSERTION_ALPHABET = string.ascii_lowercase[:5]

    # Default cap on the number of variations returned
    MAX_VARIATIONS = 10


class QueryScoring:
    """Weights for multi-token query matching."""

    # Share of query tokens that must match for fuzzy containment
    MIN_TOKEN_COVERAGE = 0.7

    # Per-token best score counted as a confident match
    STRONG_MATCH_SCORE = 0.8

    # Final score = average * (BASE_WEIGHT + match_ratio * COVERAGE_WEIGHT)
    BASE_WEIGHT = 0.7
    COVERAGE_WEIGHT = 0.3


class MatchingDefaults:
    """Default values for matching parameters."""

    # Default minimum similarity ratio (0.0-1.0) for is_similar and fuzzy_contains
    SIMILARITY_THRESHOLD = 0.8
