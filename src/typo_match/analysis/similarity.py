"""Similarity scoring functions for typo-tolerant matching.

This module normalizes edit distance into a ratio between 0 and 1 and
provides a threshold-based similarity test. Comparison is case-insensitive.
"""

from typo_match.analysis.edit_distance import (
    levenshtein_distance,
    optimal_string_alignment_distance,
)
from typo_match.analysis.matching_constants import MatchingDefaults


def similarity_ratio(str_1: str, str_2: str, transpositions: bool = True) -> float:
    """Calculate similarity ratio between two strings.

    1.0 means identical (ignoring case), 0.0 means completely different.

    Args:
        str_1: First string.
        str_2: Second string.
        transpositions: If True (default), a swap of two adjacent characters
            counts as a single edit. If False, plain Levenshtein distance is used.

    Returns:
        Similarity ratio (0.0-1.0).
    """
    str_1 = str_1.lower()
    str_2 = str_2.lower()

    max_length = max(len(str_1), len(str_2))
    if max_length == 0:
        return 1.0

    if transpositions:
        distance = optimal_string_alignment_distance(str_1, str_2)
    else:
        distance = levenshtein_distance(str_1, str_2)

    return 1 - (distance / max_length)


def is_similar(
    str_1: str,
    str_2: str,
    threshold: float = MatchingDefaults.SIMILARITY_THRESHOLD,
) -> bool:
    """Check if two strings are similar within a threshold.

    Args:
        str_1: First string.
        str_2: Second string.
        threshold: Minimum similarity ratio (default: 0.8).

    Returns:
        True if similarity_ratio(str_1, str_2) >= threshold.
    """
    return similarity_ratio(str_1, str_2) >= threshold
