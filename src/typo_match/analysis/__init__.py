"""Analysis modules for typo-tolerant text matching.

This package provides core matching functionality including:
- Edit distance calculation (Levenshtein and transposition-aware)
- Similarity ratio and threshold checks
- Typo variation generation
- Fuzzy containment and match scoring for free-text queries
"""

from typo_match.analysis.edit_distance import (
    levenshtein_distance,
    levenshtein_distance_bounded,
    levenshtein_distance_two_row,
    optimal_string_alignment_distance,
)
from typo_match.analysis.query_matcher import (
    best_fuzzy_match,
    fuzzy_contains,
    fuzzy_match_score,
    tokenize,
)
from typo_match.analysis.similarity import is_similar, similarity_ratio
from typo_match.analysis.variations import generate_typo_variations

__all__ = [
    "levenshtein_distance",
    "levenshtein_distance_two_row",
    "levenshtein_distance_bounded",
    "optimal_string_alignment_distance",
    "similarity_ratio",
    "is_similar",
    "generate_typo_variations",
    "tokenize",
    "fuzzy_contains",
    "fuzzy_match_score",
    "best_fuzzy_match",
]
