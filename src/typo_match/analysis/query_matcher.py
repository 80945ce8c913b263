"""Fuzzy query matching against free text.

This module decides whether a text contains a (possibly misspelled) query and
scores how well the text matches it. Both work on whitespace-separated tokens
and compose the similarity ratio across word boundaries:
- Exact case-insensitive substring containment always wins
- Single-token queries match against the best text token
- Multi-token queries use token-set coverage (word order is ignored)
"""

import logging
import math

import numpy as np

from typo_match.analysis.matching_constants import MatchingDefaults, QueryScoring
from typo_match.analysis.similarity import similarity_ratio
from typo_match.core.config import FUZZY_MATCH_CONFIG

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased whitespace-separated tokens.

    Args:
        text: Text to split.

    Returns:
        List of non-empty tokens.
    """
    return text.lower().split()


def token_score_matrix(text_tokens: list[str], query_tokens: list[str]) -> np.ndarray:
    """Calculate similarity ratios between every query token and text token.

    Args:
        text_tokens: Tokens of the text (columns).
        query_tokens: Tokens of the query (rows).

    Returns:
        Array of shape (len(query_tokens), len(text_tokens)).
    """
    scores = np.zeros((len(query_tokens), len(text_tokens)), dtype=np.float64)

    for i, query_token in enumerate(query_tokens):
        for j, text_token in enumerate(text_tokens):
            scores[i, j] = similarity_ratio(text_token, query_token)

    return scores


def _best_token_scores(text_tokens: list[str], query_tokens: list[str]) -> np.ndarray:
    """Best similarity per query token, 0.0 when the text has no tokens."""
    if not text_tokens:
        return np.zeros(len(query_tokens), dtype=np.float64)
    return token_score_matrix(text_tokens, query_tokens).max(axis=1)


def fuzzy_contains(
    text: str,
    query: str,
    threshold: float = MatchingDefaults.SIMILARITY_THRESHOLD,
) -> bool:
    """Check if a text contains a fuzzy match for a query.

    Args:
        text: Text to search in.
        query: Query to search for.
        threshold: Similarity threshold per token (default: 0.8).

    Returns:
        True if the query is a substring of the text, or enough query tokens
        have a similar token in the text (all of them for a single-token
        query, ceil(70%) for multi-token queries).
    """
    text_lower = text.lower()
    query_lower = query.lower()

    if query_lower in text_lower:
        logger.debug("Exact substring match for query %r", query)
        return True

    text_tokens = tokenize(text_lower)
    query_tokens = tokenize(query_lower)

    if not query_tokens or not text_tokens:
        return False

    matched = _best_token_scores(text_tokens, query_tokens) >= threshold

    if len(query_tokens) == 1:
        return bool(matched[0])

    required = math.ceil(len(query_tokens) * QueryScoring.MIN_TOKEN_COVERAGE)
    return int(matched.sum()) >= required


def fuzzy_match_score(text: str, query: str) -> float:
    """Score how well a text matches a query.

    Multi-token queries average the best score of each query token and
    then apply a coverage weight:
    score = average * (0.7 + match_ratio * 0.3)
    where match_ratio is the share of query tokens scoring >= 0.8.

    Args:
        text: Text to score.
        query: Query to match against.

    Returns:
        Match score (0.0-1.0, where 1.0 is the best match).
    """
    text_lower = text.lower()
    query_lower = query.lower()

    # Exact substring match gets highest score
    if query_lower in text_lower:
        return 1.0

    text_tokens = tokenize(text_lower)
    query_tokens = tokenize(query_lower)

    if not query_tokens:
        return 0.0

    token_scores = _best_token_scores(text_tokens, query_tokens)

    if len(query_tokens) == 1:
        return float(token_scores[0])

    average = float(token_scores.mean())
    match_ratio = float((token_scores >= QueryScoring.STRONG_MATCH_SCORE).mean())

    return average * (QueryScoring.BASE_WEIGHT + match_ratio * QueryScoring.COVERAGE_WEIGHT)


def best_fuzzy_match(
    query: str, candidates: list[str], threshold: float | None = None
) -> tuple[str, float] | None:
    """Find the candidate text that best matches a query.

    Args:
        query: The query to match.
        candidates: Candidate texts, scored independently.
        threshold: Minimum match score (default: configured similarity_threshold).

    Returns:
        Tuple of (candidate, score) or None if no candidate reaches the threshold.
        The first candidate wins ties.
    """
    if threshold is None:
        threshold = FUZZY_MATCH_CONFIG.similarity_threshold

    if not query or not candidates:
        return None

    best_match = None
    best_score = 0.0

    for candidate in candidates:
        score = fuzzy_match_score(candidate, query)
        if score >= threshold and (best_match is None or score > best_score):
            best_match = candidate
            best_score = score

    return (best_match, best_score) if best_match is not None else None
