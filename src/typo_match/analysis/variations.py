"""Typo variation generation.

Creates candidate misspellings of a word from common single-character errors,
used to expand search queries with typo-tolerant alternatives. Enumeration is
capped rather than exhaustive: only the leading positions of the word and a
reduced alphabet for insertions are considered.
"""

from typo_match.analysis.matching_constants import VariationLimits


def generate_typo_variations(
    word: str, max_variations: int = VariationLimits.MAX_VARIATIONS
) -> list[str]:
    """Generate typo variations for a word.

    Edit classes are applied in a fixed order, each one stopping as soon as
    the number of distinct variations reaches ``max_variations``:
    1. Substitutions at the first 5 positions (a-z)
    2. Deletions at the first 3 positions (words longer than 3 chars only)
    3. Insertions before the first 3 positions (a-e)
    4. Adjacent transpositions

    Args:
        word: Word to generate variations for.
        max_variations: Maximum number of variations to return (default: 10).

    Returns:
        Distinct variations in generation order. Empty for words shorter
        than 3 characters.
    """
    if len(word) < VariationLimits.MIN_WORD_LENGTH or max_variations <= 0:
        return []

    # dict keeps insertion order and drops duplicates
    variations: dict[str, None] = {}

    def add(variation: str) -> None:
        if variation != word:
            variations.setdefault(variation, None)

    def is_full() -> bool:
        return len(variations) >= max_variations

    # 1. Character substitutions (most common typo)
    for i in range(min(len(word), VariationLimits.SUBSTITUTION_POSITIONS)):
        if is_full():
            break
        for char in VariationLimits.ALPHABET:
            if is_full():
                break
            if char != word[i]:
                add(word[:i] + char + word[i + 1 :])

    # 2. Character deletions (common for fast typing)
    if len(word) > VariationLimits.MIN_DELETION_WORD_LENGTH:
        for i in range(min(len(word), VariationLimits.DELETION_POSITIONS)):
            if is_full():
                break
            add(word[:i] + word[i + 1 :])

    # 3. Character insertions
    for i in range(min(len(word), VariationLimits.INSERTION_POSITIONS)):
        if is_full():
            break
        for char in VariationLimits.INSERTION_ALPHABET:
            if is_full():
                break
            add(word[:i] + char + word[i:])

    # 4. Character transpositions (adjacent character swaps)
    for i in range(len(word) - 1):
        if is_full():
            break
        add(word[:i] + word[i + 1] + word[i] + word[i + 2 :])

    return list(variations)[:max_variations]
