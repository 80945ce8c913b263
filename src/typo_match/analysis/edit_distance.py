"""Edit distance calculation for typo-tolerant matching.

This module provides Levenshtein distance variants between two strings:
the classic full-table dynamic programming version, a two-row version with
reduced memory, a bounded version with early termination, and an optimal
string alignment version that counts adjacent transpositions as one edit.

All functions compare characters literally. Case folding is the caller's
concern.
"""


def levenshtein_distance(str_1: str, str_2: str) -> int:
    """Calculate the Levenshtein distance between two strings.

    The distance is the minimum number of single-character insertions,
    deletions and substitutions needed to turn ``str_1`` into ``str_2``.

    Args:
        str_1: First string.
        str_2: Second string.

    Returns:
        Edit distance (0 = identical, higher = more different).
    """
    len1, len2 = len(str_1), len(str_2)

    # (len1 + 1) x (len2 + 1) table
    matrix = [[0] * (len2 + 1) for _ in range(len1 + 1)]

    # Cost of building each prefix from nothing
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if str_1[i - 1] == str_2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,  # deletion
                matrix[i][j - 1] + 1,  # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )

    return matrix[len1][len2]


def levenshtein_distance_two_row(str_1: str, str_2: str) -> int:
    """Calculate the Levenshtein distance keeping only two rows of the table.

    Gives the same result as :func:`levenshtein_distance` using
    O(min(len(str_1), len(str_2))) memory.

    Args:
        str_1: First string.
        str_2: Second string.

    Returns:
        Edit distance.
    """
    # Index the row by the shorter string
    if len(str_1) < len(str_2):
        str_1, str_2 = str_2, str_1

    previous = list(range(len(str_2) + 1))

    for i, char_1 in enumerate(str_1, start=1):
        current = [i] + [0] * len(str_2)
        for j, char_2 in enumerate(str_2, start=1):
            cost = 0 if char_1 == char_2 else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current

    return previous[-1]


def levenshtein_distance_bounded(str_1: str, str_2: str, max_distance: int) -> int | None:
    """Calculate the Levenshtein distance with early termination.

    This is an optimized version for callers that only care whether two
    strings are within a given number of edits:
    1. Terminates immediately if the length difference exceeds the bound
    2. Terminates after any row whose minimum already exceeds the bound

    Args:
        str_1: First string.
        str_2: Second string.
        max_distance: Maximum accepted distance (inclusive).

    Returns:
        Edit distance if <= max_distance, None otherwise.

    Raises:
        ValueError: If max_distance is negative.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    # Every length difference costs at least one insertion or deletion
    if abs(len(str_1) - len(str_2)) > max_distance:
        return None

    if len(str_1) < len(str_2):
        str_1, str_2 = str_2, str_1

    previous = list(range(len(str_2) + 1))

    for i, char_1 in enumerate(str_1, start=1):
        current = [i] + [0] * len(str_2)
        for j, char_2 in enumerate(str_2, start=1):
            cost = 0 if char_1 == char_2 else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )

        # Row minimums never decrease, so the bound can no longer be met
        if min(current) > max_distance:
            return None

        previous = current

    distance = previous[-1]
    if distance > max_distance:
        return None

    return distance


def optimal_string_alignment_distance(str_1: str, str_2: str) -> int:
    """Calculate the optimal string alignment (restricted Damerau-Levenshtein) distance.

    Like :func:`levenshtein_distance`, with one extra operation: swapping two
    adjacent characters counts as a single edit. ``"recieve"`` and
    ``"receive"`` are one edit apart here and two under plain Levenshtein.

    Args:
        str_1: First string.
        str_2: Second string.

    Returns:
        Edit distance counting adjacent transpositions as one edit.
    """
    len1, len2 = len(str_1), len(str_2)

    matrix = [[0] * (len2 + 1) for _ in range(len1 + 1)]

    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if str_1[i - 1] == str_2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

            if (
                i > 1
                and j > 1
                and str_1[i - 1] == str_2[j - 2]
                and str_1[i - 2] == str_2[j - 1]
            ):
                matrix[i][j] = min(matrix[i][j], matrix[i - 2][j - 2] + 1)  # transposition

    return matrix[len1][len2]
