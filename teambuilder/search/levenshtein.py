"""Edit distance between two strings."""

from typing import List


def get_levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Substitution, insertion and deletion each cost 1. The full
    (len(a) + 1) x (len(b) + 1) table is evaluated one row at a time.

    Args:
        a: Source string
        b: Target string

    Returns:
        Minimum number of single-character edits turning a into b

    Examples:
        >>> get_levenshtein_distance("pikachu", "pikachou")
        1
        >>> get_levenshtein_distance("", "abc")
        3
    """
    if a == b:
        return 0

    # Row i holds the distances from a[:i] to every prefix of b.
    previous: List[int] = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current
    return previous[len(b)]
