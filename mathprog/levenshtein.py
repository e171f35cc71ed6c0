"""Edit distance between two sequences."""

from __future__ import annotations

from collections.abc import Sequence


def levenshtein(x: Sequence, y: Sequence) -> int:
    """Return the Levenshtein distance between ``x`` and ``y``.

    Uses the dynamic-programming table, keeping only one row at a time.
    """
    previous = list(range(len(y) + 1))
    for i, cx in enumerate(x, start=1):
        current = [i]
        for j, cy in enumerate(y, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (0 if cx == cy else 1),
                )
            )
        previous = current
    return previous[-1]


def levenshtein_recursive(x: Sequence, y: Sequence) -> int:
    """Return the Levenshtein distance computed by plain recursion.

    The running time grows exponentially with the input lengths.
    """

    def distance(lx: int, ly: int) -> int:
        if lx == 0:
            return ly
        if ly == 0:
            return lx
        if lx == 1 and ly == 1:
            return 0 if x[0] == y[0] else 1
        return min(
            distance(lx - 1, ly) + 1,
            distance(lx, ly - 1) + 1,
            distance(lx - 1, ly - 1) + (0 if x[lx - 1] == y[ly - 1] else 1),
        )

    return distance(len(x), len(y))