"""Optimal parenthesisation of a chain of matrix products."""

from __future__ import annotations

from collections.abc import Sequence

Splits = dict[tuple[int, int], int]


def _check(dims: Sequence[int]) -> int:
    if len(dims) < 2:
        raise ValueError("a matrix chain needs at least two dimensions")
    return len(dims) - 1


def optimal_order_recursive(dims: Sequence[int]) -> tuple[int, Splits]:
    """Return the minimal multiplication cost and split points, by recursion.

    ``dims`` holds n+1 sizes for n matrices; matrix ``i`` (1-based) is
    ``dims[i-1] x dims[i]``. The split table maps ``(i, j)`` to the ``k``
    after which the product ``A_i..A_j`` is divided.
    """
    n = _check(dims)
    splits: Splits = {}

    def cost(i: int, j: int) -> int:
        if i >= j:
            return 0
        best: int | None = None
        for k in range(i, j):
            candidate = cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            if best is None or candidate < best:
                best = candidate
                splits[i, j] = k
        return best

    return cost(1, n), splits


def optimal_order(dims: Sequence[int]) -> tuple[int, Splits]:
    """Return the minimal multiplication cost and split points, by dynamic programming."""
    n = _check(dims)
    best: dict[tuple[int, int], int] = {(i, i): 0 for i in range(1, n + 1)}
    splits: Splits = {}
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            for k in range(i, j):
                q = best[i, k] + best[k + 1, j] + dims[i - 1] * dims[k] * dims[j]
                if (i, j) not in best or q < best[i, j]:
                    best[i, j] = q
                    splits[i, j] = k
    return best[1, n], splits