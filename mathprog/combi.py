"""Generators of permutations and subsets."""

from __future__ import annotations

import math
from collections.abc import Iterator


def permutations(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every permutation of ``0..n-1`` in Johnson-Trotter order.

    Consecutive permutations differ by one swap of neighbours.
    Nothing is yielded when ``n`` is not positive.
    """
    if n <= 0:
        return
    items = list(range(n))
    left = [True] * n
    yield tuple(items)
    while True:
        mobile, idx = -1, -1
        for i, (value, goes_left) in enumerate(zip(items, left)):
            neighbour = i - 1 if goes_left else i + 1
            if 0 <= neighbour < n and value > items[neighbour] and value > mobile:
                mobile, idx = value, i
        if idx < 0:
            return
        other = idx - 1 if left[idx] else idx + 1
        items[idx], items[other] = items[other], items[idx]
        left[idx], left[other] = left[other], left[idx]
        left = [not d if v > mobile else d for v, d in zip(items, left)]
        yield tuple(items)


def permutation_count(n: int) -> int:
    """Return the number of permutations of ``n`` elements."""
    return math.factorial(n)


def subsets(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of ``0..n-1`` in binary-counter order, starting with the empty one."""
    for mask in range(subset_count(n)):
        yield tuple(i for i in range(n) if mask >> i & 1)


def subset_count(n: int) -> int:
    """Return the number of subsets of an ``n``-element set."""
    if n < 0:
        raise ValueError("set size must not be negative")
    return 1 << n