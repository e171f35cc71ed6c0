"""Naive recursive Fibonacci numbers and their timing."""

from __future__ import annotations

import time


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain double recursion.

    Values of ``n`` below one give zero. The running time grows
    exponentially, which is what :func:`time_fib` measures.
    """
    if n < 1:
        return 0
    if n == 1:
        return 1
    return fib(n - 1) + fib(n - 2)


def time_fib(start: int, stop: int) -> list[tuple[int, float]]:
    """Return ``(n, seconds)`` for computing ``fib(n)`` with ``n`` in ``range(start, stop)``."""
    timings = []
    for n in range(start, stop):
        began = time.perf_counter()
        fib(n)
        timings.append((n, time.perf_counter() - began))
    return timings