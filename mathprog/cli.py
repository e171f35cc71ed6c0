"""Command-line demonstrations of the combinatorial and graph routines."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence

from mathprog.combi import permutation_count, permutations, subset_count, subsets
from mathprog.fibonacci import time_fib
from mathprog.graph import AdjacencyMatrix, BreadthFirstSearch
from mathprog.strings import format_block, random_string

SAMPLE_GRAPH = AdjacencyMatrix(
    7,
    [
        0, 0, 1, 1, 0, 0, 0,
        0, 0, 0, 1, 0, 0, 0,
        0, 0, 0, 1, 0, 1, 0,
        0, 0, 0, 0, 0, 0, 0,
        0, 1, 0, 0, 0, 0, 0,
        0, 0, 0, 1, 0, 0, 1,
        0, 0, 0, 1, 1, 0, 0,
    ],
)


def format_set(items: Iterable[object]) -> str:
    """Render items as ``{ a, b, c }``; an empty collection becomes ``{ }``."""
    parts = [str(item) for item in items]
    return "{ " + (", ".join(parts) + " " if parts else "") + "}"


def depth_first(matrix: AdjacencyMatrix) -> list[int]:
    """Return the depth-first visiting order of all vertices of ``matrix``.

    Every unvisited vertex, in increasing order, starts a new search;
    successors are explored in increasing order.
    """
    visited = [False] * matrix.n
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        order.append(vertex)
        for target in range(matrix.n):
            if matrix[vertex, target] and not visited[target]:
                visit(target)

    for vertex in range(matrix.n):
        if not visited[vertex]:
            visit(vertex)
    return order


def _run_permutations(items: str) -> None:
    print(" --- Permutation generator ---")
    print(f"Set: {format_set(items)}")
    print("Permutations")
    for number, perm in enumerate(permutations(len(items))):
        print(f"{number:>4}: {format_set(items[i] for i in perm)}")
    print(f"total: {permutation_count(len(items))}")


def _run_subsets(items: str) -> None:
    print(" - Generator of all subsets -")
    print(f"Set: {format_set(items)}")
    print("Subsets")
    for subset in subsets(len(items)):
        print(format_set(items[i] for i in subset))
    print(f"total: {subset_count(len(items))}")


def _run_graph() -> None:
    matrix = SAMPLE_GRAPH
    print("Adjacency matrix:")
    for i in range(matrix.n):
        print(" ".join(str(matrix[i, j]) for j in range(matrix.n)))
    print("BFS: " + " ".join(str(v) for v in BreadthFirstSearch(matrix, 0)))
    print("DFS: " + " ".join(str(v) for v in depth_first(matrix)))


def _run_strings(seed: int | None, first: int, second: int) -> None:
    rng = random.Random(seed)
    for label, size in (("S1", first), ("S2", second)):
        print(f"{label}:")
        print(format_block(random_string(size, rng)))
        print()


def _run_fibonacci(start: int, stop: int) -> None:
    for n, seconds in time_fib(start, stop):
        print(f"fib({n}): {seconds:.6f} s")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mathprog")
    commands = parser.add_subparsers(dest="command", required=True)

    perm = commands.add_parser("permutations", help="list permutations of a set")
    perm.add_argument("--items", default="ABCD", help="one letter per element")

    sub = commands.add_parser("subsets", help="list all subsets of a set")
    sub.add_argument("--items", default="ABCD", help="one letter per element")

    commands.add_parser("graph", help="traverse the sample graph")

    strs = commands.add_parser("strings", help="print two random strings")
    strs.add_argument("--seed", type=int, default=None)
    strs.add_argument("--first", type=int, default=300)
    strs.add_argument("--second", type=int, default=250)

    fibo = commands.add_parser("fibonacci", help="time recursive Fibonacci")
    fibo.add_argument("--start", type=int, default=22)
    fibo.add_argument("--stop", type=int, default=43)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration chosen by the first argument."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    if args.command == "permutations":
        _run_permutations(args.items)
    elif args.command == "subsets":
        _run_subsets(args.items)
    elif args.command == "graph":
        _run_graph()
    elif args.command == "strings":
        _run_strings(args.seed, args.first, args.second)
    else:
        _run_fibonacci(args.start, args.stop)
    return 0


if __name__ == "__main__":
    sys.exit(main())