"""Graph representations and breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from enum import Enum


class AdjacencyMatrix:
    """A square ``n x n`` adjacency matrix indexed by ``(row, column)``."""

    def __init__(self, n: int, values: Sequence[int] | None = None) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self.n = n
        if values is None:
            self._cells = [0] * (n * n)
        else:
            if len(values) != n * n:
                raise ValueError(f"expected {n * n} values, got {len(values)}")
            self._cells = list(values)

    def __len__(self) -> int:
        return self.n

    def _offset(self, key: tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"cell {key} outside a {self.n}x{self.n} matrix")
        return i * self.n + j

    def __getitem__(self, key: tuple[int, int]) -> int:
        return self._cells[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        self._cells[self._offset(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self.n == other.n and self._cells == other._cells

    def __repr__(self) -> str:
        return f"AdjacencyMatrix({self.n}, {self._cells!r})"

    @classmethod
    def from_list(cls, adjacency: AdjacencyList) -> AdjacencyMatrix:
        """Build a 0/1 matrix with a one for every edge of ``adjacency``."""
        matrix = cls(len(adjacency))
        for i in range(len(adjacency)):
            for j in adjacency.neighbours(i):
                matrix[i, j] = 1
        return matrix


class AdjacencyList:
    """Per-vertex lists of successors, kept in insertion order."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._edges: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._edges)

    def add(self, i: int, j: int) -> None:
        """Add an edge from ``i`` to ``j``."""
        if not 0 <= j < len(self._edges):
            raise IndexError(f"vertex {j} out of range")
        self._edges[i].append(j)

    def neighbours(self, i: int) -> list[int]:
        """Return the successors of vertex ``i``."""
        return list(self._edges[i])

    @classmethod
    def from_matrix(cls, matrix: AdjacencyMatrix) -> AdjacencyList:
        """Build a list with an edge for every non-zero matrix cell."""
        adjacency = cls(matrix.n)
        for i in range(matrix.n):
            for j in range(matrix.n):
                if matrix[i, j] != 0:
                    adjacency.add(i, j)
        return adjacency


class Color(Enum):
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


class BreadthFirstSearch:
    """Step-by-step breadth-first traversal from a start vertex.

    ``distance`` and ``parent`` hold, per vertex, the edge count from the
    start and the predecessor on a shortest path; ``None`` where unknown.
    """

    def __init__(self, graph: AdjacencyList | AdjacencyMatrix, start: int) -> None:
        if isinstance(graph, AdjacencyMatrix):
            graph = AdjacencyList.from_matrix(graph)
        n = len(graph)
        if not 0 <= start < n:
            raise IndexError(f"start vertex {start} out of range")
        self.graph = graph
        self.color = [Color.WHITE] * n
        self.distance: list[int | None] = [None] * n
        self.parent: list[int | None] = [None] * n
        self.color[start] = Color.GRAY
        self.distance[start] = 0
        self._queue: deque[int] = deque([start])

    def step(self) -> int | None:
        """Visit the next vertex and return it, or ``None`` when the search is over."""
        if not self._queue:
            return None
        current = self._queue.popleft()
        for v in self.graph.neighbours(current):
            if self.color[v] is Color.WHITE:
                self.color[v] = Color.GRAY
                self.distance[v] = self.distance[current] + 1
                self.parent[v] = current
                self._queue.append(v)
        self.color[current] = Color.BLACK
        return current

    def __iter__(self) -> Iterator[int]:
        while (vertex := self.step()) is not None:
            yield vertex