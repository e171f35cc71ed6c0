"""Edit distance, matrix-chain ordering, permutation and subset generators, graph traversal and small helpers."""

__version__ = "0.1.0"