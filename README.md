# mathprog

A small collection of classic mathematical-programming algorithms, written
with the standard library only.

## Contents

- `mathprog.levenshtein`
  - `levenshtein(x, y)`: edit distance by dynamic programming, keeping one
    row of the table at a time.
  - `levenshtein_recursive(x, y)`: the same distance by plain recursion
    (exponential running time).
- `mathprog.matrixchain`
  - `optimal_order(dims)` and `optimal_order_recursive(dims)`: the minimal
    number of scalar multiplications for a chain of matrices, plus a dict
    mapping `(i, j)` (1-based) to the split point `k`. `dims` holds n+1
    sizes for n matrices; fewer than two sizes raises `ValueError`.
- `mathprog.combi`
  - `permutations(n)`: yields tuples of `0..n-1` in Johnson–Trotter order
    (adjacent swaps); yields nothing for `n <= 0`.
  - `permutation_count(n)`: `n!`.
  - `subsets(n)`: yields every subset of `0..n-1` as a tuple, in
    binary-counter order starting with the empty one.
  - `subset_count(n)`: `2**n`; a negative `n` raises `ValueError`.
- `mathprog.graph`
  - `AdjacencyMatrix(n, values=None)`: square matrix indexed as
    `matrix[i, j]`; `AdjacencyMatrix.from_list(adjacency)` builds a 0/1 matrix.
  - `AdjacencyList(n)`: successor lists with `add(i, j)` and
    `neighbours(i)`; `AdjacencyList.from_matrix(matrix)` adds an edge for
    every non-zero cell.
  - `BreadthFirstSearch(graph, start)`: accepts either representation;
    `step()` visits the next vertex (or returns `None` when done), and the
    object is iterable. `distance` and `parent` hold the search results.
- `mathprog.strings`
  - `random_string(size, rng=None)`: random lowercase Latin letters.
  - `format_block(text, width=50)`: splits text into lines of at most
    `width` characters.
- `mathprog.fibonacci`
  - `fib(n)`: Fibonacci numbers by double recursion (`fib(n) == 0` for
    `n < 1`).
  - `time_fib(start, stop)`: list of `(n, seconds)` timings.
- `mathprog.cli`
  - `format_set(items)`: renders items as `{ a, b, c }`.
  - `depth_first(matrix)`: depth-first visiting order over all vertices.
  - `main(argv=None)`: the command-line entry point.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from mathprog.levenshtein import levenshtein
from mathprog.combi import permutation_count, subset_count
from mathprog.fibonacci import fib

levenshtein("kitten", "sitting")   # 3
permutation_count(4)               # 24
subset_count(4)                    # 16
fib(10)                            # 55
```

Generators are plain Python iterables:

```python
from mathprog.combi import permutations, subsets

for order in permutations(3):
    print(order)

for chosen in subsets(3):
    print(chosen)
```

Graph traversal:

```python
from mathprog.graph import AdjacencyMatrix, BreadthFirstSearch
from mathprog.cli import depth_first

matrix = AdjacencyMatrix(3, [0, 1, 0,
                             0, 0, 1,
                             0, 0, 0])
print(list(BreadthFirstSearch(matrix, 0)))   # [0, 1, 2]
print(depth_first(matrix))                   # [0, 1, 2]
```

## Command line

Installing the package provides a `mathprog` command. It takes one
subcommand:

```
mathprog permutations --items ABCD
mathprog subsets --items ABCD
mathprog graph
mathprog strings --seed 1 --first 300 --second 250
mathprog fibonacci --start 22 --stop 43
```

- `permutations` and `subsets` list every permutation or subset of the
  letters given with `--items` (default `ABCD`) and print the total.
- `graph` prints a built-in seven-vertex adjacency matrix and its
  breadth-first (from vertex 0) and depth-first orders.
- `strings` prints two random lowercase strings in 50-character lines;
  `--seed` makes the output repeatable.
- `fibonacci` prints the time taken by `fib(n)` for each `n` in
  `[start, stop)`.

## What it does not do

The package offers no topological sort, no travelling-salesman solver, no
container-loading optimiser and no generators of combinations or
arrangements; only the algorithms listed above are provided.