# classicalgos

A small collection of textbook algorithms with plain Python interfaces. It
has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `classicalgos.dynamic`

- `knapsack(capacity, weights, values)` returns the best total value for the
  0/1 knapsack problem. It raises `ValueError` if the lists differ in length,
  or if the capacity or any weight is negative.
- `min_coins(coins, amount)` returns the fewest coins that add up exactly to
  `amount`. It raises `ChangeImpossibleError` (a `ValueError`) when no
  combination does.
- `lcs_length(x, y)` returns the length of the longest common subsequence of
  two strings; `lcs(x, y)` returns one such subsequence.
- `matrix_chain_order(dims)` returns the minimum number of scalar
  multiplications needed to multiply a chain of matrices, where matrix `k`
  has shape `dims[k-1] x dims[k]`.

```python
from classicalgos.dynamic import knapsack, lcs_length, matrix_chain_order

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
lcs_length("ABCBDAB", "BDCABB")              # 4
matrix_chain_order([10, 20, 30, 40, 30])     # 30000
```

### `classicalgos.greedy`

- `select_activities(activities)` picks non-overlapping `Activity(start, finish)`
  intervals by earliest finish time and returns them in finish order.
- `fractional_knapsack(capacity, items)` returns the best value when an
  `Item(value, weight)` may be taken in part. Weights must be positive.
- `sequence_jobs(jobs)` schedules unit-time `Job(id, deadline, profit)`s by
  descending profit, each in the latest free slot before its deadline, and
  returns the scheduled ids in slot order.
- `greedy_change(coins, amount)` takes as many of each coin as fit, in the
  order the coins are given, and returns `(denomination, count)` pairs for the
  coins used. It raises `ChangeImpossibleError` when an amount is left over.

```python
from classicalgos.greedy import Job, sequence_jobs, greedy_change

sequence_jobs([Job("a", 2, 100), Job("b", 1, 19), Job("c", 2, 27),
               Job("d", 1, 25), Job("e", 3, 15)])   # ['c', 'a', 'e']
greedy_change([25, 10, 5, 1], 63)   # [(25, 2), (10, 1), (1, 3)]
```

### `classicalgos.matching`

- `naive_search(text, pattern)` and `kmp_search(text, pattern)` return the
  start index of every occurrence of `pattern` in `text`, overlapping ones
  included. `kmp_search` raises `ValueError` for an empty pattern.
- `prefix_function(pattern)` returns the longest-proper-prefix-suffix table
  that Knuth–Morris–Pratt uses.

### `classicalgos.graphs`

Here a graph is a square adjacency matrix, and a weight of `0` means there is
no edge. Unreachable distances are `math.inf`.

- `prim_mst(graph)` returns a minimum spanning tree rooted at vertex 0 as a
  list of `Edge(u, v, weight)`, one per vertex after 0, in vertex order. It
  raises `ValueError` if the graph is not connected.
- `floyd_warshall(graph)` returns the matrix of shortest distances between
  every pair of vertices.
- `bellman_ford(edges, vertex_count, source)` returns shortest distances from
  `source` over directed `Edge`s that may have negative weights. It raises
  `NegativeCycleError` when a negative cycle is reachable.
- `dijkstra(graph, source)` returns shortest distances from `source` for
  non-negative weights.
- `color_graph(graph, colors)` assigns each vertex a colour from `1` to
  `colors` so that no neighbours share one, by backtracking, and returns the
  list of colours, or `None` when no such colouring exists.

## Command line

The `classicalgos` command runs algorithms on built-in example data and
prints the results. With no arguments it runs every demonstration:

```
classicalgos
```

Or name one:

```
classicalgos knapsack [--capacity N]
classicalgos prim
classicalgos bellman-ford [--source V]
classicalgos kmp [TEXT] [PATTERN]
classicalgos jobs [--job ID:DEADLINE:PROFIT ...]
```

`--job` may be repeated to schedule your own jobs instead of the examples.

## Limits

The command covers only the five demonstrations above; the other algorithms
are available from Python alone. Apart from `kmp` text and pattern and `jobs`
entries, the command's inputs are fixed examples and cannot be read from files.