# algokit

A small library of classic algorithms in plain Python, with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions and classes |
| --- | --- |
| `algokit.strings` | `prefix_function`, `kmp_count`, `rabin_karp` |
| `algokit.sorting` | `heapify`, `heap_sort` |
| `algokit.numbers` | `count_even_heavy`, `count_even_heavy_between`, `coin_change_ways`, `simple_sieve`, `primes_in_range` |
| `algokit.range_queries` | `distinct_counts`, `SqrtMinimum` |
| `algokit.backtracking` | `n_queens`, `graph_colorings`, `is_colorable`, `hamiltonian_cycles` |
| `algokit.shortest_paths` | `has_negative_cycle`, `dijkstra`, `floyd_warshall`, `INF`, `NO_PATH` |
| `algokit.spanning_trees` | `DisjointSet`, `kruskal`, `prim`, `NotConnectedError` |
| `algokit.components` | `kosaraju_count`, `tarjan_components`, `topological_order`, `CycleError` |

## Examples

String matching:

```python
from algokit.strings import kmp_count, rabin_karp

kmp_count("ababab", "ab")       # 3 (overlapping matches are counted)
rabin_karp("ababab", "ab")      # 1-based start positions: [1, 3, 5]
rabin_karp("aaaaa", "bbb")      # []
```

Both raise `ValueError` for an empty pattern. `rabin_karp` hashes letters
relative to `"a"`, so it is meant for lower-case text.

Sorting:

```python
from algokit.sorting import heap_sort

heap_sort([3, 1, 2])            # [1, 2, 3]; the input is left unchanged
```

Numbers:

```python
from algokit.numbers import coin_change_ways, count_even_heavy_between, primes_in_range

coin_change_ways([1, 2, 3], 4)  # 4
primes_in_range(1, 10)          # [2, 3, 5, 7]
count_even_heavy_between(1, 100)  # integers whose even digits outweigh their odd digits
```

Range queries (indices are 0-based and ranges inclusive):

```python
from algokit.range_queries import SqrtMinimum, distinct_counts

rmq = SqrtMinimum([5, 2, 8, 1, 9])
rmq.query(0, 2)                                     # 2
rmq.query(4, 1)                                     # 1; bounds may be swapped
distinct_counts([1, 1, 2, 1, 3], [(0, 4), (1, 3)])  # [3, 2]
```

Graphs:

```python
from algokit.shortest_paths import dijkstra, floyd_warshall, has_negative_cycle
from algokit.spanning_trees import kruskal, prim
from algokit.components import kosaraju_count, tarjan_components, topological_order

dijkstra(3, [(1, 2, 4), (2, 3, 1)], 1)          # {1: 0, 2: 4, 3: 5}
has_negative_cycle(2, [(0, 1, 1), (1, 0, -2)])  # True
floyd_warshall([[0, 3], [None, 0]])             # [[0, 3], [None, 0]]
kruskal(3, [(1, 2, 1), (2, 3, 2), (1, 3, 5)])   # 3
prim(3, [(1, 2, 1), (2, 3, 2), (1, 3, 5)])      # 3
kosaraju_count(3, [(0, 1), (1, 0), (1, 2)])     # 2
tarjan_components(3, [(0, 1), (1, 0), (1, 2)])  # [[2], [1, 0]]
topological_order(3, [(1, 2), (1, 3)])          # [1, 2, 3]
```

Vertex numbering differs by function: `has_negative_cycle`,
`kosaraju_count` and `tarjan_components` use vertices `0..n-1`; `dijkstra`,
`kruskal`, `prim` and `topological_order` use `1..n`. Vertices outside the
range raise `ValueError`. `dijkstra` reports unreachable vertices as `INF`;
`floyd_warshall` takes missing edges as `None` or `NO_PATH` and returns
`None` for pairs that stay unreachable.

Backtracking:

```python
from algokit.backtracking import hamiltonian_cycles, is_colorable, n_queens

list(n_queens(4))                             # [(2, 4, 1, 3), (3, 1, 4, 2)]
is_colorable(3, 2, [(1, 2), (2, 3), (1, 3)])  # False
next(hamiltonian_cycles(3, [(1, 2), (2, 3), (1, 3)]))  # (1, 2, 3)
```

`n_queens`, `graph_colorings` and `hamiltonian_cycles` are generators.
`hamiltonian_cycles` yields every rotation and both directions of each cycle.

## Errors

`kruskal` and `prim` raise `NotConnectedError` for a disconnected graph, and
`topological_order` raises `CycleError` when the graph has a cycle. Both are
subclasses of `ValueError`.

## What it does not do

algokit is a library only. It has no command-line tool and does not read
problem input from standard input; call the functions from your own code.