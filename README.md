# algokit

Classic algorithms in plain Python, grouped by technique. The package has
no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from algokit.numbers import gcd, chinese_remainder
from algokit.dynamic import edit_distance, matrix_chain_order

assert gcd(48, 18) == 6
assert chinese_remainder([3, 5, 7], [2, 3, 2]) == 23
assert edit_distance("kitten", "sitting") == 3

chain = matrix_chain_order([10, 30, 5, 60])
assert chain.cost == 4500
assert chain.parenthesization == "((AB)C)"
```

Functions that use randomness take an optional `rng` argument (a
`random.Random` instance); pass a seeded one to make results reproducible.
Without it a fresh `random.Random()` is used.

## Modules

### `algokit.numbers`

- `gcd(a, b)`: greatest common divisor by Euclid's algorithm.
- `extended_gcd(a, b)`: returns `(g, x, y)` with `a*x + b*y == g`.
- `mod_inverse(a, m)`: inverse of `a` modulo `m` in `range(m)`; raises
  `ValueError` if `m < 1` or no inverse exists (returns 0 when `m == 1`).
- `chinese_remainder(moduli, remainders)`: smallest non-negative solution
  of a system of congruences with pairwise coprime moduli.
- `modular_pow(base, exp, mod)`: `base ** exp % mod` by repeated squaring.
- `is_probable_prime(n, k, rng=None)`: Miller–Rabin test with `k` random
  witnesses. `False` means certainly composite.
- `fibonacci(n)`: Fibonacci number at 1-based position `n` (position 1 is
  0, position 2 is 1); raises `ValueError` for `n <= 0`.
- `fibonacci_memo(n)`: Fibonacci number at 0-based position `n`, kept in a
  table shared across calls; `n` must lie in `range(MEMO_LIMIT)` (1000).

### `algokit.searching`

- `linear_search(items, key)`: index of the first match, or `None`.
- `binary_search(items, key)`: index in an ascending sequence, or `None`.
- `min_max(items)`: `(smallest, largest)` in one pass.
- `min_max_divide(items)`: the same by divide and conquer.

Both `min_max` functions raise `ValueError` on empty input.

### `algokit.sorting`

Each function returns a new ascending list: `bubble_sort`,
`selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` (first item
as pivot), `heap_sort` and `randomized_quick_sort(items, rng=None)`.

### `algokit.selection`

- `select_kth_smallest(items, k)`: k-th smallest (1-based) by `k` passes of
  selection sort.
- `randomized_select(items, k, rng=None)`: k-th smallest by partitioning
  around random pivots.

Both raise `ValueError` unless `1 <= k <= len(items)`.

### `algokit.greedy`

- `fractional_knapsack(items, capacity)`: best profit from
  `(weight, profit)` pairs when items may be split.
- `job_sequencing(jobs)`: total profit of `(deadline, profit)` jobs, each
  placed in the latest free unit slot before its deadline, in the order
  given.
- `build_huffman_tree(frequencies)`: builds a tree of `HuffmanNode`
  (`freq`, `symbol`, `left`, `right`, `is_leaf`) from a mapping or from
  `(symbol, frequency)` pairs.
- `huffman_codes(frequencies)`: maps each symbol to its code string.

### `algokit.graphs`

Graphs are square adjacency matrices with vertices numbered from 0. A zero
entry means "no edge", except in `floyd_warshall`.

- `kruskal(matrix)` and `prim(matrix)`: minimum spanning tree as a list of
  `(u, v, weight)` edges; `ValueError` if the graph is not connected.
- `dijkstra(matrix, source)`: shortest distance to every vertex, `INF`
  (`math.inf`) where unreachable.
- `floyd_warshall(matrix)`: all-pairs shortest distances; missing edges are
  given as `INF` or `None`.
- `vertex_cover(matrix)`: vertices of a cover at most twice the minimum
  size, ascending.

### `algokit.dynamic`

- `matrix_chain_order(dims)`: returns a `MatrixChain` with `cost`,
  `parenthesization` (matrices named A, B, C, …), `table` and
  `format_table()`.
- `knapsack_01(capacity, weights, values)`: `(best_value, chosen_indices)`.
- `longest_common_subsequence(x, y)`: a string for two strings, otherwise a
  list.
- `edit_distance(a, b)`: Levenshtein distance.
- `travelling_salesman(cost)`: `(cost, tour)` for the cheapest round trip
  from city 0; at most `MAX_CITIES` (15) cities, no negative costs.

### `algokit.backtracking`

- `subsets_with_sum(items, target)`: yields every subset of non-negative
  items adding up to `target`.
- `knapsack_backtrack(weights, values, capacity)`: `(best_value,
  chosen_indices)` by exhaustive search.
- `n_queens(n)`: yields every placement of `n` non-attacking queens as a
  tuple giving each column's row; `1 <= n <= MAX_QUEENS` (15).
- `format_board(board)`: draws a placement as text using `Q` and `.`.

## What it does not do

This is a library only. It has no command-line program and does not read
input or print results; call the functions from your own code.