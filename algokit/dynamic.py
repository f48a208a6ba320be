"""Dynamic programming: matrix chains, 0/1 knapsack, LCS, edit distance, TSP."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

MAX_CITIES = 15
"""Largest number of cities :func:`travelling_salesman` accepts."""


@dataclass(frozen=True)
class MatrixChain:
    """Result of optimising a matrix chain product.

    ``table[i][j]`` is the least number of scalar multiplications for the
    product of matrices ``i`` to ``j`` (0-based); entries below the diagonal
    are None.
    """

    cost: int
    parenthesization: str
    table: tuple[tuple[int | None, ...], ...]

    def format_table(self) -> str:
        """The cost table as fixed-width text, one line per row."""
        return "\n".join(
            "".join("      " if value is None else f"{value:6d} " for value in row)
            for row in self.table
        )


def matrix_chain_order(dims: Iterable[int]) -> MatrixChain:
    """Cheapest way to multiply matrices whose dimensions are given in ``dims``.

    Matrix ``i`` has ``dims[i]`` rows and ``dims[i + 1]`` columns. Matrices
    are named A, B, C, ... in the returned parenthesization.
    """
    p = list(dims)
    count = len(p) - 1
    if count < 1:
        raise ValueError("at least two dimensions are required")

    cost: list[list[int | None]] = [[None] * count for _ in range(count)]
    split = [[0] * count for _ in range(count)]
    for i in range(count):
        cost[i][i] = 0
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            best: int | None = None
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + p[i] * p[k + 1] * p[j + 1]
                if best is None or q < best:
                    best = q
                    split[i][j] = k
            cost[i][j] = best

    def parenthesize(i: int, j: int) -> str:
        if i == j:
            return chr(ord("A") + i)
        k = split[i][j]
        return f"({parenthesize(i, k)}{parenthesize(k + 1, j)})"

    return MatrixChain(
        cost=cost[0][count - 1],
        parenthesization=parenthesize(0, count - 1),
        table=tuple(tuple(row) for row in cost),
    )


def knapsack_01(
    capacity: int, weights: Iterable[int], values: Iterable[int]
) -> tuple[int, list[int]]:
    """Best total value of whole items fitting in ``capacity``.

    Returns the value and the 0-based indices of the chosen items, ascending.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")

    n = len(weights)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]
    for i, (weight, value) in enumerate(zip(weights, values), start=1):
        previous, row = dp[i - 1], dp[i]
        for w in range(1, capacity + 1):
            if weight <= w:
                row[w] = max(value + previous[w - weight], previous[w])
            else:
                row[w] = previous[w]

    best = dp[n][capacity]
    remaining, w = best, capacity
    chosen: list[int] = []
    for i in range(n, 0, -1):
        if remaining <= 0:
            break
        if remaining != dp[i - 1][w]:
            chosen.append(i - 1)
            remaining -= values[i - 1]
            w -= weights[i - 1]
    chosen.reverse()
    return best, chosen


def longest_common_subsequence(x: Sequence[Any], y: Sequence[Any]) -> str | list[Any]:
    """A longest common subsequence of ``x`` and ``y``.

    Returns a string when both inputs are strings, otherwise a list.
    """
    m, n = len(x), len(y)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if x[i - 1] == y[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    result: list[Any] = []
    i, j = m, n
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            result.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    if isinstance(x, str) and isinstance(y, str):
        return "".join(result)
    return result


def edit_distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Least number of insertions, deletions and replacements turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, left in enumerate(a, start=1):
        current = [i]
        for j, right in enumerate(b, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def travelling_salesman(cost: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Cheapest round trip from city 0 through every city and back.

    Returns the cost and the tour as 0-based cities, starting and ending at 0.
    """
    rows = [list(row) for row in cost]
    n = len(rows)
    if n == 0:
        raise ValueError("at least one city is required")
    if any(len(row) != n for row in rows):
        raise ValueError("cost matrix must be square")
    if n > MAX_CITIES:
        raise ValueError(f"number of cities exceeds maximum allowed ({MAX_CITIES})")
    if any(value < 0 for row in rows for value in row):
        raise ValueError("cost cannot be negative")

    full = (1 << n) - 1
    best_next: dict[tuple[int, int], int] = {}

    @functools.cache
    def solve(mask: int, pos: int) -> int:
        if mask == full:
            return rows[pos][0]
        best: int | None = None
        choice = -1
        for nxt in range(n):
            if not mask & (1 << nxt):
                candidate = rows[pos][nxt] + solve(mask | (1 << nxt), nxt)
                if best is None or candidate < best:
                    best, choice = candidate, nxt
        best_next[(mask, pos)] = choice
        return best

    total = solve(1, 0)
    path = [0]
    mask, pos = 1, 0
    while mask != full:
        pos = best_next[(mask, pos)]
        mask |= 1 << pos
        path.append(pos)
    path.append(0)
    return total, path