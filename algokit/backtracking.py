"""Backtracking searches: subset sums, 0/1 knapsack and N queens."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

MAX_QUEENS = 15
"""Largest board size :func:`n_queens` accepts."""


def subsets_with_sum(items: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield every subset of non-negative ``items`` adding up to ``target``.

    Each subset lists its items from the last chosen position backwards;
    subsets leaving out later items come first.
    """
    data = list(items)
    chosen: list[int] = []

    def search(count: int, remaining: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if count == 0 or remaining < 0:
            return
        yield from search(count - 1, remaining)
        chosen.append(data[count - 1])
        yield from search(count - 1, remaining - data[count - 1])
        chosen.pop()

    return search(len(data), target)


def knapsack_backtrack(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> tuple[int, list[int]]:
    """Best total value of whole items fitting in ``capacity``, by exhaustive search.

    Returns the value and the 0-based indices of the chosen items, ascending.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    n = len(weights)
    best_value = 0
    best_items: list[int] = []
    current: list[int] = []

    def explore(start: int, weight: int, value: int) -> None:
        nonlocal best_value, best_items
        if weight > capacity:
            return
        if value > best_value:
            best_value = value
            best_items = list(current)
        for i in range(start, n):
            current.append(i)
            explore(i + 1, weight + weights[i], value + values[i])
            current.pop()

    explore(0, 0, 0)
    return best_value, best_items


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> Iterator[tuple[int, ...]]:
        if col == n:
            yield tuple(rows)
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(col + 1)
            rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    return place(0)


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens on an n-by-n board.

    A placement gives, for each column, the row of its queen.
    """
    if not 1 <= n <= MAX_QUEENS:
        raise ValueError(f"the number of queens must be between 1 and {MAX_QUEENS}")
    return _placements(n)


def format_board(board: Sequence[int]) -> str:
    """Draw a placement from :func:`n_queens` as text, one line per row."""
    size = len(board)
    return "\n".join(
        "".join(" Q " if board[col] == row else " . " for col in range(size))
        for row in range(size)
    )