"""Finding the k-th smallest item of a collection."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from algokit.sorting import _partition


def _checked(items: Iterable[Any], k: int) -> list[Any]:
    data = list(items)
    if not 1 <= k <= len(data):
        raise ValueError(f"k must be between 1 and {len(data)}, got {k}")
    return data


def select_kth_smallest(items: Iterable[Any], k: int) -> Any:
    """k-th smallest item (1-based), found by k passes of selection sort."""
    data = _checked(items, k)
    n = len(data)
    for i in range(k):
        smallest = min(range(i, n), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data[k - 1]


def randomized_select(items: Iterable[Any], k: int, rng: random.Random | None = None) -> Any:
    """k-th smallest item (1-based), found by partitioning around random pivots."""
    data = _checked(items, k)
    if rng is None:
        rng = random.Random()
    low, high, rank = 0, len(data) - 1, k
    while low < high:
        pivot = rng.randint(low, high)
        data[low], data[pivot] = data[pivot], data[low]
        p = _partition(data, low, high)
        size = p - low + 1
        if rank == size:
            return data[p]
        if rank < size:
            high = p - 1
        else:
            rank -= size
            low = p + 1
    return data[low]