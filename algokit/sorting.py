"""Comparison sorts. Each function returns a new ascending list."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any

PivotChooser = Callable[[int, int], int]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    data = list(items)
    n = len(data)
    for i in range(n):
        for j in range(n - i - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    data = list(items)
    n = len(data)
    for i in range(n):
        smallest = min(range(i, n), key=data.__getitem__)
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and data[j] > current:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data


def _merge(left: list[Any], right: list[Any]) -> Iterator[Any]:
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            yield right[j]
            j += 1
        else:
            yield left[i]
            i += 1
    yield from left[i:]
    yield from right[j:]


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in half, sorting each half and merging."""
    data = list(items)
    if len(data) < 2:
        return data
    split = (len(data) - 1) // 2 + 1
    return list(_merge(merge_sort(data[:split]), merge_sort(data[split:])))


def _partition(data: list[Any], low: int, high: int) -> int:
    """Partition around ``data[low]``; return the pivot's final index."""
    pivot = data[low]
    boundary = low
    for j in range(low + 1, high + 1):
        if data[j] <= pivot:
            boundary += 1
            data[j], data[boundary] = data[boundary], data[j]
    data[low], data[boundary] = data[boundary], data[low]
    return boundary


def _quick_sort_in_place(data: list[Any], choose_pivot: PivotChooser | None) -> None:
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        if choose_pivot is not None:
            k = choose_pivot(low, high)
            data[low], data[k] = data[k], data[low]
        p = _partition(data, low, high)
        pending.append((p + 1, high))
        pending.append((low, p - 1))


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the first item of each range as the pivot."""
    data = list(items)
    _quick_sort_in_place(data, None)
    return data


def randomized_quick_sort(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Quicksort with a pivot chosen uniformly at random from each range."""
    if rng is None:
        rng = random.Random()
    data = list(items)
    _quick_sort_in_place(data, rng.randint)
    return data


def _sift_down(data: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    data = list(items)
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(data, i, n)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, 0, end)
    return data