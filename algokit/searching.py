"""Searching a sequence for a key and for its extreme values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def linear_search(items: Iterable[Any], key: Any) -> int | None:
    """Index of the first item equal to ``key``, or None if there is none."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return None


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Index of ``key`` in the ascending sequence ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid
        if key < items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def min_max(items: Iterable[T]) -> tuple[T, T]:
    """Smallest and largest item in a single pass."""
    iterator = iter(items)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for item in iterator:
        if item < smallest:
            smallest = item
        if item > largest:
            largest = item
    return smallest, largest


def min_max_divide(items: Iterable[T]) -> tuple[T, T]:
    """Smallest and largest item found by divide and conquer."""
    data = list(items)
    if not data:
        raise ValueError("min_max_divide() of an empty sequence")

    def solve(low: int, high: int) -> tuple[T, T]:
        if low == high:
            return data[low], data[low]
        if high == low + 1:
            first, second = data[low], data[high]
            return (first, second) if first < second else (second, first)
        mid = (low + high) // 2
        min1, max1 = solve(low, mid)
        min2, max2 = solve(mid + 1, high)
        return (min1 if min1 < min2 else min2), (max1 if max1 > max2 else max2)

    return solve(0, len(data) - 1)