"""Greedy algorithms: fractional knapsack, job sequencing and Huffman coding."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Largest profit from ``(weight, profit)`` items when items may be split.

    Items are taken in order of falling profit-to-weight ratio; ties keep
    their original order.
    """
    goods = [(weight, profit) for weight, profit in items]
    if any(weight <= 0 for weight, _ in goods):
        raise ValueError("item weights must be positive")
    goods.sort(key=lambda item: item[1] / item[0], reverse=True)

    remaining = capacity
    total = 0.0
    for weight, profit in goods:
        if remaining <= 0:
            break
        if weight <= remaining:
            total += profit
            remaining -= weight
        else:
            total += profit * remaining / weight
            break
    return total


def job_sequencing(jobs: Iterable[tuple[int, int]]) -> int:
    """Total profit of ``(deadline, profit)`` jobs scheduled in unit time slots.

    Jobs are considered in the order given (normally by falling profit); each
    takes the latest free slot no later than its deadline.
    """
    schedule = list(jobs)
    horizon = max([0, *(deadline for deadline, _ in schedule)])
    taken = [False] * (horizon + 1)
    profit = 0
    filled = 0
    for deadline, gain in schedule:
        for slot in range(min(deadline, horizon), 0, -1):
            if not taken[slot]:
                taken[slot] = True
                profit += gain
                filled += 1
                break
        if filled == horizon:
            break
    return profit


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol, inner nodes do not."""

    freq: int
    symbol: Hashable | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _pairs(frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]]):
    if isinstance(frequencies, Mapping):
        return list(frequencies.items())
    return list(frequencies)


def build_huffman_tree(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> HuffmanNode:
    """Build a Huffman tree from symbol frequencies.

    Among nodes of equal frequency the one queued first is taken first.
    """
    pairs = _pairs(frequencies)
    if not pairs:
        raise ValueError("at least one symbol is required")
    order = itertools.count()
    queue = [(freq, next(order), HuffmanNode(freq, symbol)) for symbol, freq in pairs]
    heapq.heapify(queue)
    while len(queue) > 1:
        _, _, left = heapq.heappop(queue)
        _, _, right = heapq.heappop(queue)
        parent = HuffmanNode(left.freq + right.freq, None, left, right)
        heapq.heappush(queue, (parent.freq, next(order), parent))
    return queue[0][2]


def _walk(node: HuffmanNode, prefix: str) -> Iterator[tuple[Hashable, str]]:
    if node.left is not None:
        yield from _walk(node.left, prefix + "0")
    if node.right is not None:
        yield from _walk(node.right, prefix + "1")
    if node.is_leaf:
        yield node.symbol, prefix


def huffman_codes(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> dict[Hashable, str]:
    """Map each symbol to its Huffman code, listed left to right in the tree."""
    return dict(_walk(build_huffman_tree(frequencies), ""))