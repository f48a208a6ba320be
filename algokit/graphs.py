"""Graph algorithms on adjacency matrices with vertices numbered from 0.

Except in :func:`floyd_warshall`, a zero entry means there is no edge.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

INF = math.inf

Edge = tuple[int, int, Any]


def _square(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def kruskal(matrix: Sequence[Sequence[Any]]) -> list[Edge]:
    """Edges ``(u, v, weight)`` of a minimum spanning tree, in the order chosen.

    Raises ValueError if the graph is not connected.
    """
    cost = _square(matrix)
    n = len(cost)
    candidates = sorted(
        ((weight, i, j) for i, row in enumerate(cost) for j, weight in enumerate(row) if weight != 0),
        key=lambda edge: edge[0],
    )
    parent = list(range(n))

    def find(v: int) -> int:
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    tree: list[Edge] = []
    seen: set[frozenset[int]] = set()
    for weight, i, j in candidates:
        if len(tree) == n - 1:
            break
        pair = frozenset((i, j))
        if pair in seen:
            continue
        seen.add(pair)
        root_i, root_j = find(i), find(j)
        if root_i != root_j:
            parent[root_j] = root_i
            tree.append((i, j, weight))
    if len(tree) < n - 1:
        raise ValueError("graph is not connected")
    return tree


def prim(matrix: Sequence[Sequence[Any]]) -> list[Edge]:
    """Edges ``(u, v, weight)`` of a minimum spanning tree grown from vertex 0.

    Raises ValueError if the graph is not connected.
    """
    cost = _square(matrix)
    n = len(cost)
    if n == 0:
        return []

    def weight(i: int, j: int) -> Any:
        value = cost[i][j]
        return INF if value == 0 else value

    distance = [weight(0, i) for i in range(n)]
    nearest = [0] * n
    in_tree = [False] * n
    in_tree[0] = True
    tree: list[Edge] = []
    for _ in range(n - 1):
        v = min((i for i in range(n) if not in_tree[i]), key=distance.__getitem__)
        if distance[v] == INF:
            raise ValueError("graph is not connected")
        tree.append((nearest[v], v, distance[v]))
        in_tree[v] = True
        for i in range(n):
            if not in_tree[i] and weight(i, v) < distance[i]:
                distance[i] = weight(i, v)
                nearest[i] = v
    return tree


def dijkstra(matrix: Sequence[Sequence[Any]], source: int) -> list[Any]:
    """Shortest distance from ``source`` to every vertex; ``INF`` if unreachable."""
    cost = _square(matrix)
    n = len(cost)
    if not 0 <= source < n:
        raise IndexError(f"source vertex {source} out of range")
    dist: list[Any] = [INF] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n):
        u = min((i for i in range(n) if not done[i]), key=dist.__getitem__)
        if dist[u] == INF:
            break
        done[u] = True
        for w, edge in enumerate(cost[u]):
            if edge != 0 and not done[w] and dist[u] + edge < dist[w]:
                dist[w] = dist[u] + edge
    return dist


def floyd_warshall(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """All-pairs shortest distances.

    Missing edges are given as ``INF`` or None; the diagonal is taken as given.
    """
    dist = [[INF if w is None else w for w in row] for row in _square(matrix)]
    for k, through in enumerate(dist):
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j, onward in enumerate(through):
                if via + onward < row[j]:
                    row[j] = via + onward
    return dist


def vertex_cover(matrix: Sequence[Sequence[Any]]) -> list[int]:
    """Vertices of a vertex cover at most twice the minimum size, ascending."""
    adjacency = _square(matrix)
    covered = [False] * len(adjacency)
    for u, row in enumerate(adjacency):
        if covered[u]:
            continue
        for v, edge in enumerate(row):
            if edge and not covered[v]:
                covered[u] = covered[v] = True
                break
    return [v for v, flag in enumerate(covered) if flag]