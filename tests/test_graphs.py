import math
import random

import pytest

from algokit.graphs import dijkstra, floyd_warshall, kruskal, prim, vertex_cover

CLASSIC = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

DISCONNECTED = [
    [0, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 0, 2],
    [0, 0, 2, 0],
]


def _random_graph(rng, n, density=1.0):
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        matrix[i][(i + 1) % n] = matrix[(i + 1) % n][i] = rng.randint(1, 20) if n > 1 else 0
        for j in range(i + 2, n):
            if rng.random() < density:
                matrix[i][j] = matrix[j][i] = rng.randint(1, 20)
    return matrix


def _is_spanning_tree(matrix, edges):
    n = len(matrix)
    if len(edges) != n - 1:
        return False
    neighbours = {v: set() for v in range(n)}
    for u, v, w in edges:
        if matrix[u][v] != w:
            return False
        neighbours[u].add(v)
        neighbours[v].add(u)
    reached, frontier = {0}, [0]
    while frontier:
        for nxt in neighbours[frontier.pop()] - reached:
            reached.add(nxt)
            frontier.append(nxt)
    return len(reached) == n


def test_mst_classic_example():
    assert sum(w for _, _, w in kruskal(CLASSIC)) == 16
    assert sum(w for _, _, w in prim(CLASSIC)) == 16


@pytest.mark.parametrize("seed", range(8))
def test_kruskal_and_prim_agree_on_random_graphs(seed):
    rng = random.Random(seed)
    matrix = _random_graph(rng, rng.randint(2, 9), density=0.5)
    k_edges = kruskal(matrix)
    p_edges = prim(matrix)
    assert _is_spanning_tree(matrix, k_edges)
    assert _is_spanning_tree(matrix, p_edges)
    assert sum(w for _, _, w in k_edges) == sum(w for _, _, w in p_edges)


def test_kruskal_picks_cheapest_edge_first():
    edges = kruskal(CLASSIC)
    weights = [w for _, _, w in edges]
    assert weights == sorted(weights)


def test_prim_starts_from_vertex_zero():
    edges = prim(CLASSIC)
    assert edges[0][0] == 0


def test_spanning_tree_of_trivial_graphs():
    assert kruskal([]) == []
    assert prim([]) == []
    assert kruskal([[0]]) == []
    assert prim([[0]]) == []


def test_disconnected_graph_is_rejected():
    with pytest.raises(ValueError):
        kruskal(DISCONNECTED)
    with pytest.raises(ValueError):
        prim(DISCONNECTED)


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1]])
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1, 2], [1, 0, 3]])


def test_dijkstra_unreachable_vertices_are_infinite():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert dijkstra(matrix, 0) == [0, 1, math.inf]


def test_dijkstra_prefers_indirect_route():
    matrix = [[0, 10, 1], [10, 0, 1], [1, 1, 0]]
    dist = dijkstra(matrix, 0)
    assert dist[1] == matrix[0][2] + matrix[2][1]


@pytest.mark.parametrize("seed", range(6))
def test_dijkstra_agrees_with_floyd_warshall(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(2, 8)
    matrix = [[0 if i == j or rng.random() < 0.4 else rng.randint(1, 15) for j in range(n)] for i in range(n)]
    table = [[0 if i == j else (math.inf if w == 0 else w) for j, w in enumerate(row)] for i, row in enumerate(matrix)]
    all_pairs = floyd_warshall(table)
    for source in range(n):
        assert dijkstra(matrix, source) == all_pairs[source]


def test_dijkstra_rejects_bad_source():
    with pytest.raises(IndexError):
        dijkstra(CLASSIC, len(CLASSIC))


def test_floyd_warshall_triangle_inequality():
    rng = random.Random(7)
    n = 6
    table = [[0 if i == j else rng.choice([math.inf, rng.randint(1, 30)]) for j in range(n)] for i in range(n)]
    dist = floyd_warshall(table)
    for i in range(n):
        for j in range(n):
            assert dist[i][j] <= table[i][j]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_accepts_none_and_keeps_unreachable():
    table = [[0, 3, None], [None, 0, None], [None, None, 0]]
    dist = floyd_warshall(table)
    assert dist[0][1] == 3
    assert dist[0][2] == math.inf
    assert dist[2][0] == math.inf


def test_floyd_warshall_does_not_modify_input():
    table = [[0, 1, math.inf], [math.inf, 0, 1], [1, math.inf, 0]]
    snapshot = [row[:] for row in table]
    floyd_warshall(table)
    assert table == snapshot


@pytest.mark.parametrize("seed", range(6))
def test_vertex_cover_covers_every_edge(seed):
    rng = random.Random(seed)
    matrix = _random_graph(rng, rng.randint(2, 10), density=0.3)
    cover = set(vertex_cover(matrix))
    for u, row in enumerate(matrix):
        for v, edge in enumerate(row):
            if edge:
                assert u in cover or v in cover


def test_vertex_cover_of_graph_without_edges_is_empty():
    assert vertex_cover([[0, 0], [0, 0]]) == []


def test_vertex_cover_is_sorted_and_even_sized():
    cover = vertex_cover(CLASSIC)
    assert cover == sorted(cover)
    assert len(cover) % 2 == 0