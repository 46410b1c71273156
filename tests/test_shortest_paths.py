import pytest
from hypothesis import given, strategies as st

from algokit.shortest_paths import (
    INF,
    NO_PATH,
    dijkstra,
    floyd_warshall,
    has_negative_cycle,
)


@st.composite
def undirected_graphs(draw):
    n = draw(st.integers(1, 6))
    vertex = st.integers(1, n)
    edges = draw(st.lists(st.tuples(vertex, vertex, st.integers(0, 50)), max_size=12))
    return n, edges


@st.composite
def directed_graphs(draw, min_weight=0):
    n = draw(st.integers(1, 6))
    vertex = st.integers(0, n - 1)
    edges = draw(
        st.lists(st.tuples(vertex, vertex, st.integers(min_weight, 50)), max_size=12)
    )
    return n, edges


def test_negative_triangle_is_detected():
    assert has_negative_cycle(3, [(0, 1, 1), (1, 2, -3), (2, 0, 1)]) is True


def test_positive_chain_has_no_negative_cycle():
    assert has_negative_cycle(3, [(0, 1, 2), (1, 2, 3)]) is False


@given(directed_graphs())
def test_non_negative_weights_never_form_negative_cycle(graph):
    n, edges = graph
    assert has_negative_cycle(n, edges) is False


@given(directed_graphs(min_weight=-50), st.data())
def test_negative_self_loop_is_always_detected(graph, data):
    n, edges = graph
    vertex = data.draw(st.integers(0, n - 1))
    assert has_negative_cycle(n, edges + [(vertex, vertex, -1)]) is True


def test_bellman_ford_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        has_negative_cycle(2, [(0, 2, 1)])


def test_dijkstra_single_edge_and_unreachable_vertex():
    assert dijkstra(3, [(1, 2, 7)], 1) == {1: 0, 2: 7, 3: INF}


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)


def test_dijkstra_rejects_unknown_source():
    with pytest.raises(ValueError):
        dijkstra(2, [], 3)


@given(undirected_graphs())
def test_dijkstra_distances_satisfy_edge_constraints(graph):
    n, edges = graph
    distance = dijkstra(n, edges, 1)
    assert distance[1] == 0
    for u, v, weight in edges:
        if distance[u] != INF:
            assert distance[v] <= distance[u] + weight
        if distance[v] != INF:
            assert distance[u] <= distance[v] + weight


@given(undirected_graphs())
def test_dijkstra_agrees_with_floyd_warshall(graph):
    n, edges = graph
    matrix = [[0 if i == j else NO_PATH for j in range(n)] for i in range(n)]
    for u, v, weight in edges:
        matrix[u - 1][v - 1] = min(matrix[u - 1][v - 1], weight)
        matrix[v - 1][u - 1] = min(matrix[v - 1][u - 1], weight)
    all_pairs = floyd_warshall(matrix)
    single = dijkstra(n, edges, 1)
    for vertex in range(1, n + 1):
        expected = all_pairs[0][vertex - 1]
        assert single[vertex] == (INF if expected is None else expected)


def test_floyd_warshall_reports_unreachable_as_none():
    assert floyd_warshall([[0, NO_PATH], [NO_PATH, 0]]) == [[0, None], [None, 0]]


def test_floyd_warshall_accepts_none_for_missing_edge():
    assert floyd_warshall([[0, None], [4, 0]]) == [[0, None], [4, 0]]


def test_floyd_warshall_source_example_is_consistent():
    matrix = [
        [1, 0, 343, 3434],
        [45, 45, NO_PATH, 7],
        [2, 3, 4, 5],
        [67, 78, 34, 2],
    ]
    result = floyd_warshall(matrix)
    size = len(matrix)
    for i in range(size):
        for j in range(size):
            assert result[i][j] is not None
            assert result[i][j] <= matrix[i][j]
            for k in range(size):
                assert result[i][j] <= result[i][k] + result[k][j]


def test_floyd_warshall_leaves_input_untouched():
    matrix = [[0, 5, NO_PATH], [NO_PATH, 0, 1], [NO_PATH, NO_PATH, 0]]
    snapshot = [row[:] for row in matrix]
    floyd_warshall(matrix)
    assert matrix == snapshot


def test_floyd_warshall_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])