"""Shortest paths: Bellman-Ford cycle detection, Dijkstra and Floyd-Warshall."""

from heapq import heappop, heappush

INF = 1_000_000_000
"""Distance reported by :func:`dijkstra` for a vertex the source cannot reach."""

NO_PATH = 10_000_000
"""Matrix entry that :func:`floyd_warshall` treats as a missing edge."""


def _check_vertex(vertex, first, count):
    if not first <= vertex < first + count:
        raise ValueError(f"vertex {vertex} outside {first}..{first + count - 1}")


def has_negative_cycle(n, edges):
    """Return whether the directed graph on vertices 0..n-1 holds a negative-weight cycle.

    ``edges`` are ``(u, v, weight)`` triples; vertex 0 is the source.
    """
    outgoing = [[] for _ in range(n)]
    for u, v, weight in edges:
        _check_vertex(u, 0, n)
        _check_vertex(v, 0, n)
        outgoing[u].append((v, weight))
    ordered = [(u, v, weight) for u, out in enumerate(outgoing) for v, weight in out]
    if not n:
        return False

    distance = [INF] * n
    distance[0] = 0
    for _ in range(n - 1):
        for u, v, weight in ordered:
            if distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
    # Any edge that still relaxes after n-1 rounds lies on a negative cycle.
    return any(distance[u] + weight < distance[v] for u, v, weight in ordered)


def dijkstra(n, edges, source=1):
    """Return ``{vertex: distance}`` from ``source`` over the undirected graph on vertices 1..n.

    ``edges`` are ``(u, v, weight)`` triples with non-negative weights; unreachable
    vertices get :data:`INF`.
    """
    _check_vertex(source, 1, n)
    neighbours = {vertex: [] for vertex in range(1, n + 1)}
    for u, v, weight in edges:
        _check_vertex(u, 1, n)
        _check_vertex(v, 1, n)
        if weight < 0:
            raise ValueError(f"edge ({u}, {v}) has negative weight {weight}")
        neighbours[u].append((weight, v))
        neighbours[v].append((weight, u))

    distance = dict.fromkeys(neighbours, INF)
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        current, vertex = heappop(heap)
        if current > distance[vertex]:
            continue
        for weight, other in neighbours[vertex]:
            candidate = current + weight
            if candidate < distance[other]:
                distance[other] = candidate
                heappush(heap, (candidate, other))
    return distance


def floyd_warshall(matrix):
    """Return the all-pairs shortest distances of a square weight matrix.

    Missing edges are given as :data:`NO_PATH` or ``None``; pairs that stay
    unreachable come back as ``None``.
    """
    distance = [[NO_PATH if cost is None else cost for cost in row] for row in matrix]
    size = len(distance)
    if any(len(row) != size for row in distance):
        raise ValueError("matrix must be square")

    for k, through in enumerate(distance):
        for row in distance:
            for j, cost in enumerate(through):
                row[j] = min(row[j], row[k] + cost)

    return [[None if cost == NO_PATH else cost for cost in row] for row in distance]