"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from math import inf
from operator import itemgetter


class NotConnectedError(ValueError):
    """Raised when a graph has no spanning tree because it is not connected."""


class DisjointSet:
    """Union-find over the integers ``0..size-1`` with path compression."""

    def __init__(self, size):
        self._parent = list(range(size))

    def find(self, item):
        """Return the representative of the set holding ``item``."""
        parent = self._parent
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, first, second):
        """Merge the sets of ``first`` and ``second``; return False if they were already one."""
        first_root, second_root = self.find(first), self.find(second)
        if first_root == second_root:
            return False
        self._parent[second_root] = first_root
        return True


def _checked_edges(n, edges):
    edges = list(edges)
    for u, v, _ in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} outside 1..{n}")
    return edges


def kruskal(n, edges):
    """Return the weight of a minimum spanning tree of the undirected graph on vertices 1..n.

    ``edges`` are ``(u, v, weight)`` triples.
    """
    edges = _checked_edges(n, edges)
    sets = DisjointSet(n + 1)
    total = sum(weight for u, v, weight in sorted(edges, key=itemgetter(2)) if sets.union(u, v))
    roots = sum(1 for vertex in range(1, n + 1) if sets.find(vertex) == vertex)
    if roots != 1:
        raise NotConnectedError("given graph is not a connected graph")
    return total


def prim(n, edges):
    """Return the weight of a minimum spanning tree of the undirected graph on vertices 1..n.

    Where several edges join the same pair of vertices, the last one given is used.
    """
    edges = _checked_edges(n, edges)
    neighbours = [{} for _ in range(n)]
    for u, v, weight in edges:
        neighbours[u - 1][v - 1] = weight
        neighbours[v - 1][u - 1] = weight

    key = [inf] * n
    in_tree = [False] * n
    if n:
        key[0] = 0
    total = 0
    for _ in range(n):
        candidates = [
            (cost, vertex)
            for vertex, cost in enumerate(key)
            if not in_tree[vertex] and cost < inf
        ]
        if not candidates:
            raise NotConnectedError("given graph is not a connected graph")
        cost, vertex = min(candidates)
        in_tree[vertex] = True
        for other, weight in neighbours[vertex].items():
            if not in_tree[other] and weight < key[other]:
                key[other] = weight
        total += cost
    return total