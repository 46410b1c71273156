"""Strongly connected components (Kosaraju, Tarjan) and topological ordering."""

from heapq import heapify, heappop, heappush
from itertools import count


class CycleError(ValueError):
    """Raised when a topological order is asked of a graph with a cycle."""


def _successors(n, edges, first):
    adjacency = {vertex: [] for vertex in range(first, first + n)}
    for u, v in edges:
        for vertex in (u, v):
            if vertex not in adjacency:
                raise ValueError(f"vertex {vertex} outside {first}..{first + n - 1}")
        adjacency[u].append(v)
    return adjacency


def _finish_order(adjacency, root, visited):
    """Return the vertices reached from ``root`` in the order their depth-first search finishes."""
    finished = []
    visited.add(root)
    stack = [(root, iter(adjacency[root]))]
    while stack:
        vertex, children = stack[-1]
        for child in children:
            if child not in visited:
                visited.add(child)
                stack.append((child, iter(adjacency[child])))
                break
        else:
            stack.pop()
            finished.append(vertex)
    return finished


def kosaraju_count(n, edges):
    """Return the number of strongly connected components of the directed graph on 0..n-1."""
    adjacency = _successors(n, edges, 0)
    reverse = {vertex: [] for vertex in adjacency}
    for vertex, children in adjacency.items():
        for child in children:
            reverse[child].append(vertex)

    visited = set()
    order = []
    for vertex in adjacency:
        if vertex not in visited:
            order.extend(_finish_order(adjacency, vertex, visited))

    visited = set()
    components = 0
    for vertex in reversed(order):
        if vertex not in visited:
            _finish_order(reverse, vertex, visited)
            components += 1
    return components


def tarjan_components(n, edges):
    """Return the strongly connected components of the directed graph on 0..n-1.

    Components come in the order they are completed, each listing its vertices
    in the order they leave the search stack.
    """
    adjacency = _successors(n, edges, 0)
    timer = count(1)
    discovered = {}
    low = {}
    stack = []
    on_stack = set()
    components = []

    def visit(vertex):
        discovered[vertex] = low[vertex] = next(timer)
        stack.append(vertex)
        on_stack.add(vertex)

    for root in adjacency:
        if root in discovered:
            continue
        visit(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            vertex, children = work[-1]
            for child in children:
                if child not in discovered:
                    visit(child)
                    work.append((child, iter(adjacency[child])))
                    break
                if child in on_stack:
                    low[vertex] = min(low[vertex], discovered[child])
            else:
                work.pop()
                if low[vertex] == discovered[vertex]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == vertex:
                            break
                    components.append(component)
                if work and vertex in on_stack:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[vertex])
    return components


def topological_order(n, edges):
    """Return the smallest-first topological order of the directed graph on vertices 1..n."""
    adjacency = _successors(n, edges, 1)
    indegree = dict.fromkeys(adjacency, 0)
    for children in adjacency.values():
        for child in children:
            indegree[child] += 1

    ready = [vertex for vertex, degree in indegree.items() if not degree]
    heapify(ready)
    order = []
    while ready:
        vertex = heappop(ready)
        order.append(vertex)
        for child in adjacency[vertex]:
            indegree[child] -= 1
            if not indegree[child]:
                heappush(ready, child)
    if len(order) != n:
        raise CycleError("there exists cycle in given graph")
    return order