"""Backtracking searches: N queens, m-colouring and Hamiltonian cycles."""


def n_queens(n):
    """Yield every placement of ``n`` non-attacking queens as a tuple of 1-based columns per row."""
    if n < 0:
        raise ValueError("board size must not be negative")
    placed = []

    def safe(col):
        row = len(placed) + 1
        return all(
            c != col and r - c != row - col and r + c != row + col
            for r, c in enumerate(placed, 1)
        )

    def extend():
        if len(placed) == n:
            yield tuple(placed)
            return
        for col in range(1, n + 1):
            if safe(col):
                placed.append(col)
                yield from extend()
                placed.pop()

    yield from extend()


def _adjacency(n, edges):
    adjacent = {vertex: set() for vertex in range(1, n + 1)}
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a vertex outside 1..{n}")
        adjacent[u].add(v)
        adjacent[v].add(u)
    return adjacent


def graph_colorings(n, colors, edges):
    """Yield every proper colouring of vertices 1..n with colours 1..colors, in lexicographic order."""
    if n < 0 or colors < 0:
        raise ValueError("vertex and colour counts must not be negative")
    adjacent = _adjacency(n, edges)
    assigned = {}

    def extend(vertex):
        if vertex > n:
            yield tuple(assigned[v] for v in range(1, n + 1))
            return
        if vertex in adjacent[vertex]:
            return
        for color in range(1, colors + 1):
            if all(assigned.get(other) != color for other in adjacent[vertex]):
                assigned[vertex] = color
                yield from extend(vertex + 1)
                del assigned[vertex]

    yield from extend(1)


def is_colorable(n, colors, edges):
    """Return whether the graph admits a proper colouring with ``colors`` colours."""
    return next(graph_colorings(n, colors, edges), None) is not None


def hamiltonian_cycles(n, edges):
    """Yield every Hamiltonian cycle of vertices 1..n as a vertex tuple, each rotation and direction included."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    adjacent = _adjacency(n, edges)
    for vertex in adjacent:
        adjacent[vertex].add(vertex)
    path = []
    visited = set()

    def extend():
        for vertex in range(1, n + 1):
            if vertex in visited or (path and vertex not in adjacent[path[-1]]):
                continue
            if len(path) + 1 == n:
                if not path or path[0] in adjacent[vertex]:
                    yield (*path, vertex)
                continue
            path.append(vertex)
            visited.add(vertex)
            yield from extend()
            visited.discard(vertex)
            path.pop()

    if n:
        yield from extend()