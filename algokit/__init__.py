"""Classic algorithms: string matching, sorting, number theory, range queries, graphs and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "components",
    "numbers",
    "range_queries",
    "shortest_paths",
    "sorting",
    "spanning_trees",
    "strings",
]