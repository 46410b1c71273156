"""Offline distinct-value queries (Mo's algorithm) and sqrt-decomposed range minimum."""

from collections import Counter
from itertools import chain
from math import isqrt


def distinct_counts(values, queries):
    """Return the number of distinct values in each inclusive, 0-based ``(left, right)`` range."""
    values = list(values)
    queries = list(queries)
    for left, right in queries:
        if left > right:
            raise ValueError(f"empty range ({left}, {right})")
        if left < 0 or right >= len(values):
            raise IndexError(f"range ({left}, {right}) out of bounds")

    block = max(1, isqrt(len(values)))
    order = sorted(range(len(queries)), key=lambda i: (queries[i][0] // block, queries[i][1]))

    counts = Counter()
    answers = [0] * len(queries)
    lo, hi = 0, -1

    def add(value):
        counts[value] += 1

    def remove(value):
        counts[value] -= 1
        if not counts[value]:
            del counts[value]

    for index in order:
        left, right = queries[index]
        while hi < right:
            hi += 1
            add(values[hi])
        while lo > left:
            lo -= 1
            add(values[lo])
        while hi > right:
            remove(values[hi])
            hi -= 1
        while lo < left:
            remove(values[lo])
            lo += 1
        answers[index] = len(counts)
    return answers


class SqrtMinimum:
    """Range-minimum queries over a fixed sequence split into blocks of size about sqrt(n)."""

    def __init__(self, values):
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        self._block = isqrt(len(self._values))
        self._minima = [
            min(self._values[start:start + self._block])
            for start in range(0, len(self._values), self._block)
        ]

    def query(self, left, right):
        """Return the minimum of the inclusive range; the bounds may be given in either order."""
        if left > right:
            left, right = right, left
        if left < 0 or right >= len(self._values):
            raise IndexError(f"range ({left}, {right}) out of bounds")
        block = self._block
        first, last = left // block, right // block
        if first == last:
            return min(self._values[left:right + 1])
        return min(
            chain(
                self._values[left:(first + 1) * block],
                self._minima[first + 1:last],
                self._values[last * block:right + 1],
            )
        )