"""Substring search: prefix function, KMP counting and Rabin-Karp hashing."""

from itertools import accumulate

_BASE = 31
_MOD = 1_000_000_007


def prefix_function(text):
    """Return, for every prefix of ``text``, the length of its longest proper border."""
    borders = [0] * len(text)
    for i, ch in enumerate(text[1:], 1):
        j = borders[i - 1]
        while j and ch != text[j]:
            j = borders[j - 1]
        if ch == text[j]:
            j += 1
        borders[i] = j
    return borders


def kmp_count(text, pattern):
    """Count the (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    count = matched = 0
    for ch in text:
        while matched and ch != pattern[matched]:
            matched = borders[matched - 1]
        if ch == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            count += 1
            matched = borders[matched - 1]
    return count


def _char_value(ch):
    return ord(ch) - ord("a") + 1


def rabin_karp(text, pattern):
    """Return the 1-based start positions where the polynomial hash of ``pattern`` matches ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    length, width = len(text), len(pattern)
    if width > length:
        return []

    powers = [1]
    for _ in range(length - 1):
        powers.append(powers[-1] * _BASE % _MOD)

    prefix = list(
        accumulate(
            (_char_value(ch) * power for ch, power in zip(text, powers)),
            lambda acc, term: (acc + term) % _MOD,
        )
    )
    target = sum(_char_value(ch) * power for ch, power in zip(pattern, powers)) % _MOD

    matches = []
    for start in range(length - width + 1):
        window = prefix[start + width - 1] - (prefix[start - 1] if start else 0)
        # Compare against the pattern hash shifted by p**start instead of dividing.
        if window % _MOD == target * powers[start] % _MOD:
            matches.append(start + 1)
    return matches