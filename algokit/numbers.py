"""Digit DP, coin change counting and prime sieves."""

from functools import cache
from math import isqrt


def count_even_heavy(limit):
    """Count integers in ``[0, limit]`` whose even digits sum to more than their odd digits."""
    if limit <= 0:
        return 0
    digits = tuple(map(int, str(limit)))

    @cache
    def count(index, tight, even, odd):
        if index == len(digits):
            return int(even > odd)
        top = digits[index] if tight else 9
        total = 0
        for digit in range(top + 1):
            next_tight = tight and digit == top
            if digit % 2:
                total += count(index + 1, next_tight, even, odd + digit)
            else:
                total += count(index + 1, next_tight, even + digit, odd)
        return total

    return count(0, True, 0, 0)


def count_even_heavy_between(low, high):
    """Count even-heavy integers in ``[low, high]``."""
    return count_even_heavy(high) - count_even_heavy(low - 1)


def coin_change_ways(coins, amount):
    """Return the number of coin combinations (order ignored) that make ``amount``."""
    coins = list(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def simple_sieve(limit):
    """Return all primes up to and including ``limit``."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    composite[0] = composite[1] = 1
    for p in range(2, isqrt(limit) + 1):
        if not composite[p]:
            composite[p * p::p] = b"\x01" * len(range(p * p, limit + 1, p))
    return [n for n, flag in enumerate(composite) if not flag]


def primes_in_range(low, high):
    """Return the primes in ``[low, high]`` using a segmented sieve."""
    low = max(low, 2)
    if high < low:
        return []
    composite = bytearray(high - low + 1)
    for p in simple_sieve(isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        offset = start - low
        composite[offset::p] = b"\x01" * len(range(offset, len(composite), p))
    return [low + i for i, flag in enumerate(composite) if not flag]