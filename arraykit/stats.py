"""Counting and classifying integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import isqrt


def count_even_odd(items: Iterable[int]) -> tuple[int, int]:
    """Return ``(even_count, odd_count)``."""
    even = odd = 0
    for item in items:
        if item % 2 == 0:
            even += 1
        else:
            odd += 1
    return even, odd


def largest_two(items: Sequence[int]) -> tuple[int, int | None]:
    """Return the largest value and the largest strictly smaller one, or None."""
    if not items:
        raise ValueError("largest_two() needs at least one item")
    largest = max(items)
    second = max((item for item in items if item != largest), default=None)
    return largest, second


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def partition_primes(items: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split ``items`` into ``(primes, non_primes)``, keeping their order."""
    primes: list[int] = []
    others: list[int] = []
    for item in items:
        (primes if is_prime(item) else others).append(item)
    return primes, others