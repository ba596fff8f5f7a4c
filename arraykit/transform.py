"""Operations that build new lists from existing ones."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import groupby


def reverse(items: Sequence[int]) -> list[int]:
    """Return the items in reverse order."""
    return list(reversed(items))


def delete_at(items: Sequence[int], pos: int) -> list[int]:
    """Return a copy of ``items`` without the element at ``pos``."""
    if not 0 <= pos < len(items):
        raise IndexError(f"position {pos} out of range for {len(items)} items")
    return [*items[:pos], *items[pos + 1:]]


def insert_at(items: Sequence[int], pos: int, value: int) -> list[int]:
    """Return a copy of ``items`` with ``value`` inserted at ``pos``."""
    if not 0 <= pos <= len(items):
        raise IndexError(f"position {pos} out of range for {len(items)} items")
    return [*items[:pos], value, *items[pos:]]


def rotate_left(items: Sequence[int], k: int) -> list[int]:
    """Rotate ``items`` left by ``k`` positions."""
    if not items:
        return []
    k %= len(items)
    return [*items[k:], *items[:k]]


def rotate_left_reversal(items: Sequence[int], k: int) -> list[int]:
    """Rotate left by ``k`` using the three-reversal method."""
    if not items:
        return []
    k %= len(items)
    staged = [*reversed(items[:k]), *reversed(items[k:])]
    return staged[::-1]


def rotate_right(items: Sequence[int], k: int) -> list[int]:
    """Rotate ``items`` right by ``k`` positions."""
    if not items:
        return []
    split = len(items) - k % len(items)
    return [*items[split:], *items[:split]]


def rotate_right_reversal(items: Sequence[int], k: int) -> list[int]:
    """Rotate right by ``k`` using the three-reversal method."""
    if not items:
        return []
    split = len(items) - k % len(items)
    staged = [*reversed(items[:split]), *reversed(items[split:])]
    return staged[::-1]


def merge_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list; ties favour ``a``."""
    return list(heapq.merge(a, b))


def remove_adjacent_duplicates(items: Sequence[int]) -> list[int]:
    """Collapse runs of equal neighbours; on sorted input this drops all duplicates."""
    return [key for key, _ in groupby(items)]