"""Searching in sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target < items[mid]:
            end = mid - 1
        elif target > items[mid]:
            start = mid + 1
        else:
            return mid
    return None


def recursive_binary_search(items: Sequence[int], target: int) -> int | None:
    """Recursive binary search; returns an index of ``target`` or None."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if target < items[mid]:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((i for i, item in enumerate(items) if item == target), None)


def pair_sum(items: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find indices ``(i, j)``, ``i < j``, in sorted ``items`` summing to ``target``."""
    i, j = 0, len(items) - 1
    while i < j:
        total = items[i] + items[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None