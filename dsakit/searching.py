"""Binary-search based lookups on sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1


def binary_search(items: Sequence[int], target: int) -> int:
    """Index of some occurrence of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def first_occurrence(items: Sequence[int], target: int) -> int:
    """Index of the first occurrence of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] < target:
            low = mid + 1
        elif items[mid] > target:
            high = mid - 1
        elif mid == 0 or items[mid - 1] != items[mid]:
            return mid
        else:
            high = mid - 1
    return NOT_FOUND


def last_occurrence(items: Sequence[int], target: int) -> int:
    """Index of the last occurrence of ``target`` in sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] < target:
            low = mid + 1
        elif items[mid] > target:
            high = mid - 1
        elif mid == len(items) - 1 or items[mid + 1] != items[mid]:
            return mid
        else:
            low = mid + 1
    return NOT_FOUND


def count_occurrences(items: Sequence[int], target: int) -> int:
    """Number of times ``target`` occurs in sorted ``items``."""
    first = first_occurrence(items, target)
    if first == NOT_FOUND:
        return 0
    return last_occurrence(items, target) - first + 1


def count_ones(items: Sequence[int]) -> int:
    """Number of ones in a sorted sequence of zeros followed by ones."""
    first = first_occurrence(items, 1)
    if first == NOT_FOUND:
        return 0
    return len(items) - first


def sqrt_floor(x: int) -> int:
    """Largest integer whose square does not exceed ``x``.

    Raises ValueError for negative ``x``.
    """
    if x < 0:
        raise ValueError("square root of a negative number")
    low, high, answer = 1, x, 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square > x:
            high = mid - 1
        else:
            low = mid + 1
            answer = mid
    return answer