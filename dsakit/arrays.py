"""Array algorithms that work on Python lists, mostly in place."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import groupby, pairwise


def left_rotate_one(items: MutableSequence[int]) -> None:
    """Rotate ``items`` left by one position, in place."""
    if not items:
        return
    first = items[0]
    del items[0]
    items.append(first)


def _reverse_range(items: MutableSequence[int], low: int, high: int) -> None:
    while low < high:
        items[low], items[high] = items[high], items[low]
        low += 1
        high -= 1


def left_rotate(items: MutableSequence[int], d: int) -> None:
    """Rotate ``items`` left by ``d`` positions in place, using three reversals.

    Raises ValueError unless ``0 <= d <= len(items)``.
    """
    n = len(items)
    if not 0 <= d <= n:
        raise ValueError(f"rotation {d} out of range for {n} items")
    _reverse_range(items, 0, d - 1)
    _reverse_range(items, d, n - 1)
    _reverse_range(items, 0, n - 1)


def max_consecutive_ones(items: Sequence[int]) -> int:
    """Length of the longest run of non-zero values."""
    return max(
        (sum(1 for _ in run) for nonzero, run in groupby(items, key=bool) if nonzero),
        default=0,
    )


def max_profit(prices: Sequence[int]) -> int:
    """Profit from buying before every rise and selling at its top."""
    return sum(later - earlier for earlier, later in pairwise(prices) if later > earlier)


def max_difference(items: Sequence[int]) -> int:
    """Largest ``items[j] - items[i]`` with ``j > i``.

    Raises ValueError when fewer than two items are given.
    """
    if len(items) < 2:
        raise ValueError("at least two items are needed")
    result = items[1] - items[0]
    lowest = items[0]
    for value in items[1:]:
        result = max(result, value - lowest)
        lowest = min(lowest, value)
    return result


def longest_even_odd(items: Sequence[int]) -> int:
    """Length of the longest run whose neighbours alternate in parity."""
    if not items:
        return 0
    best = current = 1
    for previous, value in pairwise(items):
        if previous % 2 != value % 2:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def majority_index(items: Sequence[int]) -> int:
    """Index of the majority candidate found by the voting algorithm.

    The candidate is not verified: if no value fills more than half of
    ``items`` the returned index is meaningless. Raises ValueError when empty.
    """
    if not items:
        raise ValueError("no items")
    candidate = 0
    count = 1
    for index in range(1, len(items)):
        count += 1 if items[candidate] == items[index] else -1
        if count == 0:
            candidate = index
            count = 1
    return candidate


def insert_at(items: MutableSequence[int], x: int, pos: int, capacity: int) -> int:
    """Insert ``x`` at 1-based position ``pos`` unless ``items`` is at capacity.

    Returns the resulting length. Raises IndexError for a position outside
    ``1..len(items) + 1``.
    """
    if len(items) >= capacity:
        return len(items)
    if not 1 <= pos <= len(items) + 1:
        raise IndexError(f"position {pos} out of range")
    items.insert(pos - 1, x)
    return len(items)


def delete_element(items: MutableSequence[int], x: int) -> int:
    """Remove the first occurrence of ``x``, if any; return the resulting length."""
    try:
        items.remove(x)  # type: ignore[attr-defined]
    except ValueError:
        pass
    return len(items)


def max_element(items: Sequence[int]) -> int:
    """Largest value. Raises ValueError when empty."""
    if not items:
        raise ValueError("no items")
    return max(items)


def second_max_index(items: Sequence[int]) -> int | None:
    """Index of the largest value strictly below the maximum, or None."""
    if not items:
        return None
    largest = 0
    result: int | None = None
    for index in range(1, len(items)):
        value = items[index]
        if value > items[largest]:
            result = largest
            largest = index
        elif value != items[largest] and (result is None or value > items[result]):
            result = index
    return result


def is_sorted(items: Sequence[int]) -> bool:
    """True when ``items`` is strictly increasing."""
    return all(earlier < later for earlier, later in pairwise(items))


def reverse_in_place(items: MutableSequence[int]) -> None:
    """Reverse ``items`` in place."""
    _reverse_range(items, 0, len(items) - 1)


def remove_duplicates(items: MutableSequence[int]) -> int:
    """Collapse equal neighbours of a sorted list in place; return the new length."""
    if not items:
        return 0
    kept = 1
    for value in items[1:]:
        if items[kept - 1] != value:
            items[kept] = value
            kept += 1
    del items[kept:]
    return kept


def move_zeros_to_end(items: MutableSequence[int]) -> None:
    """Move zeros to the end in place, keeping the other values in order."""
    filled = 0
    for index, value in enumerate(items):
        if value != 0:
            items[index], items[filled] = items[filled], items[index]
            filled += 1