"""Elementary comparison sorts and a merge of two sorted sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def bubble_sort(items: MutableSequence[int]) -> None:
    """Sort in place, stopping early once a pass makes no swap."""
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def selection_sort(items: MutableSequence[int]) -> None:
    """Sort in place by repeatedly selecting the smallest remaining value."""
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]


def insertion_sort(items: MutableSequence[int]) -> None:
    """Sort in place by inserting each value into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def merge_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list; ties take from ``a`` first."""
    merged: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged