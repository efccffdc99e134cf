"""Singly linked list nodes and functions that return the new head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NOT_FOUND = -1


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    data: int
    next: Node | None = None


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order; return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Node | None) -> Iterator[int]:
    """Yield the values of the list from ``head`` onwards."""
    curr = head
    while curr is not None:
        yield curr.data
        curr = curr.next


def insert_at_head(head: Node | None, x: int) -> Node:
    """Put ``x`` in front of the list; return the new head."""
    return Node(x, head)


def insert_at_tail(head: Node | None, x: int) -> Node:
    """Append ``x`` to the list; return the head."""
    node = Node(x)
    if head is None:
        return node
    curr = head
    while curr.next is not None:
        curr = curr.next
    curr.next = node
    return head


def delete_head(head: Node | None) -> Node | None:
    """Remove the first node; return the new head."""
    return None if head is None else head.next


def delete_tail(head: Node | None) -> Node | None:
    """Remove the last node; return the head."""
    if head is None or head.next is None:
        return None
    curr = head
    while curr.next.next is not None:
        curr = curr.next
    curr.next = None
    return head


def insert_at_position(head: Node | None, pos: int, x: int) -> Node | None:
    """Insert ``x`` so that it becomes the node at 1-based ``pos``.

    A position past one beyond the end leaves the list unchanged.
    Raises ValueError when ``pos`` is below 1.
    """
    if pos < 1:
        raise ValueError(f"position must be at least 1, got {pos}")
    if pos == 1:
        return Node(x, head)
    curr = head
    for _ in range(pos - 2):
        if curr is None:
            break
        curr = curr.next
    if curr is None:
        return head
    curr.next = Node(x, curr.next)
    return head


def search_position(head: Node | None, x: int) -> int:
    """1-based position of the first node holding ``x``, or -1."""
    for pos, value in enumerate(iter_values(head), start=1):
        if value == x:
            return pos
    return NOT_FOUND