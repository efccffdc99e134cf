"""Doubly linked list nodes and functions that return the new head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class DNode:
    """A doubly linked list node."""

    data: int
    prev: DNode | None = field(default=None, repr=False)
    next: DNode | None = None


def from_iterable(values: Iterable[int]) -> DNode | None:
    """Build a list holding ``values`` in order; return its head."""
    head: DNode | None = None
    tail: DNode | None = None
    for value in values:
        node = DNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: DNode | None) -> Iterator[int]:
    """Yield the values of the list from ``head`` onwards."""
    curr = head
    while curr is not None:
        yield curr.data
        curr = curr.next


def insert_at_begin(head: DNode | None, x: int) -> DNode:
    """Put ``x`` in front of the list; return the new head."""
    node = DNode(x, next=head)
    if head is not None:
        head.prev = node
    return node


def insert_at_end(head: DNode | None, x: int) -> DNode:
    """Append ``x`` to the list; return the head."""
    node = DNode(x)
    if head is None:
        return node
    curr = head
    while curr.next is not None:
        curr = curr.next
    curr.next = node
    node.prev = curr
    return head


def reverse(head: DNode | None) -> DNode | None:
    """Reverse the list in place by swapping links; return the new head."""
    new_head = head
    curr = head
    while curr is not None:
        curr.prev, curr.next = curr.next, curr.prev
        new_head = curr
        curr = curr.prev
    return new_head


def delete_head(head: DNode | None) -> DNode | None:
    """Remove the first node; return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.prev = None
    head.next = None
    return new_head


def delete_tail(head: DNode | None) -> DNode | None:
    """Remove the last node; return the head."""
    if head is None or head.next is None:
        return None
    curr = head
    while curr.next is not None:
        curr = curr.next
    curr.prev.next = None
    curr.prev = None
    return head