"""Three stack implementations with a shared interface, plus draining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, TypeVar

T = TypeVar("T")


class StackOverflow(OverflowError):
    """Raised when pushing onto a full fixed-capacity stack."""


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """Stack with a fixed capacity set at construction."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list = []

    def push(self, x) -> None:
        """Push ``x``; raise StackOverflow when the stack is full."""
        if len(self._items) >= self.capacity:
            raise StackOverflow(f"stack is full at capacity {self.capacity}")
        self._items.append(x)

    def pop(self):
        """Remove and return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


class ListStack:
    """Unbounded stack backed by a Python list."""

    def __init__(self) -> None:
        self._items: list = []

    def push(self, x) -> None:
        self._items.append(x)

    def pop(self):
        """Remove and return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top value; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


@dataclass(eq=False)
class _Link:
    data: object
    next: _Link | None = None


class LinkedStack:
    """Unbounded stack backed by a chain of linked nodes."""

    def __init__(self) -> None:
        self._head: _Link | None = None
        self._size = 0

    def push(self, x) -> None:
        self._head = _Link(x, self._head)
        self._size += 1

    def pop(self):
        """Remove and return the top value; raise StackUnderflow when empty."""
        if self._head is None:
            raise StackUnderflow("pop from empty stack")
        top = self._head
        self._head = top.next
        self._size -= 1
        return top.data

    def peek(self):
        """Return the top value; raise StackUnderflow when empty."""
        if self._head is None:
            raise StackUnderflow("peek at empty stack")
        return self._head.data

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None


class _Stack(Protocol):
    def pop(self): ...

    def is_empty(self) -> bool: ...


def drain(stack: _Stack) -> Iterator:
    """Pop and yield every value of ``stack``, top first, until it is empty."""
    while not stack.is_empty():
        yield stack.pop()