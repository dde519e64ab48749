"""A bounded last-in, first-out stack of strings."""

from __future__ import annotations

CAPACITY = 100


class StackFullError(Exception):
    """Raised when pushing onto a stack that is at capacity."""


class Stack:
    """A LIFO stack holding at most ``CAPACITY`` elements."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the stack is at capacity."""
        return len(self._items) == CAPACITY

    def push(self, value: str) -> None:
        """Place ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> str:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> str:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]