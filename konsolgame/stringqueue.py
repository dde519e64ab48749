"""A bounded first-in, first-out queue of strings."""

from __future__ import annotations

from collections import deque
from typing import Iterator

CAPACITY = 100

_EMPTY_INDENT = " " * 80
_ITEM_INDENT = " " * 66


class QueueFullError(Exception):
    """Raised when enqueueing onto a queue that is at capacity."""


class StringQueue:
    """A FIFO queue holding at most ``CAPACITY`` strings."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the queue is at capacity."""
        return len(self._items) == CAPACITY

    def enqueue(self, value: str) -> None:
        """Add ``value`` at the tail of the queue."""
        if self.is_full():
            raise QueueFullError("Queue is full!")
        self._items.append(value)

    def dequeue(self) -> str:
        """Remove and return the element at the head of the queue."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def display(self) -> str:
        """Return the queue as a numbered listing, one element per entry."""
        if not self._items:
            return f"\n{_EMPTY_INDENT}Antrean Kosong.\n"
        return "".join(
            f"\n{_ITEM_INDENT}{number}. {item}\n"
            for number, item in enumerate(self._items, start=1)
        )