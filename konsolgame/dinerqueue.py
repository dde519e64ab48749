"""Dishes, the list of dishes in the kitchen, and the queue of orders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from konsolgame.stringqueue import QueueFullError

IDX_MIN = 0
IDX_MAX = 100
IDX_UNDEF = -1
CAPACITY = 100


@dataclass
class Dish:
    """One ordered dish and its timers."""

    food_id: int
    duration: int
    durability: int
    price: int


class DishList:
    """An ordered, bounded list of dishes."""

    def __init__(self) -> None:
        self._items: list[Dish] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Dish]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Dish:
        return self._items[index]

    def is_empty(self) -> bool:
        """Return True when the list holds no dishes."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the list has reached its nominal size."""
        return len(self._items) == IDX_MAX

    def add(self, dish: Dish) -> None:
        """Append ``dish`` at the end of the list."""
        if len(self._items) == IDX_MAX - IDX_MIN + 1:
            raise OverflowError("dish list is full")
        self._items.append(dish)

    def remove_at(self, index: int) -> Dish:
        """Remove and return the dish at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"remove position {index} out of range")
        return self._items.pop(index)

    def search_id(self, food_id: int) -> int:
        """Return the position of the first dish with ``food_id``, or -1."""
        return next(
            (i for i, dish in enumerate(self._items) if dish.food_id == food_id),
            IDX_UNDEF,
        )


class OrderQueue:
    """A FIFO queue of ordered dishes holding at most ``CAPACITY`` of them."""

    def __init__(self) -> None:
        self._items: deque[Dish] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Dish]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        """Return True when no orders are waiting."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the queue is at capacity."""
        return len(self._items) == CAPACITY

    def head(self) -> Dish:
        """Return the oldest order without removing it."""
        if not self._items:
            raise IndexError("head of empty queue")
        return self._items[0]

    def enqueue(self, dish: Dish) -> None:
        """Add ``dish`` at the tail of the queue."""
        if self.is_full():
            raise QueueFullError("order queue is full")
        self._items.append(dish)

    def dequeue(self) -> Dish:
        """Remove and return the oldest order."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def search_id(self, food_id: int) -> int:
        """Return the position from the head of the order ``food_id``, or -1."""
        return next(
            (i for i, dish in enumerate(self._items) if dish.food_id == food_id),
            IDX_UNDEF,
        )