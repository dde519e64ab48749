"""A bounded set of strings that keeps insertion order."""

from __future__ import annotations

from typing import Iterator

from konsolgame.scoremap import MAX_ELEMENTS


class StringSet:
    """Holds distinct strings, at most ``MAX_ELEMENTS`` of them."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        """Return True when the set holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the set is at capacity."""
        return len(self._items) == MAX_ELEMENTS

    def insert(self, item: str) -> None:
        """Add ``item`` unless it is already a member."""
        if item in self._items:
            return
        if self.is_full():
            raise OverflowError("set is full")
        self._items.append(item)

    def delete(self, item: str) -> None:
        """Remove ``item`` if it is a member."""
        if item in self._items:
            self._items.remove(item)