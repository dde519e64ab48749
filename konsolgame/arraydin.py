"""A growable array of strings."""

from __future__ import annotations


class DynamicArray:
    """An ordered, growable sequence of strings."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __str__(self) -> str:
        return "[" + ", ".join(self._items) + "]"

    def is_empty(self) -> bool:
        """Return True when the array holds no elements."""
        return not self._items

    def insert_at(self, element: str, index: int) -> None:
        """Insert ``element`` at position ``index`` (0..len)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        self._items.insert(index, element)

    def insert_last(self, element: str) -> None:
        """Append ``element`` at the end."""
        self._items.append(element)

    def insert_first(self, element: str) -> None:
        """Insert ``element`` at the front."""
        self._items.insert(0, element)

    def delete_at(self, index: int) -> str:
        """Remove and return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete position {index} out of range")
        return self._items.pop(index)

    def delete_last(self) -> str:
        """Remove and return the last element."""
        return self.delete_at(len(self._items) - 1)

    def delete_first(self) -> str:
        """Remove and return the first element."""
        return self.delete_at(0)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def copy(self) -> DynamicArray:
        """Return an independent copy of the array."""
        duplicate = DynamicArray()
        duplicate._items = list(self._items)
        return duplicate

    def search(self, element: str) -> int:
        """Return the index of the first equal element, or -1."""
        try:
            return self._items.index(element)
        except ValueError:
            return -1