"""A growable array that tracks its own capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """A dynamic array. Capacity grows to ``2 * capacity + 1`` when full."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, size: int = 0, fill: Any = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items: list[T] = [fill] * size
        self._capacity = size

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 2 * self._capacity + 1

    def push_back(self, item: T) -> None:
        """Append ``item`` at the end."""
        self._grow_if_full()
        self._items.append(item)

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def insert(self, index: int, item: T) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        self._grow_if_full()
        self._items.insert(index, item)

    def erase(self, index: int) -> None:
        """Remove the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("erase position out of range")
        del self._items[index]

    def resize(self, size: int, fill: Any = 0) -> None:
        """Change the size, filling new slots with ``fill``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self._capacity < size:
            self._capacity = size
        current = len(self._items)
        if size < current:
            del self._items[size:]
        else:
            self._items.extend([fill] * (size - current))

    def capacity(self) -> int:
        """Number of items the vector can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported")
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"