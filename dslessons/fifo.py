"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue. Iteration runs from the front to the back."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def push(self, item: T) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> T:
        """Return the front item."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> T:
        """Return the back item."""
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"