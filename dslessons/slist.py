"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional[_Node[T]] = None) -> None:
        self.value = value
        self.next = next_node


class SList(Generic[T]):
    """A singly linked list with head and tail pointers."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, count: int = 0, value: Any = None) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for _ in range(count):
            self.push_front(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("list index out of range")

    def push_front(self, item: T) -> None:
        self._head = _Node(item, self._head)
        if self._size == 0:
            self._tail = self._head
        self._size += 1

    def push_back(self, item: T) -> None:
        if self._size == 0:
            self.push_front(item)
            return
        node = _Node(item)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        node = self._tail
        if self._size == 1:
            self._head = self._tail = None
        else:
            before = self._node_at(self._size - 2)
            before.next = None
            self._tail = before
        self._size -= 1
        return node.value

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.value

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back of empty list")
        return self._tail.value

    def sort(self) -> None:
        """Sort the items in ascending order in place."""
        for first in self._nodes():
            second = first.next
            while second is not None:
                if first.value > second.value:
                    first.value, second.value = second.value, first.value
                second = second.next

    def erase(self, index: int) -> None:
        """Remove the item at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError("erase position out of range")
        if index == 0:
            self.pop_front()
        elif index == self._size - 1:
            self.pop_back()
        else:
            before = self._node_at(index - 1)
            before.next = before.next.next
            self._size -= 1

    def insert(self, index: int, item: T) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError("insert position out of range")
        if index == 0:
            self.push_front(item)
        elif index == self._size:
            self.push_back(item)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"