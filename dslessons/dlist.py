"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: T,
        prev: Optional[_Node[T]] = None,
        next_node: Optional[_Node[T]] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next_node


class DList(Generic[T]):
    """A doubly linked list that can be walked in both directions."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, count: int = 0, value: Any = 0) -> None:
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
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def push_front(self, item: T) -> None:
        node = _Node(item, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, item: T) -> None:
        if self._tail is None:
            self.push_front(item)
            return
        node = _Node(item, self._tail, None)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
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

    def sort(self, ascending: bool = True) -> None:
        """Sort the items in place, ascending by default."""
        for first in self._nodes():
            second = first.next
            while second is not None:
                if (first.value > second.value) == ascending:
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
            node = self._node_at(index)
            node.prev.next = node.next
            node.next.prev = node.prev
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
            after = self._node_at(index)
            before = after.prev
            node = _Node(item, before, after)
            before.next = node
            after.prev = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DList({list(self)!r})"