"""A priority queue kept in a size-balanced binary heap tree."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "size", "left", "right")

    def __init__(
        self,
        value: T,
        left: Optional[_Node[T]] = None,
        right: Optional[_Node[T]] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right
        self.size = 1 + (left.size if left else 0) + (right.size if right else 0)


class PriorityQueue(Generic[T]):
    """A heap-ordered queue whose top is the greatest item under ``less``.

    With the default ``less`` (``<``) the largest item comes out first;
    pass ``operator.gt`` to get the smallest first.
    """

    __slots__ = ("_less", "_root")

    def __init__(self, less: Callable[[T, T], bool] = operator.lt) -> None:
        self._less = less
        self._root: Optional[_Node[T]] = None

    def push(self, item: T) -> None:
        """Add ``item`` to the queue."""
        parent: Optional[_Node[T]] = None
        side = ""
        node = self._root
        while True:
            if node is None:
                new = _Node(item)
                break
            if self._less(node.value, item):
                new = _Node(item, node)
                break
            node.size += 1
            if node.left is None:
                node.left = _Node(item)
                return
            if node.right is None:
                node.right = _Node(item)
                return
            parent = node
            if node.left.size < node.right.size:
                side, node = "left", node.left
            else:
                side, node = "right", node.right
        if parent is None:
            self._root = new
        elif side == "left":
            parent.left = new
        else:
            parent.right = new

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._root is None:
            raise IndexError("pop from empty priority queue")
        result = self._root.value
        parent: Optional[_Node[T]] = None
        side = ""
        node = self._root
        while True:
            if node.size == 1:
                replacement = None
            elif node.left is None:
                replacement = node.right
            elif node.right is None:
                replacement = node.left
            else:
                node.size -= 1
                parent = node
                if self._less(node.left.value, node.right.value):
                    node.value = node.right.value
                    side, node = "right", node.right
                else:
                    node.value = node.left.value
                    side, node = "left", node.left
                continue
            break
        if parent is None:
            self._root = replacement
        elif side == "left":
            parent.left = replacement
        else:
            parent.right = replacement
        return result

    def top(self) -> T:
        """Return the top item without removing it."""
        if self._root is None:
            raise IndexError("top of empty priority queue")
        return self._root.value

    def __len__(self) -> int:
        return self._root.size if self._root else 0

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self)})"