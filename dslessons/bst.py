"""An ordered set kept in an unbalanced binary search tree."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


class TreeSet(Generic[T]):
    """A set of distinct items iterated in the order given by ``less``."""

    __slots__ = ("_less", "_root", "_size")

    def __init__(
        self,
        items: Iterable[T] = (),
        less: Callable[[T, T], bool] = operator.lt,
    ) -> None:
        self._less = less
        self._root: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.add(item)

    def _find(self, item: T) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        parent = None
        node = self._root
        while node is not None and node.value != item:
            parent = node
            node = node.left if self._less(item, node.value) else node.right
        return parent, node

    def add(self, item: T) -> None:
        """Add ``item`` unless an equal item is already present."""
        parent, node = self._find(item)
        if node is not None:
            return
        new = _Node(item)
        if parent is None:
            self._root = new
        elif self._less(item, parent.value):
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def _replace_child(
        self, parent: Optional[_Node[T]], old: _Node[T], new: Optional[_Node[T]]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def discard(self, item: T) -> None:
        """Remove ``item`` if present."""
        parent, node = self._find(item)
        if node is None:
            return
        if node.left is None:
            self._replace_child(parent, node, node.right)
        elif node.right is None:
            self._replace_child(parent, node, node.left)
        else:
            before, greatest = node, node.left
            while greatest.right is not None:
                before, greatest = greatest, greatest.right
            node.value = greatest.value
            if before is node:
                node.left = greatest.left
            else:
                before.right = greatest.left
        self._size -= 1

    def __contains__(self, item: object) -> bool:
        return self._find(item)[1] is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        pending: list[_Node[T]] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"TreeSet({list(self)!r})"