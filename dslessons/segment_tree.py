"""A segment tree answering range-maximum queries."""

from __future__ import annotations

import math


class MaxSegmentTree:
    """Positions ``1..size``, each starting at negative infinity.

    ``update`` raises a position to at least the given value; ``query``
    returns the maximum over an inclusive range of positions.
    """

    __slots__ = ("_size", "_tree")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._tree: list[float] = [-math.inf] * (4 * size)

    def update(self, index: int, value: float) -> None:
        """Set position ``index`` to the larger of its value and ``value``."""
        if not 1 <= index <= self._size:
            raise IndexError("position out of range")
        node, low, high = 1, 1, self._size + 1
        while True:
            self._tree[node] = max(self._tree[node], value)
            if low + 1 >= high:
                return
            middle = (low + high) // 2
            if index < middle:
                node, high = 2 * node, middle
            else:
                node, low = 2 * node + 1, middle

    def query(self, left: int, right: int) -> float:
        """Return the maximum over positions ``left..right`` inclusive."""
        if not 1 <= left <= right <= self._size:
            raise IndexError("range out of bounds")
        return self._get(1, 1, self._size + 1, left, right + 1)

    def _get(self, node: int, low: int, high: int, start: int, stop: int) -> float:
        if low == start and high == stop:
            return self._tree[node]
        middle = (low + high) // 2
        if middle >= stop:
            return self._get(2 * node, low, middle, start, stop)
        if middle <= start:
            return self._get(2 * node + 1, middle, high, start, stop)
        return max(
            self._get(2 * node, low, middle, start, middle),
            self._get(2 * node + 1, middle, high, middle, stop),
        )