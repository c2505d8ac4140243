"""Linear and binary search over sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Iterable[Any], target: Any) -> bool:
    """Tell whether ``target`` occurs among ``items``."""
    return any(item == target for item in items)


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        if items[middle] == target:
            return middle
        if items[middle] > target:
            high = middle - 1
        else:
            low = middle + 1
    return -1


def recursive_binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        middle = (low + high) // 2
        if items[middle] == target:
            return middle
        if target < items[middle]:
            return search(low, middle - 1)
        return search(middle + 1, high)

    return search(0, len(items) - 1)


def lower_bound(items: Sequence[Any], target: Any) -> int:
    """Index of the first item not less than ``target``."""
    return bisect.bisect_left(items, target)


def upper_bound(items: Sequence[Any], target: Any) -> int:
    """Index of the first item greater than ``target``."""
    return bisect.bisect_right(items, target)