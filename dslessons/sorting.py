"""Comparison sorts driven by a strict ``less`` predicate.

Every function takes any iterable and returns a new list ordered so that
no item is ``less`` than the one before it. The default ``less`` is ``<``,
which gives ascending order; ``operator.gt`` gives descending order.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]


def _truncated_parity(n: int) -> int:
    """Remainder of ``n`` by 2 taking the sign of ``n`` (-1, 0 or 1)."""
    remainder = abs(n) % 2
    return -remainder if n < 0 else remainder


def parity_less(a: int, b: int) -> bool:
    """Order even numbers before odd ones, each group ascending.

    The parity is the truncated remainder, so negative odd numbers
    sort ahead of the even ones.
    """
    pa, pb = _truncated_parity(a), _truncated_parity(b)
    if pa == pb:
        return a < b
    return pa < pb


def odd_desc_even_asc_less(a: int, b: int) -> bool:
    """Order even numbers ascending first, then odd numbers descending."""
    pa, pb = _truncated_parity(a), _truncated_parity(b)
    if pa == pb:
        return a > b if pa else a < b
    return pa < pb


def bubble_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by bubbling the smallest remaining item down to the front."""
    result = list(items)
    size = len(result)
    for i in range(size):
        for j in range(size - 1, i, -1):
            if less(result[j], result[j - 1]):
                result[j], result[j - 1] = result[j - 1], result[j]
    return result


def exchange_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by swapping each position with any later item that is less."""
    result = list(items)
    size = len(result)
    for i in range(size):
        for j in range(i + 1, size):
            if less(result[j], result[i]):
                result[i], result[j] = result[j], result[i]
    return result


def insertion_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and less(current, result[j]):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by moving the least remaining item into each position in turn."""
    result = list(items)
    size = len(result)
    for i in range(size):
        best = i
        for j in range(i + 1, size):
            if less(result[j], result[best]):
                best = j
        result[i], result[best] = result[best], result[i]
    return result


def _merge_sorted(values: list[T], less: Less) -> list[T]:
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    left = _merge_sorted(values[:middle], less)
    right = _merge_sorted(values[middle:], less)
    merged: list[T] = []
    i = j = 0
    while i < len(left) or j < len(right):
        if j >= len(right) or (i < len(left) and less(left[i], right[j])):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    return merged


def merge_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by splitting in halves and merging the sorted halves."""
    return _merge_sorted(list(items), less)


def quick_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by partitioning around the middle item of each range."""
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        low, high = pending.pop()
        if low >= high - 1:
            continue
        middle = (low + high) // 2
        result[low], result[middle] = result[middle], result[low]
        boundary = low
        for j in range(low + 1, high):
            if less(result[j], result[low]):
                boundary += 1
                result[boundary], result[j] = result[j], result[boundary]
        result[low], result[boundary] = result[boundary], result[low]
        pending.append((low, boundary))
        pending.append((boundary + 1, high))
    return result


def _sift_down(values: list[T], start: int, end: int, less: Less) -> None:
    parent = start
    while True:
        child = 2 * parent + 1
        if child >= end:
            return
        if child + 1 < end and less(values[child], values[child + 1]):
            child += 1
        if not less(values[parent], values[child]):
            return
        values[parent], values[child] = values[child], values[parent]
        parent = child


def heap_sort(items: Iterable[T], less: Less = operator.lt) -> list[T]:
    """Sort by building a heap and repeatedly moving its top to the end."""
    result = list(items)
    size = len(result)
    for start in range(size - 1, -1, -1):
        _sift_down(result, start, size, less)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end, less)
    return result