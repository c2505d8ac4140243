"""A hash table that resolves collisions by chaining."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class HashTable(Generic[T]):
    """A fixed number of buckets; equal items may be stored more than once.

    Within a bucket the most recently inserted item comes first.
    """

    __slots__ = ("_buckets", "_size")

    def __init__(self, capacity: int = 1234) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        # each bucket is kept oldest-first; iteration walks it newest-first
        self._buckets: list[list[T]] = [[] for _ in range(capacity)]
        self._size = 0

    def _bucket(self, item: T) -> list[T]:
        return self._buckets[hash(item) % len(self._buckets)]

    def insert(self, item: T) -> None:
        """Store ``item``."""
        self._bucket(item).append(item)
        self._size += 1

    def erase(self, item: T) -> None:
        """Remove the most recently inserted copy of ``item``, if any."""
        bucket = self._bucket(item)
        for position in range(len(bucket) - 1, -1, -1):
            if bucket[position] == item:
                del bucket[position]
                self._size -= 1
                return

    def __contains__(self, item: object) -> bool:
        return item in self._bucket(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from reversed(bucket)

    def __repr__(self) -> str:
        return f"HashTable({list(self)!r})"