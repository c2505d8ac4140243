"""The divisor game tree: from ``n`` each divisor pair ``a * b`` leads to ``(a - 1) * (b + 1)``."""

from __future__ import annotations

from collections.abc import Iterator


def _small_divisors(n: int) -> Iterator[int]:
    a = 1
    while a * a <= n:
        if n % a == 0:
            yield a
        a += 1


def _moves(n: int) -> Iterator[int]:
    for a in _small_divisors(n):
        yield (a - 1) * (n // a + 1)


class DivisorTree:
    """The full tree of moves starting from ``value``."""

    __slots__ = ("value", "children")

    def __init__(self, value: int) -> None:
        self.value = value
        self.children: tuple[DivisorTree, ...] = tuple(
            DivisorTree(move) for move in _moves(value)
        )

    def pre_order(self) -> Iterator[int]:
        """Yield values node first, then each child's subtree."""
        yield self.value
        for child in self.children:
            yield from child.pre_order()

    def in_order(self) -> Iterator[int]:
        """Yield the first child's subtree, the node, then the other children."""
        if self.children:
            yield from self.children[0].in_order()
        yield self.value
        for child in self.children[1:]:
            yield from child.in_order()

    def post_order(self) -> Iterator[int]:
        """Yield each child's subtree, then the node."""
        for child in self.children:
            yield from child.post_order()
        yield self.value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return 1 + max((child.height() for child in self.children), default=0)

    def total(self) -> int:
        """Sum of all values in the tree."""
        return self.value + sum(child.total() for child in self.children)

    def max_children(self) -> int:
        """Largest number of children of any node."""
        return max(
            (child.max_children() for child in self.children),
            default=0,
        ) if not self.children else max(
            len(self.children), *(child.max_children() for child in self.children)
        )


def reaches(start: int, target: int) -> bool:
    """Tell whether some sequence of one or more moves leads from ``start`` to ``target``."""
    visited = {start}
    pending = [start]
    while pending:
        current = pending.pop()
        for move in _moves(current):
            if move not in visited and move >= target:
                visited.add(move)
                pending.append(move)
                if move == target:
                    return True
    return False