"""Small queue, stack and greedy exercises."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_NAMES = (
    "dangdungcntt",
    "tienquanutc",
    "quang123",
    "maianh",
    "nguyenminhduc2820",
)


@dataclass
class Student:
    name: str
    age: int
    score: float

    @classmethod
    def parse(cls, text: str) -> Student:
        """Read the name from the first line, then the age and score."""
        name, _, rest = text.partition("\n")
        fields = rest.split()
        if len(fields) < 2:
            raise ValueError("expected a name line followed by age and score")
        return cls(name, int(fields[0]), float(fields[1]))


def boxes_needed(sizes: Iterable[int]) -> int:
    """Fewest boxes of capacity 4 that hold groups of sizes 1 to 4, no group split."""
    counts = Counter()
    for size in sizes:
        if not 1 <= size <= 4:
            raise ValueError(f"group size {size} is not between 1 and 4")
        counts[size] += 1
    boxes = counts[4] + counts[3] + (counts[2] + 1) // 2
    singles = counts[1] - counts[3]
    if counts[2] % 2:
        singles -= 2
    if singles > 0:
        boxes += (singles + 3) // 4
    return boxes


def josephus(n: int, k: int) -> int:
    """Survivor when people ``1..n`` stand in a circle and every ``k``-th leaves."""
    if n < 1:
        raise ValueError("n must be at least 1")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-(max(k - 1, 0) % len(circle)))
        circle.popleft()
    return circle[0]


def doubling_queue(n: int, names: Sequence[str] = DEFAULT_NAMES) -> str:
    """Who takes the ``n``-th turn when each person, after a turn, rejoins with twice the turns."""
    if not names:
        raise ValueError("names must not be empty")
    queue = deque((name, 1) for name in names)
    while n > queue[0][1]:
        name, turns = queue.popleft()
        queue.append((name, turns * 2))
        n -= turns
    return queue[0][0]


def cloning_queue(n: int, names: Sequence[str] = DEFAULT_NAMES) -> str:
    """Who takes the ``n``-th turn when each person, after a turn, rejoins twice."""
    if not names:
        raise ValueError("names must not be empty")
    if n < 1:
        raise ValueError("n must be at least 1")
    queue = deque(names)
    for _ in range(n - 1):
        name = queue.popleft()
        queue.append(name)
        queue.append(name)
    return queue[0]


def nesting_dolls(sizes: Iterable[int], k: int) -> tuple[int, int]:
    """Nest dolls where one fits inside another at least ``k`` larger.

    Returns the number of outermost dolls and the sum of their sizes.
    """
    queue: deque[int] = deque()
    total = 0
    for size in sorted(sizes, reverse=True):
        queue.append(size)
        if queue[0] >= size + k:
            queue.popleft()
        else:
            total += size
    return len(queue), total


def sliding_window_max(values: Iterable[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[tuple[int, int]] = deque()
    result: list[int] = []
    for position, value in enumerate(values, start=1):
        while window and window[-1][0] <= value:
            window.pop()
        window.append((value, position))
        while position - window[0][1] >= k:
            window.popleft()
        if position >= k:
            result.append(window[0][0])
    return result


def largest_after_removal(digits: str, k: int) -> str:
    """Largest string left after deleting exactly ``k`` characters of ``digits``."""
    if not 0 <= k <= len(digits):
        raise ValueError("k must be between 0 and the length of the digits")
    kept: list[str] = []
    for char in digits:
        while kept and kept[-1] < char and k > 0:
            kept.pop()
            k -= 1
        kept.append(char)
    if k:
        del kept[-k:]
    return "".join(kept)


def center(text: str, width: int) -> str:
    """Pad ``text`` with the same number of spaces on each side to about ``width``."""
    if width < len(text):
        raise ValueError("width is smaller than the text")
    padding = " " * ((width - len(text)) // 2)
    return padding + text + padding


def right_align(text: str, width: int) -> str:
    """Pad ``text`` on the left to ``width`` characters."""
    return text.rjust(width)