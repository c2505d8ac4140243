"""Points and triangles in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def cross(self, other: Point) -> float:
        """Determinant of the two position vectors."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def perimeter(self) -> float:
        return self.a.distance(self.b) + self.b.distance(self.c) + self.c.distance(self.a)

    def area(self) -> float:
        """Area by the shoelace formula."""
        return abs(self.a.cross(self.b) + self.b.cross(self.c) + self.c.cross(self.a)) / 2