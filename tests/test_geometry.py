import itertools

import pytest
from hypothesis import given, strategies as st

from dslessons.geometry import Point, Triangle

coords = st.integers(-1000, 1000)
points = st.builds(Point, coords, coords)


def test_distance_pythagorean():
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5)


@given(coords, coords, coords, coords)
def test_distance_symmetric(px, py, qx, qy):
    p = Point(px, py)
    q = Point(qx, qy)
    assert p.distance(q) == pytest.approx(q.distance(p))
    assert p.distance(p) == 0


@given(coords, coords, coords, coords)
def test_cross_antisymmetric(px, py, qx, qy):
    p = Point(px, py)
    q = Point(qx, qy)
    assert p.cross(q) == -q.cross(p)
    assert p.cross(p) == 0


def test_right_triangle():
    triangle = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    assert triangle.area() == pytest.approx(6)
    assert triangle.perimeter() == pytest.approx(12)


@given(points, points, points)
def test_area_independent_of_vertex_order(p, q, r):
    area = Triangle(p, q, r).area()
    perimeter = Triangle(p, q, r).perimeter()
    for a, b, c in itertools.permutations((p, q, r)):
        assert Triangle(a, b, c).area() == pytest.approx(area)
        assert Triangle(a, b, c).perimeter() == pytest.approx(perimeter)


@given(points, st.integers(-50, 50), st.integers(-50, 50))
def test_collinear_has_no_area(p, dx, dy):
    q = Point(p.x + dx, p.y + dy)
    r = Point(p.x + 2 * dx, p.y + 2 * dy)
    assert Triangle(p, q, r).area() == 0