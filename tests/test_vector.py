import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslessons.vector import Vector


def test_insert_in_middle():
    base = [4, 7, 2, 8, 1, 6, 9, 3, 5]
    vector = Vector()
    for value in base:
        vector.push_back(value)
    vector.insert(4, 10)
    expected = list(base)
    expected.insert(4, 10)
    assert list(vector) == expected
    assert vector[4] == 10


def test_resize_push_and_ends():
    vector = Vector()
    for value in (7, 2, 8, 1):
        vector.push_back(value)
    vector.resize(10, 3)
    vector.push_back(-2)
    assert len(vector) == 11
    assert list(vector)[4:10] == [3] * 6
    assert vector.front() == 7
    assert vector.back() == -2


def test_capacity_growth_rule():
    vector = Vector()
    for i in range(20):
        before = vector.capacity()
        full = len(vector) == before
        vector.push_back(i)
        assert vector.capacity() == (2 * before + 1 if full else before)
        assert vector.capacity() >= len(vector)


def test_constructor_capacity_and_shrink():
    vector = Vector(5, 9)
    assert vector.capacity() == 5
    vector.resize(2)
    assert list(vector) == [9, 9]
    assert vector.capacity() == 5


def test_erase_and_pop_back():
    vector = Vector()
    for value in (1, 2, 3, 4):
        vector.push_back(value)
    vector.erase(1)
    assert list(vector) == [1, 3, 4]
    assert vector.pop_back() == 4
    assert list(vector) == [1, 3]


def test_errors():
    vector = Vector()
    with pytest.raises(IndexError):
        vector.pop_back()
    with pytest.raises(IndexError):
        vector.front()
    with pytest.raises(IndexError):
        vector.back()
    with pytest.raises(IndexError):
        vector.erase(0)
    with pytest.raises(IndexError):
        vector.insert(1, 5)
    with pytest.raises(ValueError):
        Vector(-1)
    with pytest.raises(ValueError):
        vector.resize(-3)
    vector.push_back(1)
    with pytest.raises(TypeError):
        vector[0:1] = [2, 3]


@given(st.lists(st.integers()), st.integers(min_value=0), st.integers())
def test_insert_matches_list(values, position, item):
    vector = Vector()
    for value in values:
        vector.push_back(value)
    index = position % (len(values) + 1)
    vector.insert(index, item)
    expected = list(values)
    expected.insert(index, item)
    assert list(vector) == expected
    assert vector.capacity() >= len(vector)