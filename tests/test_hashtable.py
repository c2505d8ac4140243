import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslessons.hashtable import HashTable


def test_bucket_order_of_example():
    table = HashTable(9)
    for value in (68, 73, 92, 54, 61, 40, 25):
        table.insert(value)
    assert list(table) == [54, 73, 92, 40, 68, 25, 61]
    table.erase(61)
    table.erase(40)
    assert list(table) == [54, 73, 92, 68, 25]
    assert len(table) == 5


def test_duplicates_are_counted():
    table = HashTable(5)
    table.insert(3)
    table.insert(3)
    assert len(table) == 2
    table.erase(3)
    assert 3 in table
    table.erase(3)
    assert 3 not in table
    assert len(table) == 0


def test_erase_missing_is_noop():
    table = HashTable(4)
    table.insert(1)
    table.erase(99)
    assert list(table) == [1]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HashTable(0)


def test_string_items():
    table = HashTable()
    for word in ("ha", "noi", "ha"):
        table.insert(word)
    assert "noi" in table
    assert sorted(table) == ["ha", "ha", "noi"]


@given(st.lists(st.integers(-500, 500)), st.integers(1, 20))
def test_holds_inserted_multiset(values, capacity):
    table = HashTable(capacity)
    for value in values:
        table.insert(value)
    assert sorted(table) == sorted(values)
    assert len(table) == len(values)
    for value in values:
        table.erase(value)
    assert len(table) == 0
    assert list(table) == []