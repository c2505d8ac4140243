import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslessons.slist import SList


def _build_example():
    items = SList(5, 4)
    model = [4] * 5
    for i in range(1, 10):
        if i % 2:
            items.push_front(i)
            model.insert(0, i)
        else:
            items.push_back(i)
            model.append(i)
    return items, model


def test_worked_example():
    items, model = _build_example()
    assert list(items) == model
    assert len(items) == len(model)
    assert items.front() == model[0]
    assert items.back() == model[-1]

    assert items.pop_back() == model.pop()
    assert items.pop_front() == model.pop(0)
    items.sort()
    model.sort()
    assert list(items) == model

    items.erase(3)
    del model[3]
    assert list(items) == model

    items.insert(4, -2)
    model.insert(4, -2)
    assert list(items) == model


def test_erase_ends_keep_tail_consistent():
    items = SList()
    for value in (1, 2, 3):
        items.push_back(value)
    items.erase(2)
    assert items.back() == 2
    items.push_back(9)
    assert list(items) == [1, 2, 9]
    items.erase(0)
    assert items.front() == 2


def test_empty_errors():
    items = SList()
    with pytest.raises(IndexError):
        items.pop_front()
    with pytest.raises(IndexError):
        items.pop_back()
    with pytest.raises(IndexError):
        items.front()
    with pytest.raises(IndexError):
        items.back()
    with pytest.raises(IndexError):
        items.erase(0)
    with pytest.raises(IndexError):
        items.insert(1, 0)
    with pytest.raises(ValueError):
        SList(-1, 0)


@given(
    st.lists(st.tuples(st.booleans(), st.integers())),
    st.lists(st.booleans()),
)
def test_matches_list_model(pushes, pops):
    items = SList()
    model = []
    for at_front, value in pushes:
        if at_front:
            items.push_front(value)
            model.insert(0, value)
        else:
            items.push_back(value)
            model.append(value)
        assert list(items) == model
        assert len(items) == len(model)

    for from_front in pops[: len(model)]:
        if from_front:
            assert items.pop_front() == model.pop(0)
        else:
            assert items.pop_back() == model.pop()
        assert list(items) == model
        assert len(items) == len(model)


@given(st.lists(st.integers()))
def test_sort_orders_ascending(values):
    items = SList()
    for value in values:
        items.push_back(value)
    items.sort()
    assert list(items) == sorted(values)