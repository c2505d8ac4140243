import operator

from hypothesis import given
from hypothesis import strategies as st

from dslessons.bst import TreeSet

SAMPLE = [542, 54, 356, 23, 64, 23, 3, 54, 61, 2, 54, 326, 423]


def test_greater_order_without_duplicates():
    tree = TreeSet(SAMPLE, operator.gt)
    assert list(tree) == sorted(set(SAMPLE), reverse=True)
    assert len(tree) == len(set(SAMPLE))


def test_default_order_ascending():
    tree = TreeSet(SAMPLE)
    assert list(tree) == sorted(set(SAMPLE))


def test_contains_and_add_duplicate():
    tree = TreeSet([5, 3, 8])
    assert 3 in tree
    assert 7 not in tree
    tree.add(3)
    assert len(tree) == 3


def test_discard_every_shape():
    tree = TreeSet([50, 30, 70, 20, 40, 60, 80, 35])
    tree.discard(20)  # leaf
    tree.discard(40)  # one child
    tree.discard(50)  # root with two children
    tree.discard(999)  # absent
    assert list(tree) == [30, 35, 60, 70, 80]
    assert len(tree) == 5
    assert 50 not in tree


def test_discard_until_empty():
    tree = TreeSet([2, 1, 3])
    for value in (2, 1, 3):
        tree.discard(value)
    assert len(tree) == 0
    assert list(tree) == []


@given(st.lists(st.integers(-100, 100)), st.lists(st.integers(-100, 100)))
def test_matches_builtin_set(added, removed):
    tree = TreeSet(added)
    model = set(added)
    for value in removed:
        tree.discard(value)
        model.discard(value)
    assert list(tree) == sorted(model)
    assert len(tree) == len(model)
    assert all(value in tree for value in model)