import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslessons.stack import Stack


def test_iterates_from_top_down():
    items = [3, 7, 2, 1, 4, 7, 2, 8]
    stack = Stack(items)
    assert list(stack) == list(reversed(items))


def test_pop_returns_reverse_of_push_order():
    words = ["ha", "noi", "mua", "khai", "giang"]
    stack = Stack()
    for word in words:
        stack.push(word)
    popped = []
    while stack:
        popped.append(stack.pop())
    assert " ".join(popped) == " ".join(reversed(words))
    assert len(stack) == 0


def test_top_does_not_remove():
    stack = Stack([1, 2, 3])
    assert stack.top() == 3
    assert len(stack) == 3


def test_copy_is_independent():
    original = Stack(["ha", "noi"])
    clone = original.copy()
    clone.pop()
    clone.push("truong")
    assert list(original) == ["noi", "ha"]
    assert list(clone) == ["truong", "ha"]


def test_empty_stack_errors():
    stack = Stack()
    assert not stack
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


@given(st.lists(st.integers()))
def test_push_then_pop_all_roundtrip(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    result = [stack.pop() for _ in range(len(values))]
    assert result == values[::-1]
    assert not stack