import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslessons.fifo import Queue


def test_front_back_and_size():
    queue = Queue([4, 7, 2, 8])
    assert queue.front() == 4
    assert queue.back() == 8
    assert len(queue) == 4


def test_pop_in_push_order():
    queue = Queue()
    for value in (7, 4, 2, 8, 3, 9, 2, 7):
        queue.push(value)
    popped = []
    while queue:
        popped.append(queue.pop())
    assert popped == [7, 4, 2, 8, 3, 9, 2, 7]


def test_iteration_front_to_back():
    queue = Queue(["a", "b"])
    queue.push("c")
    assert list(queue) == ["a", "b", "c"]


def test_empty_queue_errors():
    queue = Queue()
    assert not queue
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.back()


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_interleaved_push_pop_preserves_order(first, second):
    queue = Queue(first)
    half = len(first) // 2
    taken = [queue.pop() for _ in range(half)]
    for value in second:
        queue.push(value)
    rest = [queue.pop() for _ in range(len(queue))]
    assert taken + rest == first + second