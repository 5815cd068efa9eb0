from collections import deque

import pytest

from dsakit.queue_problems import QueueStack, StackQueue, flip_first_k
from dsakit.queues import QueueUnderflowError
from dsakit.stacks import StackUnderflowError


def test_flip_first_k_example():
    q = deque([1, 2, 3, 4, 5, 6])
    flip_first_k(q, 3)
    assert list(q) == [3, 2, 1, 4, 5, 6]


@pytest.mark.parametrize("k", [0, 1])
def test_flip_trivial_k_keeps_order(k):
    values = [7, 8, 9]
    q = deque(values)
    flip_first_k(q, k)
    assert list(q) == values


def test_flip_whole_queue_reverses():
    values = list(range(10))
    q = deque(values)
    flip_first_k(q, len(values))
    assert list(q) == values[::-1]


@pytest.mark.parametrize("k", [0, 2, 5, 8])
def test_flip_matches_slices(k):
    values = list(range(8))
    q = deque(values)
    flip_first_k(q, k)
    assert list(q) == values[:k][::-1] + values[k:]


@pytest.mark.parametrize("k", [-1, 4])
def test_flip_invalid_k(k):
    with pytest.raises(ValueError):
        flip_first_k(deque([1, 2, 3]), k)


def test_stack_queue_is_fifo():
    q = StackQueue()
    for value in (1, 2, 3):
        q.push(value)
    assert q.front() == 1
    assert [q.pop() for _ in range(3)] == [1, 2, 3]
    assert q.empty()


def test_stack_queue_interleaved():
    q = StackQueue()
    q.push("a")
    q.push("b")
    assert q.pop() == "a"
    q.push("c")
    assert q.pop() == "b"
    assert q.pop() == "c"


def test_stack_queue_empty_raises():
    q = StackQueue()
    assert q.empty()
    with pytest.raises(QueueUnderflowError):
        q.pop()
    with pytest.raises(QueueUnderflowError):
        q.front()


def test_queue_stack_is_lifo():
    s = QueueStack()
    for value in (1, 2, 3):
        s.push(value)
    assert s.front() == 3
    assert [s.pop() for _ in range(3)] == [3, 2, 1]
    assert s.empty()


def test_queue_stack_interleaved():
    s = QueueStack()
    s.push("a")
    s.push("b")
    assert s.pop() == "b"
    s.push("c")
    assert s.pop() == "c"
    assert s.pop() == "a"


def test_queue_stack_empty_raises():
    s = QueueStack()
    assert s.empty()
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.front()