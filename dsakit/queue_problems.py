"""Problems solved with queues, and queues and stacks built from each other."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, List, TypeVar

from dsakit.queues import QueueUnderflowError
from dsakit.stacks import StackUnderflowError

T = TypeVar("T")


def flip_first_k(queue: Deque[T], k: int) -> None:
    """Reverse the first ``k`` elements of ``queue`` in place, keeping the rest in order."""
    if not 0 <= k <= len(queue):
        raise ValueError("k must be between 0 and the length of the queue")

    stack: List[T] = [queue.popleft() for _ in range(k)]
    while stack:
        queue.append(stack.pop())

    for _ in range(len(queue) - k):
        queue.append(queue.popleft())


class StackQueue(Generic[T]):
    """A first-in, first-out queue kept in a stack whose top is the front."""

    def __init__(self) -> None:
        self._queue_stack: List[T] = []
        self._helper_stack: List[T] = []

    def push(self, element: T) -> None:
        while self._queue_stack:
            self._helper_stack.append(self._queue_stack.pop())
        self._queue_stack.append(element)
        while self._helper_stack:
            self._queue_stack.append(self._helper_stack.pop())

    def pop(self) -> T:
        if not self._queue_stack:
            raise QueueUnderflowError("Queue is empty")
        return self._queue_stack.pop()

    def front(self) -> T:
        if not self._queue_stack:
            raise QueueUnderflowError("Queue is empty")
        return self._queue_stack[-1]

    def empty(self) -> bool:
        return not self._queue_stack


class QueueStack(Generic[T]):
    """A last-in, first-out stack kept in a queue whose front is the top."""

    def __init__(self) -> None:
        self._stack_queue: Deque[T] = deque()
        self._helper_queue: Deque[T] = deque()

    def push(self, element: T) -> None:
        self._helper_queue.append(element)
        while self._stack_queue:
            self._helper_queue.append(self._stack_queue.popleft())
        self._stack_queue, self._helper_queue = self._helper_queue, self._stack_queue

    def pop(self) -> T:
        if not self._stack_queue:
            raise StackUnderflowError("Stack is empty")
        return self._stack_queue.popleft()

    def front(self) -> T:
        if not self._stack_queue:
            raise StackUnderflowError("Stack is empty")
        return self._stack_queue[0]

    def empty(self) -> bool:
        return not self._stack_queue