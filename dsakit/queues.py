"""Queue implementations: a bounded ring buffer, a linked queue and a ring deque."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class QueueOverflowError(OverflowError):
    """Raised when adding to a full bounded queue or deque."""


class QueueUnderflowError(IndexError):
    """Raised when reading or removing from an empty queue or deque."""


class Queue(ABC, Generic[T]):
    """The interface shared by the first-in, first-out queues."""

    @abstractmethod
    def full(self) -> bool:
        """Return whether no further element can be enqueued."""

    @abstractmethod
    def empty(self) -> bool:
        """Return whether the queue holds no elements."""

    @abstractmethod
    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back."""

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the front element."""

    @abstractmethod
    def front(self) -> T:
        """Return the front element without removing it."""


class CircularQueue(Queue[T]):
    """A queue of at most ``size`` elements stored in a ring of ``size + 1`` slots.

    One slot always stays free so that a full ring can be told apart from
    an empty one.
    """

    def __init__(self, size: int = 16) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._slots: List[Optional[T]] = [None] * (size + 1)
        self._begin = 0
        self._end = 0

    def full(self) -> bool:
        return (self._end + 1) % len(self._slots) == self._begin

    def empty(self) -> bool:
        return self._begin == self._end

    def enqueue(self, element: T) -> None:
        if self.full():
            raise QueueOverflowError("Queue is full")
        self._slots[self._end] = element
        self._end = (self._end + 1) % len(self._slots)

    def dequeue(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Queue is empty")
        result = self._slots[self._begin]
        self._slots[self._begin] = None
        self._begin = (self._begin + 1) % len(self._slots)
        return result  # type: ignore[return-value]

    def front(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Queue is empty")
        return self._slots[self._begin]  # type: ignore[return-value]

    def slots(self) -> int:
        """Return the number of slots in the ring (capacity plus one)."""
        return len(self._slots)

    def _items(self) -> Iterator[T]:
        index = self._begin
        while index != self._end:
            yield self._slots[index]  # type: ignore[misc]
            index = (index + 1) % len(self._slots)

    def copy(self) -> "CircularQueue[T]":
        """Return an independent queue with the same capacity and contents."""
        clone: CircularQueue[T] = CircularQueue(len(self._slots) - 1)
        for element in self._items():
            clone.enqueue(element)
        return clone

    def __iter__(self) -> Iterator[T]:
        return self._items()

    def __len__(self) -> int:
        return (self._end + len(self._slots) - self._begin) % len(self._slots)


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[_Node[T]] = None


class LinkedQueue(Queue[T]):
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._begin: Optional[_Node[T]] = None
        self._end: Optional[_Node[T]] = None
        self._count = 0

    def full(self) -> bool:
        return False

    def empty(self) -> bool:
        return self._begin is None

    def enqueue(self, element: T) -> None:
        node = _Node(element)
        if self._end is None:
            self._begin = node
        else:
            self._end.next = node
        self._end = node
        self._count += 1

    def dequeue(self) -> T:
        result = self.front()
        assert self._begin is not None
        self._begin = self._begin.next
        if self._begin is None:
            self._end = None
        self._count -= 1
        return result

    def front(self) -> T:
        if self._begin is None:
            raise QueueUnderflowError("Queue is empty")
        return self._begin.data

    def copy(self) -> "LinkedQueue[T]":
        """Return an independent queue with the same contents."""
        clone: LinkedQueue[T] = LinkedQueue()
        for element in self:
            clone.enqueue(element)
        return clone

    def __iter__(self) -> Iterator[T]:
        node = self._begin
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._count


class CircularDeque(Generic[T]):
    """A double-ended queue of at most ``capacity`` elements in a ring buffer."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._slots: List[Optional[T]] = [None] * (capacity + 1)
        self._front = 0
        self._back = 0

    def _step_back(self, index: int) -> int:
        return (index - 1) % len(self._slots)

    def _step_forward(self, index: int) -> int:
        return (index + 1) % len(self._slots)

    def push_front(self, element: T) -> None:
        if self.full():
            raise QueueOverflowError("Deque is full")
        self._front = self._step_back(self._front)
        self._slots[self._front] = element

    def push_back(self, element: T) -> None:
        if self.full():
            raise QueueOverflowError("Deque is full")
        self._slots[self._back] = element
        self._back = self._step_forward(self._back)

    def pop_front(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Deque is empty")
        element = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._step_forward(self._front)
        return element  # type: ignore[return-value]

    def pop_back(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Deque is empty")
        self._back = self._step_back(self._back)
        element = self._slots[self._back]
        self._slots[self._back] = None
        return element  # type: ignore[return-value]

    def front(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Deque is empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def back(self) -> T:
        if self.empty():
            raise QueueUnderflowError("Deque is empty")
        return self._slots[self._step_back(self._back)]  # type: ignore[return-value]

    def empty(self) -> bool:
        return self._front == self._back

    def full(self) -> bool:
        return self._step_forward(self._back) == self._front

    def slots(self) -> int:
        """Return the number of slots in the ring (capacity plus one)."""
        return len(self._slots)

    def __len__(self) -> int:
        return (self._back - self._front) % len(self._slots)