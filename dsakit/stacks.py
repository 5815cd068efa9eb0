"""Stack implementations: bounded, list-backed and container-generic."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflowError(IndexError):
    """Raised when reading or removing from an empty stack."""


class StaticStack(Generic[T]):
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._data: List[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, element: T) -> None:
        if self.is_full():
            raise StackOverflowError("Stack is full")
        self._data.append(element)

    def pop(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._data.pop()

    def top(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._data[-1]

    def is_empty(self) -> bool:
        return not self._data

    def is_full(self) -> bool:
        return len(self._data) == self._capacity

    def copy(self) -> "StaticStack[T]":
        """Return an independent stack of the same capacity and contents."""
        clone: StaticStack[T] = StaticStack(self._capacity)
        for element in self._data:
            clone.push(element)
        return clone

    def assign(self, other: "StaticStack[T]") -> "StaticStack[T]":
        """Replace this stack's contents with ``other``'s."""
        if other is not self:
            if other._capacity > self._capacity:
                raise StackOverflowError("Stack will overflow")
            self._data = []
            for element in other._data:
                self.push(element)
        return self

    def __len__(self) -> int:
        return len(self._data)


class StaticArray(Generic[T]):
    """A bounded array used from one end, with a container-style interface."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._data: List[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push_back(self, element: T) -> None:
        if self.full():
            raise StackOverflowError("Stack is full")
        self._data.append(element)

    def pop_back(self) -> T:
        if self.empty():
            raise StackUnderflowError("Stack is empty")
        return self._data.pop()

    def top(self) -> T:
        if self.empty():
            raise StackUnderflowError("Stack is empty")
        return self._data[-1]

    def empty(self) -> bool:
        return not self._data

    def full(self) -> bool:
        return len(self._data) == self._capacity

    def copy(self) -> "StaticArray[T]":
        clone: StaticArray[T] = StaticArray(self._capacity)
        for element in self._data:
            clone.push_back(element)
        return clone

    def __len__(self) -> int:
        return len(self._data)


class VectorStack(Generic[T]):
    """An unbounded stack backed by a Python list."""

    def __init__(self) -> None:
        self._data: List[T] = []

    def push(self, element: T) -> None:
        self._data.append(element)

    def pop(self) -> T:
        if not self._data:
            raise StackUnderflowError("Stack is empty")
        return self._data.pop()

    def top(self) -> T:
        if not self._data:
            raise StackUnderflowError("Stack is empty")
        return self._data[-1]

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)


class ContainerStack(Generic[T]):
    """A stack over any container supporting ``append``, ``pop`` and ``[-1]``.

    ``container`` is a factory (such as ``list`` or ``collections.deque``)
    called once to create the underlying storage.
    """

    def __init__(self, container: Callable[[], Any] = list) -> None:
        self._data = container()

    def push(self, element: T) -> None:
        self._data.append(element)

    def pop(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._data.pop()

    def top(self) -> T:
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._data[-1]

    def is_empty(self) -> bool:
        return len(self._data) == 0