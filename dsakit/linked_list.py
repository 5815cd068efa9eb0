"""A singly linked list with positional access and a few list algorithms."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional["_Node[T]"] = None) -> None:
        self.data = data
        self.next = next


class LinkedList(Generic[T]):
    """A singly linked list that tracks its head, tail and size."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _check_index(self, pos: int, upper: int) -> None:
        if not 0 <= pos < upper:
            raise IndexError("Index out of bounds")

    def _node_at(self, pos: int) -> _Node[T]:
        node = self._head
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    # Reading elements
    def front(self) -> T:
        return self.at(0)

    def back(self) -> T:
        return self.at(self._size - 1)

    def at(self, pos: int) -> T:
        """Return the element at position ``pos``."""
        self._check_index(pos, self._size)
        if pos == self._size - 1:
            assert self._tail is not None
            return self._tail.data
        return self._node_at(pos).data

    def empty(self) -> bool:
        return self._size == 0

    # Adding elements
    def push_front(self, value: T) -> None:
        self.push_at_pos(0, value)

    def push_back(self, value: T) -> None:
        self.push_at_pos(self._size, value)

    def push_at_pos(self, pos: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``pos``."""
        self._check_index(pos, self._size + 1)
        if pos == 0:
            self._head = _Node(value, self._head)
            if self._size == 0:
                self._tail = self._head
        elif pos == self._size:
            assert self._tail is not None
            self._tail.next = _Node(value)
            self._tail = self._tail.next
        else:
            before = self._node_at(pos - 1)
            before.next = _Node(value, before.next)
        self._size += 1

    # Removing elements
    def pop_front(self) -> T:
        return self.pop_at_pos(0)

    def pop_back(self) -> T:
        return self.pop_at_pos(self._size - 1)

    def pop_at_pos(self, pos: int) -> T:
        """Remove and return the element at position ``pos``."""
        self._check_index(pos, self._size)
        if pos == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(pos - 1)
            removed = before.next
            assert removed is not None
            before.next = removed.next
            if before.next is None:
                self._tail = before
        self._size -= 1
        return removed.data

    # Algorithms
    def reverse(self) -> None:
        """Reverse the list in place by turning every link around."""
        if self._size < 2:
            return
        prev: Optional[_Node[T]] = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following
        self._head = prev

    def to_set(self) -> None:
        """Drop repeated elements, keeping the first occurrence of each."""
        slow = self._head
        while slow is not None:
            runner = slow
            while runner.next is not None:
                if runner.next.data == slow.data:
                    runner.next = runner.next.next
                    self._size -= 1
                else:
                    runner = runner.next
            self._tail = slow
            slow = slow.next

    def filter(self, predicate: Callable[[T], bool]) -> None:
        """Keep only the elements for which ``predicate`` is true."""
        prev: Optional[_Node[T]] = None
        current = self._head
        while current is not None:
            if predicate(current.data):
                prev = current
            else:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                self._size -= 1
            current = current.next
        self._tail = prev

    def map(self, func: Callable[[T], T]) -> None:
        """Replace every element with ``func`` applied to it."""
        node = self._head
        while node is not None:
            node.data = func(node.data)
            node = node.next

    def copy(self) -> "LinkedList[T]":
        """Return an independent list with the same elements."""
        return LinkedList(self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"