"""A doubly linked list with cheap access at both ends."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "prev", "next")

    def __init__(
        self,
        data: T,
        prev: Optional["_Node[T]"] = None,
        next: Optional["_Node[T]"] = None,
    ) -> None:
        self.data = data
        self.prev = prev
        self.next = next


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def is_empty(self) -> bool:
        return self._size == 0

    def push_front(self, value: T) -> None:
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return removed.data

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("list is empty")
        removed = self._tail
        self._tail = removed.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return removed.data

    def peek_front(self) -> T:
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def peek_back(self) -> T:
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def copy(self) -> "DoublyLinkedList[T]":
        """Return an independent list with the same elements."""
        return DoublyLinkedList(self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{element} " for element in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"