"""A general tree stored as first-child / next-sibling links."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from dsakit.binary_tree import BinaryTree

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "child", "sibling")

    def __init__(
        self,
        data: T,
        child: Optional["_Node[T]"] = None,
        sibling: Optional["_Node[T]"] = None,
    ) -> None:
        self.data = data
        self.child = child
        self.sibling = sibling

    def children(self) -> Iterator["_Node[T]"]:
        node = self.child
        while node is not None:
            yield node
            node = node.sibling


def _copy(node: Optional[_Node[T]]) -> Optional[_Node[T]]:
    if node is None:
        return None
    return _Node(node.data, _copy(node.child), _copy(node.sibling))


def _count(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.child) + _count(node.sibling)


def _find(node: Optional[_Node[T]], key: Any) -> bool:
    if node is None:
        return False
    return node.data == key or _find(node.sibling, key) or _find(node.child, key)


def _height(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    return max(1 + _height(node.child), _height(node.sibling))


def _remove(node: Optional[_Node[T]], key: Any) -> Tuple[Optional[_Node[T]], bool]:
    if node is None:
        return None, False

    if node.data != key:
        node.sibling, removed = _remove(node.sibling, key)
        if removed:
            return node, True
        node.child, removed = _remove(node.child, key)
        return node, removed

    if node.child is None:
        return node.sibling, True
    if node.sibling is None:
        return node.child, True

    # Hand the removed node's children over to its next sibling.
    last_child = node.child
    while last_child.sibling is not None:
        last_child = last_child.sibling
    last_child.sibling = node.sibling.child
    node.sibling.child = node.child
    return node.sibling, True


def _values(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is not None:
        yield node.data
        yield from _values(node.sibling)
        yield from _values(node.child)


def _map(node: Optional[_Node[T]], func: Callable[[T], T]) -> None:
    if node is None:
        return
    node.data = func(node.data)
    _map(node.sibling, func)
    _map(node.child, func)


def _branching_coeff(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    return max(1 + _branching_coeff(node.sibling), _branching_coeff(node.child))


def _level(node: _Node[T], level: int, out: List[T]) -> None:
    if level == 0:
        out.append(node.data)
    for child in node.children():
        _level(child, level - 1, out)


def _leaf_count(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    if node.child is None:
        return 1 + _leaf_count(node.sibling)
    return _leaf_count(node.child) + _leaf_count(node.sibling)


class GeneralTree(Generic[T]):
    """A tree whose nodes may have any number of children.

    ``GeneralTree()`` is empty; ``GeneralTree(data, child, sibling)`` has a
    root holding ``data`` whose first child is a copy of the tree ``child``
    and whose next sibling is a copy of the tree ``sibling`` (either may be
    omitted or None).
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 3:
            raise TypeError("GeneralTree takes at most 3 arguments")
        self._root: Optional[_Node[T]] = None
        self._size = 0
        if not args:
            return

        data, *rest = args
        child, sibling = (list(rest) + [None, None])[:2]
        for subtree in (child, sibling):
            if subtree is not None and not isinstance(subtree, GeneralTree):
                raise TypeError("subtrees must be GeneralTree instances")
        child_root = _copy(child._root) if child is not None else None
        sibling_root = _copy(sibling._root) if sibling is not None else None
        self._root = _Node(data, child_root, sibling_root)
        self._size = _count(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def __contains__(self, key: Any) -> bool:
        return _find(self._root, key)

    def remove(self, key: Any) -> bool:
        """Remove the first node holding ``key``; report whether one was found.

        A removed node's children move under its next sibling when it has
        one, and otherwise take its place.
        """
        self._root, removed = _remove(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    def map(self, func: Callable[[T], T]) -> None:
        """Replace every value with ``func`` applied to it, in ``values()`` order."""
        _map(self._root, func)

    def values(self) -> Iterator[T]:
        """Yield every value: a node, then its siblings' subtrees, then its children."""
        return _values(self._root)

    def levels(self) -> List[List[T]]:
        """Return the values below the root, grouped level by level."""
        if self._root is None:
            return []
        result: List[List[T]] = []
        current = [self._root]
        while current:
            result.append([node.data for node in current])
            current = [child for node in current for child in node.children()]
        return result

    def branching_coeff(self) -> int:
        """Return the largest number of children any node has (the root counts as one)."""
        return _branching_coeff(self._root)

    def level(self, level: int) -> List[T]:
        """Return the values at depth ``level``, the root being at depth 0."""
        if level > self.height():
            raise ValueError("invalid level")
        out: List[T] = []
        if self._root is not None:
            _level(self._root, level, out)
        return out

    def leaf_count(self) -> int:
        """Return the number of nodes without children."""
        return _leaf_count(self._root)

    def copy(self) -> "GeneralTree[T]":
        """Return an independent tree with the same shape and values."""
        clone: GeneralTree[T] = GeneralTree()
        clone._root = _copy(self._root)
        clone._size = self._size
        return clone

    def __repr__(self) -> str:
        return f"GeneralTree(levels={self.levels()!r})"


def _line(values) -> str:
    return "".join(f"{value} " for value in values)


def _show(value: Any) -> Any:
    print(f"{value}__", end="")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tree exercises on two sample trees and print the results."""
    if argv is None:
        argv = sys.argv[1:]

    bt = BinaryTree(
        0,
        BinaryTree(1, BinaryTree(11)),
        BinaryTree(2, BinaryTree(21, BinaryTree(211), BinaryTree(212)), BinaryTree(22)),
    )

    print(_line(bt.in_order()))
    print(_line(bt.pre_order()))
    print(_line(bt.post_order()))

    bt.trim()
    bt.map(_show)
    print()

    bt.bloom()
    bt.map(_show)
    print()

    gt = GeneralTree(
        0,
        GeneralTree(
            1,
            GeneralTree(11),
            GeneralTree(2, GeneralTree(21, None, GeneralTree(22)), GeneralTree(3)),
        ),
    )

    print(gt.branching_coeff())
    print(_line(gt.level(1)))
    print(gt.leaf_count())

    return 0