"""A binary tree with search-tree insertion and removal and a few tree exercises."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "left", "right")

    def __init__(
        self,
        data: T,
        left: Optional["_Node[T]"] = None,
        right: Optional["_Node[T]"] = None,
    ) -> None:
        self.data = data
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _copy(node: Optional[_Node[T]]) -> Optional[_Node[T]]:
    if node is None:
        return None
    return _Node(node.data, _copy(node.left), _copy(node.right))


def _find(node: Optional[_Node[T]], key: Any) -> bool:
    if node is None:
        return False
    return node.data == key or _find(node.left, key) or _find(node.right, key)


def _insert(node: Optional[_Node[T]], key: T) -> _Node[T]:
    if node is None:
        return _Node(key)
    if key < node.data:  # type: ignore[operator]
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    return node


def _remove(node: Optional[_Node[T]], key: Any) -> Tuple[Optional[_Node[T]], bool]:
    if node is None:
        return None, False
    if key < node.data:
        node.left, removed = _remove(node.left, key)
        return node, removed
    if key > node.data:
        node.right, removed = _remove(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.data = successor.data
    node.right, _ = _remove(node.right, successor.data)
    return node, True


def _height(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _map(node: Optional[_Node[T]], func: Callable[[T], T]) -> None:
    if node is None:
        return
    node.data = func(node.data)
    _map(node.left, func)
    _map(node.right, func)


def _in_order(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.data
        yield from _in_order(node.right)


def _pre_order(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is not None:
        yield node.data
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[_Node[T]]) -> Iterator[T]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.data


def _trim(node: Optional[_Node[T]]) -> Tuple[Optional[_Node[T]], int]:
    if node is None:
        return None, 0
    if node.is_leaf:
        return None, 1
    node.left, removed_left = _trim(node.left)
    node.right, removed_right = _trim(node.right)
    return node, removed_left + removed_right


def _bloom(node: Optional[_Node[T]]) -> int:
    if node is None:
        return 0
    if node.is_leaf:
        node.left = _Node(node.data)
        node.right = _Node(node.data)
        return 2
    return _bloom(node.left) + _bloom(node.right)


class BinaryTree(Generic[T]):
    """A binary tree.

    ``BinaryTree()`` is empty; ``BinaryTree(data, left, right)`` has a root
    holding ``data`` with copies of the trees ``left`` and ``right`` (either
    may be omitted or None) as its subtrees.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 3:
            raise TypeError("BinaryTree takes at most 3 arguments")
        self._root: Optional[_Node[T]] = None
        self._size = 0
        if not args:
            return

        data, *subtrees = args
        left, right = (list(subtrees) + [None, None])[:2]
        for subtree in (left, right):
            if subtree is not None and not isinstance(subtree, BinaryTree):
                raise TypeError("subtrees must be BinaryTree instances")
        left_root = _copy(left._root) if left is not None else None
        right_root = _copy(right._root) if right is not None else None
        self._root = _Node(data, left_root, right_root)
        self._size = 1 + (len(left) if left else 0) + (len(right) if right else 0)

    def is_empty(self) -> bool:
        return self._root is None

    def __contains__(self, key: Any) -> bool:
        """Search every node, whatever the tree's ordering."""
        return _find(self._root, key)

    def insert(self, key: T) -> None:
        """Insert ``key`` as a leaf, going left of larger and right of others."""
        self._root = _insert(self._root, key)
        self._size += 1

    def remove(self, key: Any) -> bool:
        """Remove one node holding ``key`` by search-tree rules; report success."""
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
        """Replace every value with ``func`` applied to it, in pre-order."""
        _map(self._root, func)

    def in_order(self) -> Iterator[T]:
        return _in_order(self._root)

    def pre_order(self) -> Iterator[T]:
        return _pre_order(self._root)

    def post_order(self) -> Iterator[T]:
        return _post_order(self._root)

    def trim(self) -> None:
        """Remove every leaf."""
        self._root, removed = _trim(self._root)
        self._size -= removed

    def bloom(self) -> None:
        """Give every leaf two children holding its own value."""
        self._size += _bloom(self._root)

    def copy(self) -> "BinaryTree[T]":
        """Return an independent tree with the same shape and values."""
        clone: BinaryTree[T] = BinaryTree()
        clone._root = _copy(self._root)
        clone._size = self._size
        return clone

    def __repr__(self) -> str:
        return f"BinaryTree(pre_order={list(self.pre_order())!r})"