"""Trees built directly from nodes: a tree with a list of children and a binary node."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass
class Tree:
    """A tree node holding ``data`` and a list of child trees."""

    data: Any
    children: List["Tree"] = field(default_factory=list)

    def branching_factor(self) -> int:
        """Return the largest number of children of any node in the tree."""
        if not self.children:
            return 0
        return max(len(self.children), *(child.branching_factor() for child in self.children))

    def level(self, level: int) -> List[Any]:
        """Return the values at depth ``level``, this node being at depth 0."""
        if level < 0:
            raise ValueError("level must be non-negative")
        if level == 0:
            return [self.data]
        return [value for child in self.children for value in child.level(level - 1)]

    def count_leaves(self) -> int:
        """Return the number of nodes without children."""
        if not self.children:
            return 1
        return sum(child.count_leaves() for child in self.children)


@dataclass
class BinaryNode:
    """A binary tree node holding ``data`` with optional left and right subtrees."""

    data: Any
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def inorder(self) -> Iterator[Any]:
        if self.left is not None:
            yield from self.left.inorder()
        yield self.data
        if self.right is not None:
            yield from self.right.inorder()

    def preorder(self) -> Iterator[Any]:
        yield self.data
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def postorder(self) -> Iterator[Any]:
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.data

    def trim(self) -> None:
        """Remove every leaf below this node.

        A node that is itself a leaf cannot remove itself; it stays, and a
        RuntimeWarning says that the tree would become empty.
        """
        if self.is_leaf:
            warnings.warn(
                "Tree becomes empty. Root node is removed", RuntimeWarning, stacklevel=2
            )

        if self.left is not None:
            if self.left.is_leaf:
                self.left = None
            else:
                self.left.trim()

        if self.right is not None:
            if self.right.is_leaf:
                self.right = None
            else:
                self.right.trim()

    def bloom(self) -> None:
        """Give every leaf below this node two children holding its value."""
        for child in (self.left, self.right):
            if child is None:
                continue
            if child.is_leaf:
                child.left = BinaryNode(child.data)
                child.right = BinaryNode(child.data)
            else:
                child.bloom()