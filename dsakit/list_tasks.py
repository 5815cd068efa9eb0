"""Exercises on bare singly linked nodes: palindromes, reordering, grouping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A singly linked node; nodes compare by identity."""

    data: Any = None
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def create_list(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain of nodes holding ``values``; return its head (None if empty)."""
    dummy = Node()
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[Node]) -> List[Any]:
    """Return the values of the chain starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.data)
        head = head.next
    return values


def get_middle_node(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the first of the second half."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def reverse_list(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place by turning its links; return the new head."""
    prev: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = prev
        prev = current
        current = following
    return prev


def split_before(head: Optional[Node], position: Optional[Node]) -> None:
    """Cut the link that leads into ``position``, if the chain contains one."""
    node = head
    while node is not None and node.next is not None:
        if node.next is position:
            node.next = None
            return
        node = node.next


def is_palindrome(head: Optional[Node]) -> bool:
    """Return whether the values read the same both ways.

    The second half is reversed for the comparison and restored afterwards.
    """
    right_head = reverse_list(get_middle_node(head))
    left, right = head, right_head
    result = True
    while right is not None and left is not None:
        if right.data != left.data:
            result = False
            break
        right = right.next
        left = left.next
    reverse_list(right_head)
    return result


def reorder_list(head: Optional[Node]) -> Optional[Node]:
    """Rearrange ``L0, L1, ..., Ln`` into ``L0, Ln, L1, Ln-1, ...`` in place."""
    if head is None:
        return None
    middle = get_middle_node(head)
    assert middle is not None
    right = reverse_list(middle.next)
    middle.next = None

    left: Optional[Node] = head
    while right is not None and left is not None:
        left_next = left.next
        right_next = right.next
        left.next = right
        right.next = left_next
        left = left_next
        right = right_next
    return head


def reorder_less_than(head: Optional[Node], x: Any) -> Optional[Node]:
    """Move every node whose value is at least ``x`` to the end, keeping order.

    Returns the new head.
    """
    smaller_dummy, larger_dummy = Node(), Node()
    smaller, larger = smaller_dummy, larger_dummy
    node = head
    while node is not None:
        if node.data >= x:
            larger.next = node
            larger = node
        else:
            smaller.next = node
            smaller = node
        node = node.next
    larger.next = None
    smaller.next = larger_dummy.next
    return smaller_dummy.next


def shuffle(head: Optional[Node]) -> Optional[Node]:
    """Move the second half of the chain in front of the first; return the new head.

    For an odd length the middle node belongs to the second half.
    """
    if head is None or head.next is None:
        return head
    middle = get_middle_node(head)
    assert middle is not None
    split_before(head, middle)

    tail = middle
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return middle


def reverse_k_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse each full group of ``k`` nodes; a shorter last group stays as is.

    Only links are changed, never values. Returns the new head.
    """
    if k < 1:
        raise ValueError("k must be at least 1")

    dummy = Node(None, head)
    before_group = dummy
    while True:
        group_end: Optional[Node] = before_group
        for _ in range(k):
            group_end = group_end.next if group_end is not None else None
        if group_end is None:
            return dummy.next

        group_start = before_group.next
        assert group_start is not None
        rest = group_end.next
        group_end.next = None
        before_group.next = reverse_list(group_start)
        group_start.next = rest
        before_group = group_start