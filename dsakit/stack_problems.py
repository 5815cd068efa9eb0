"""Small problems solved with stacks (Python lists, top at the end)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order, each followed by a space."""
    words = text.split()
    reversed_words = []
    while words:
        reversed_words.append(words.pop() + " ")
    return "".join(reversed_words)


def is_opening_bracket(c: str) -> bool:
    return c in _OPENING


def is_closing_bracket(c: str) -> bool:
    return c in _PAIRS


def corresponding_bracket(closing: str) -> Optional[str]:
    """Return the opening bracket for ``closing``, or None if it is not one."""
    return _PAIRS.get(closing)


def is_correctly_bracketed(s: str) -> bool:
    """Check that every bracket in ``s`` is matched and properly nested."""
    brackets: List[str] = []
    for c in s:
        if is_opening_bracket(c):
            brackets.append(c)
        elif is_closing_bracket(c):
            if not brackets or corresponding_bracket(c) != brackets[-1]:
                return False
            brackets.pop()
    return not brackets


def _take_elements(dest: MutableSequence[T], src: MutableSequence[T]) -> None:
    while src:
        dest.append(src.pop())


def reverse_stack(stack: MutableSequence[T]) -> None:
    """Reverse ``stack`` in place by moving its elements through another stack."""
    reversed_stack: List[T] = []
    _take_elements(reversed_stack, stack)
    stack[:] = reversed_stack


def merge_stacks(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """Return a new stack with ``first`` at the bottom and ``second`` on top.

    Both inputs keep their own order in the result and are left untouched.
    """
    first_copy = list(first)
    second_copy = list(second)
    reverse_stack(first_copy)
    reverse_stack(second_copy)

    merged: List[T] = []
    _take_elements(merged, first_copy)
    _take_elements(merged, second_copy)
    return merged


def sort_stack(stack: MutableSequence[T]) -> None:
    """Sort ``stack`` in place so that its smallest element ends on top."""
    temp: List[T] = []
    while stack:
        current = stack.pop()
        while temp and temp[-1] < current:
            stack.append(temp.pop())
        temp.append(current)
    stack[:] = temp


@dataclass
class Interval:
    """A closed interval; intervals order by their start."""

    start: int
    end: int

    def __lt__(self, other: "Interval") -> bool:
        return self.start < other.start


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Merge overlapping or touching intervals; return them in ascending order.

    The given intervals are not modified.
    """
    merged: List[Interval] = []
    for interval in sorted(intervals):
        if not merged or interval.start > merged[-1].end:
            merged.append(Interval(interval.start, interval.end))
        if interval.end > merged[-1].end:
            merged[-1].end = interval.end
    return merged