"""Classic sorting and searching routines that count the work they do."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search: the index found (or None) and the steps taken."""

    index: Optional[int]
    iterations: int

    @property
    def found(self) -> bool:
        return self.index is not None


def bubble_sort(arr: MutableSequence[int]) -> int:
    """Sort ``arr`` in place; return the number of comparisons made."""
    iterations = 0
    size = len(arr)
    for i in range(size - 1):
        swapped = False
        # Only the unsorted prefix still needs scanning.
        for j in range(size - i - 1):
            iterations += 1
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return iterations


def insertion_sort(arr: MutableSequence[int]) -> int:
    """Sort ``arr`` in place; return the number of element shifts made."""
    iterations = 0
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            iterations += 1
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return iterations


def selection_sort(arr: MutableSequence[int]) -> int:
    """Sort ``arr`` in place; return the number of comparisons made."""
    iterations = 0
    size = len(arr)
    for i in range(size - 1):
        min_idx = i
        for j in range(i + 1, size):
            iterations += 1
            if arr[j] < arr[min_idx]:
                min_idx = j
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
    return iterations


def _merge(arr: MutableSequence[int], left: int, mid: int, right: int) -> int:
    """Merge ``arr[left..mid]`` and ``arr[mid+1..right]``; return steps taken."""
    left_part = list(arr[left : mid + 1])
    right_part = list(arr[mid + 1 : right + 1])
    iterations = len(left_part) + len(right_part)

    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        iterations += 1
        if left_part[i] <= right_part[j]:
            arr[k] = left_part[i]
            i += 1
        else:
            arr[k] = right_part[j]
            j += 1
        k += 1

    for value in (*left_part[i:], *right_part[j:]):
        iterations += 1
        arr[k] = value
        k += 1

    return iterations


def _merge_sort(arr: MutableSequence[int], left: int, right: int) -> int:
    if left >= right:
        return 0
    mid = left + (right - left) // 2
    return (
        _merge_sort(arr, left, mid)
        + _merge_sort(arr, mid + 1, right)
        + _merge(arr, left, mid, right)
    )


def merge_sort(arr: MutableSequence[int]) -> int:
    """Sort ``arr`` in place; return the number of copy and merge steps."""
    return _merge_sort(arr, 0, len(arr) - 1)


def linear_search(arr: Sequence[int], x: int) -> SearchResult:
    """Scan ``arr`` from the start for ``x``."""
    iterations = 0
    for index, value in enumerate(arr):
        iterations += 1
        if value == x:
            return SearchResult(index, iterations)
    return SearchResult(None, iterations)


def binary_search(
    arr: Sequence[int], x: int, low: int = 0, high: Optional[int] = None
) -> SearchResult:
    """Search the sorted range ``arr[low..high]`` (inclusive) for ``x``."""
    if high is None:
        high = len(arr) - 1
    iterations = 0
    while low <= high:
        mid = low + (high - low) // 2
        iterations += 1
        if arr[mid] == x:
            return SearchResult(mid, iterations)
        if arr[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return SearchResult(None, iterations)


def _report(result: SearchResult) -> None:
    if result.found:
        print(f"Element is at index: {result.index}")
    else:
        print("No such element.")
    print(f"Number of iterations: {result.iterations}")


def _describe_size(n: int) -> None:
    log_n = math.log(n)
    print(f"n: {n}, log(n): {log_n:g}, n * log(n): {n * log_n:g}, n^2: {n * n}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Demonstrate sorting and searching on two sample arrays."""
    if argv is None:
        argv = sys.argv[1:]

    short_arr = [1, 5, -1, 2, 10, 11, 14, 15]
    long_arr = [
        1, 2, 3, 4, 1, -1, 4, -4, 10, 11, 3, 5, -23, 7, -10, 15,
        14, 16, 2, 10, -15, 3, 33, 154, -211, 1, 1, -13, 23, 29, 5,
    ]

    _describe_size(len(short_arr))
    _describe_size(len(long_arr))

    print("merge sort")
    for arr in (short_arr, long_arr):
        print(f"Number of iterations: {merge_sort(arr)}")

    print("\nlinear search")
    _report(linear_search(short_arr, 11))
    _report(linear_search(short_arr, 1000))
    print()
    _report(linear_search(long_arr, 11))
    _report(linear_search(long_arr, 1000))

    print("\nbinary search")
    _report(binary_search(short_arr, 11, 0, len(short_arr) - 1))
    _report(binary_search(short_arr, 1000, 0, len(short_arr) - 1))
    print()
    _report(binary_search(long_arr, 11, 0, len(long_arr) - 1))
    _report(binary_search(long_arr, 1000, 0, len(long_arr) - 1))

    return 0