"""Insertion sort, binary insertion sort and ranged insertion sort."""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Sequence

Less = Callable[[Any, Any], bool]


@dataclass
class InsertionStats:
    """Counters collected while insertion sorting."""

    comparisons: int = 0
    moves: int = 0
    insertions: int = 0
    time_ms: float = 0.0


def insertion_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place by inserting each item into the sorted prefix."""
    insertion_sort_range(arr, 0, len(arr) - 1, comp)


def insertion_sort_range(
    arr: MutableSequence[Any], left: int, right: int, comp: Less = operator.lt
) -> None:
    """Insertion sort of ``arr[left..right]`` (both ends inclusive), in place."""
    if left >= right:
        return
    for i in range(left + 1, right + 1):
        key = arr[i]
        j = i - 1
        while j >= left and comp(key, arr[j]):
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def binary_search(
    arr: Sequence[Any], left: int, right: int, key: Any, comp: Less = operator.lt
) -> int:
    """Insertion point for ``key`` in sorted ``arr[left..right]``, after any equal items."""
    while left <= right:
        mid = left + (right - left) // 2
        if comp(key, arr[mid]):
            right = mid - 1
        else:
            left = mid + 1
    return left


def binary_insertion_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Insertion sort that finds each insertion point by binary search."""
    for i in range(1, len(arr)):
        key = arr[i]
        pos = binary_search(arr, 0, i - 1, key, comp)
        if pos != i:
            del arr[i]
            arr.insert(pos, key)


def insertion_sort_with_stats(arr: MutableSequence[Any], comp: Less = operator.lt) -> InsertionStats:
    """Insertion sort in place, returning the work it did."""
    stats = InsertionStats()
    if len(arr) <= 1:
        return stats

    start = time.perf_counter()
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        stats.insertions += 1
        while j >= 0 and comp(key, arr[j]):
            stats.comparisons += 1
            arr[j + 1] = arr[j]
            stats.moves += 1
            j -= 1
        if j >= 0:
            stats.comparisons += 1
        arr[j + 1] = key
        stats.moves += 1
    stats.time_ms = (time.perf_counter() - start) * 1000.0
    return stats


def is_sorted(arr: Sequence[Any], comp: Less = operator.lt) -> bool:
    """True if no element is ordered before its predecessor."""
    return not any(comp(b, a) for a, b in zip(arr, arr[1:]))


def insertion_sort_descending(arr: MutableSequence[Any]) -> None:
    """Insertion sort in place, largest first."""
    insertion_sort(arr, operator.gt)