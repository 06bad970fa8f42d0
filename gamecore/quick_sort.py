"""Quicksort: plain Lomuto, median-of-three optimised, three-way and iterative variants."""

from __future__ import annotations

import operator
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, MutableSequence, Optional

from .insertion_sort import insertion_sort_range

Less = Callable[[Any, Any], bool]

_SMALL_RANGE = 10


class PivotStrategy(Enum):
    """How the pivot of each partition is chosen."""

    FIRST = "first"
    LAST = "last"
    MIDDLE = "middle"
    RANDOM = "random"
    MEDIAN_OF_THREE = "median_of_three"


@dataclass
class QuickStats:
    """Counters collected while quicksorting."""

    comparisons: int = 0
    swaps: int = 0
    partitions: int = 0
    recursion_depth: int = 0
    time_ms: float = 0.0


def _partition(
    arr: MutableSequence[Any],
    left: int,
    right: int,
    comp: Less,
    stats: Optional[QuickStats] = None,
) -> int:
    """Lomuto partition around ``arr[right]``; returns the pivot's final index."""
    pivot = arr[right]
    store = left
    for j in range(left, right):
        if stats is not None:
            stats.comparisons += 1
        if not comp(pivot, arr[j]):
            arr[store], arr[j] = arr[j], arr[store]
            store += 1
            if stats is not None:
                stats.swaps += 1
    arr[store], arr[right] = arr[right], arr[store]
    if stats is not None:
        stats.swaps += 1
    return store


def _three_way_partition(
    arr: MutableSequence[Any], left: int, right: int, comp: Less
) -> tuple[int, int]:
    """Split ``arr[left..right]`` into < pivot, == pivot, > pivot.

    Returns ``(lt, gt)`` such that ``arr[lt:gt]`` holds the items equal to the pivot.
    """
    pivot = arr[left]
    lt, i, gt = left, left + 1, right + 1
    while i < gt:
        if comp(arr[i], pivot):
            arr[lt], arr[i] = arr[i], arr[lt]
            lt += 1
            i += 1
        elif comp(pivot, arr[i]):
            gt -= 1
            arr[i], arr[gt] = arr[gt], arr[i]
        else:
            i += 1
    return lt, gt


def _median_of_three(arr: MutableSequence[Any], left: int, right: int, comp: Less) -> int:
    """Order the first, middle and last items; returns the middle index."""
    mid = left + (right - left) // 2
    if comp(arr[right], arr[left]):
        arr[left], arr[right] = arr[right], arr[left]
    if comp(arr[mid], arr[left]):
        arr[left], arr[mid] = arr[mid], arr[left]
    if comp(arr[right], arr[mid]):
        arr[mid], arr[right] = arr[right], arr[mid]
    return mid


def quick_sort_range(
    arr: MutableSequence[Any], left: int, right: int, comp: Less = operator.lt
) -> None:
    """Quicksort ``arr[left..right]`` (both ends inclusive) in place."""
    while left < right:
        pivot = _partition(arr, left, right, comp)
        # Recurse into the smaller side so the stack stays logarithmic.
        if pivot - left < right - pivot:
            quick_sort_range(arr, left, pivot - 1, comp)
            left = pivot + 1
        else:
            quick_sort_range(arr, pivot + 1, right, comp)
            right = pivot - 1


def quick_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place with Lomuto-partition quicksort."""
    quick_sort_range(arr, 0, len(arr) - 1, comp)


def _optimized_range(arr: MutableSequence[Any], left: int, right: int, comp: Less) -> None:
    while left < right:
        if right - left < _SMALL_RANGE:
            insertion_sort_range(arr, left, right, comp)
            return
        mid = _median_of_three(arr, left, right, comp)
        arr[mid], arr[right] = arr[right], arr[mid]
        pivot = _partition(arr, left, right, comp)
        if pivot - left < right - pivot:
            _optimized_range(arr, left, pivot - 1, comp)
            left = pivot + 1
        else:
            _optimized_range(arr, pivot + 1, right, comp)
            right = pivot - 1


def optimized_quick_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Quicksort with median-of-three pivots and insertion sort for small ranges."""
    _optimized_range(arr, 0, len(arr) - 1, comp)


def three_way_quick_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Three-way quicksort, efficient when many items compare equal."""
    stack = [(0, len(arr) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        lt, gt = _three_way_partition(arr, left, right, comp)
        stack.append((gt, right))
        stack.append((left, lt - 1))


def iterative_quick_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Quicksort driven by an explicit stack instead of recursion."""
    stack = [(0, len(arr) - 1)]
    while stack:
        left, right = stack.pop()
        if left < right:
            pivot = _partition(arr, left, right, comp)
            stack.append((left, pivot - 1))
            stack.append((pivot + 1, right))


def quick_sort_with_stats(arr: MutableSequence[Any], comp: Less = operator.lt) -> QuickStats:
    """Quicksort in place, returning the work it did."""
    stats = QuickStats()
    if len(arr) <= 1:
        return stats

    start = time.perf_counter()
    stack = [(0, len(arr) - 1, 1)]
    while stack:
        left, right, depth = stack.pop()
        if left >= right:
            continue
        stats.recursion_depth = max(stats.recursion_depth, depth)
        stats.partitions += 1
        pivot = _partition(arr, left, right, comp, stats)
        stack.append((pivot + 1, right, depth + 1))
        stack.append((left, pivot - 1, depth + 1))
    stats.time_ms = (time.perf_counter() - start) * 1000.0
    return stats


def _choose_pivot(
    arr: MutableSequence[Any], left: int, right: int, strategy: PivotStrategy, comp: Less
) -> int:
    if strategy is PivotStrategy.FIRST:
        return left
    if strategy is PivotStrategy.LAST:
        return right
    if strategy is PivotStrategy.MIDDLE:
        return left + (right - left) // 2
    if strategy is PivotStrategy.RANDOM:
        return random.randint(left, right)
    if strategy is PivotStrategy.MEDIAN_OF_THREE:
        return _median_of_three(arr, left, right, comp)
    raise ValueError(f"unknown pivot strategy: {strategy!r}")


def quick_sort_with_pivot_strategy(
    arr: MutableSequence[Any], strategy: PivotStrategy, comp: Less = operator.lt
) -> None:
    """Quicksort in place, picking each pivot with ``strategy``."""
    stack = [(0, len(arr) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        index = _choose_pivot(arr, left, right, strategy, comp)
        arr[index], arr[right] = arr[right], arr[index]
        pivot = _partition(arr, left, right, comp)
        stack.append((pivot + 1, right))
        stack.append((left, pivot - 1))


def quick_sort_descending(arr: MutableSequence[Any]) -> None:
    """Quicksort in place, largest first."""
    quick_sort(arr, operator.gt)