"""Selection sort and its bidirectional variant."""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Sequence

Less = Callable[[Any, Any], bool]


@dataclass
class SelectionStats:
    """Counters collected while selection sorting."""

    comparisons: int = 0
    swaps: int = 0
    selections: int = 0
    time_ms: float = 0.0


def selection_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place by repeatedly selecting the smallest remaining item."""
    n = len(arr)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if comp(arr[j], arr[min_index]):
                min_index = j
        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]


def bidirectional_selection_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Selection sort placing both the minimum and the maximum on each pass."""
    left, right = 0, len(arr) - 1
    while left < right:
        min_index = max_index = left
        for i in range(left, right + 1):
            if comp(arr[i], arr[min_index]):
                min_index = i
            if not comp(arr[i], arr[max_index]) and arr[i] != arr[max_index]:
                max_index = i

        if min_index != left:
            arr[left], arr[min_index] = arr[min_index], arr[left]
            if max_index == left:
                max_index = min_index

        if max_index != right:
            arr[right], arr[max_index] = arr[max_index], arr[right]

        left += 1
        right -= 1


def selection_sort_with_stats(arr: MutableSequence[Any], comp: Less = operator.lt) -> SelectionStats:
    """Selection sort in place, returning the work it did."""
    stats = SelectionStats()
    n = len(arr)
    if n <= 1:
        return stats

    start = time.perf_counter()
    for i in range(n - 1):
        min_index = i
        stats.selections += 1
        for j in range(i + 1, n):
            stats.comparisons += 1
            if comp(arr[j], arr[min_index]):
                min_index = j
        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]
            stats.swaps += 1
    stats.time_ms = (time.perf_counter() - start) * 1000.0
    return stats


def find_extremum_index(arr: Sequence[Any], start: int, end: int, comp: Less = operator.lt) -> int:
    """Index of the first element in ``arr[start..end]`` that ``comp`` orders first.

    Raises ValueError unless ``0 <= start < end < len(arr)``.
    """
    if start >= end or start < 0 or end >= len(arr):
        raise ValueError(f"invalid range [{start}, {end}] for sequence of length {len(arr)}")
    extremum = start
    for i in range(start + 1, end + 1):
        if comp(arr[i], arr[extremum]):
            extremum = i
    return extremum


def is_sorted(arr: Sequence[Any], comp: Less = operator.lt) -> bool:
    """True if no element is ordered before its predecessor."""
    return not any(comp(b, a) for a, b in zip(arr, arr[1:]))


def selection_sort_descending(arr: MutableSequence[Any]) -> None:
    """Selection sort in place, largest first."""
    selection_sort(arr, operator.gt)