"""Merge sort: top-down, bottom-up, optimised, in-place and k-way variants."""

from __future__ import annotations

import heapq
import operator
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .insertion_sort import insertion_sort_range

Less = Callable[[Any, Any], bool]

_SMALL_RANGE = 10


@dataclass
class MergeStats:
    """Counters collected while merge sorting."""

    comparisons: int = 0
    merges: int = 0
    array_accesses: int = 0
    recursion_depth: int = 0
    time_ms: float = 0.0


def _merge(
    arr: list[Any],
    left: int,
    mid: int,
    right: int,
    comp: Less,
    stats: Optional[MergeStats] = None,
) -> None:
    """Merge the sorted runs ``arr[left..mid]`` and ``arr[mid+1..right]`` in place."""
    merged: list[Any] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if stats is not None:
            stats.comparisons += 1
            stats.array_accesses += 2
        if comp(arr[i], arr[j]):
            merged.append(arr[i])
            i += 1
        else:
            merged.append(arr[j])
            j += 1
    rest_left = arr[i:mid + 1]
    rest_right = arr[j:right + 1]
    merged.extend(rest_left)
    merged.extend(rest_right)
    arr[left:right + 1] = merged
    if stats is not None:
        stats.array_accesses += len(rest_left) + len(rest_right) + (right - left + 1)


def _sort_range(arr: list[Any], left: int, right: int, comp: Less) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _sort_range(arr, left, mid, comp)
    _sort_range(arr, mid + 1, right, comp)
    _merge(arr, left, mid, right, comp)


def merge_sort(arr: list[Any], comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place with top-down recursive merge sort."""
    _sort_range(arr, 0, len(arr) - 1, comp)


def merge_sort_range(arr: list[Any], left: int, right: int, comp: Less = operator.lt) -> None:
    """Merge sort ``arr[left..right]`` (both ends inclusive) in place."""
    _sort_range(arr, left, right, comp)


def bottom_up_merge_sort(arr: list[Any], comp: Less = operator.lt) -> None:
    """Iterative merge sort doubling the run width each pass."""
    n = len(arr)
    size = 1
    while size < n:
        for left in range(0, n - size, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            _merge(arr, left, mid, right, comp)
        size *= 2


def _optimized_range(arr: list[Any], left: int, right: int, comp: Less) -> None:
    if left >= right:
        return
    if right - left < _SMALL_RANGE:
        insertion_sort_range(arr, left, right, comp)
        return
    mid = left + (right - left) // 2
    _optimized_range(arr, left, mid, comp)
    _optimized_range(arr, mid + 1, right, comp)
    if not comp(arr[mid + 1], arr[mid]):
        return
    _merge(arr, left, mid, right, comp)


def optimized_merge_sort(arr: list[Any], comp: Less = operator.lt) -> None:
    """Merge sort using insertion sort for small ranges and skipping ordered merges."""
    _optimized_range(arr, 0, len(arr) - 1, comp)


def _in_place_merge(arr: list[Any], left: int, mid: int, right: int, comp: Less) -> None:
    start2 = mid + 1
    if not comp(arr[start2], arr[mid]):
        return
    while left <= mid and start2 <= right:
        if not comp(arr[start2], arr[left]):
            left += 1
        else:
            value = arr.pop(start2)
            arr.insert(left, value)
            left += 1
            mid += 1
            start2 += 1


def _in_place_range(arr: list[Any], left: int, right: int, comp: Less) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _in_place_range(arr, left, mid, comp)
    _in_place_range(arr, mid + 1, right, comp)
    _in_place_merge(arr, left, mid, right, comp)


def in_place_merge_sort(arr: list[Any], comp: Less = operator.lt) -> None:
    """Merge sort that merges by rotating items instead of using a buffer."""
    _in_place_range(arr, 0, len(arr) - 1, comp)


def merge_sort_with_stats(arr: list[Any], comp: Less = operator.lt) -> MergeStats:
    """Top-down merge sort in place, returning the work it did."""
    stats = MergeStats()
    if len(arr) <= 1:
        return stats

    start = time.perf_counter()

    def recurse(left: int, right: int, depth: int) -> None:
        if left >= right:
            return
        stats.recursion_depth = max(stats.recursion_depth, depth)
        mid = left + (right - left) // 2
        recurse(left, mid, depth + 1)
        recurse(mid + 1, right, depth + 1)
        stats.merges += 1
        _merge(arr, left, mid, right, comp, stats)

    recurse(0, len(arr) - 1, 1)
    stats.time_ms = (time.perf_counter() - start) * 1000.0
    return stats


class _HeapEntry:
    __slots__ = ("value", "source", "index", "comp")

    def __init__(self, value: Any, source: int, index: int, comp: Less) -> None:
        self.value = value
        self.source = source
        self.index = index
        self.comp = comp

    def __lt__(self, other: "_HeapEntry") -> bool:
        if self.comp(self.value, other.value):
            return True
        if self.comp(other.value, self.value):
            return False
        return self.source < other.source


def _k_way_merge(runs: Sequence[list[Any]], comp: Less) -> list[Any]:
    heap = [_HeapEntry(run[0], n, 0, comp) for n, run in enumerate(runs) if run]
    heapq.heapify(heap)
    result: list[Any] = []
    while heap:
        entry = heapq.heappop(heap)
        result.append(entry.value)
        run = runs[entry.source]
        following = entry.index + 1
        if following < len(run):
            heapq.heappush(heap, _HeapEntry(run[following], entry.source, following, comp))
    return result


def _k_way_sorted(items: list[Any], k: int, comp: Less) -> list[Any]:
    if len(items) <= k:
        merge_sort(items, comp)
        return items
    size = len(items) // k
    runs = []
    for n in range(k):
        start = n * size
        end = len(items) if n == k - 1 else start + size
        runs.append(_k_way_sorted(items[start:end], k, comp))
    return _k_way_merge(runs, comp)


def k_way_merge_sort(arr: list[Any], k: int = 4, comp: Less = operator.lt) -> None:
    """Split into ``k`` runs, sort each recursively and merge them with a heap."""
    if len(arr) <= 1 or k <= 1:
        merge_sort(arr, comp)
        return
    arr[:] = _k_way_sorted(list(arr), k, comp)


def merge_sorted(left: Sequence[Any], right: Sequence[Any], comp: Less = operator.lt) -> list[Any]:
    """Merge two sorted sequences into a new sorted list."""
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if comp(left[i], right[j]):
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def is_sorted(arr: Sequence[Any], comp: Less = operator.lt) -> bool:
    """True if no element is ordered before its predecessor."""
    return not any(comp(b, a) for a, b in zip(arr, arr[1:]))


def merge_sort_descending(arr: list[Any]) -> None:
    """Merge sort in place, largest first."""
    merge_sort(arr, operator.gt)