"""Bubble sort, its early-exit and bidirectional (cocktail) variants."""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Sequence

Less = Callable[[Any, Any], bool]


@dataclass
class BubbleStats:
    """Counters collected while bubble sorting."""

    comparisons: int = 0
    swaps: int = 0
    passes: int = 0
    time_ms: float = 0.0


def bubble_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place; ``comp(a, b)`` is true when ``a`` goes before ``b``."""
    n = len(arr)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if comp(arr[j + 1], arr[j]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def optimized_bubble_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> int:
    """Bubble sort that stops after a pass without swaps; returns the passes made."""
    n = len(arr)
    passes = 0
    for i in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - i - 1):
            if comp(arr[j + 1], arr[j]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return passes


def cocktail_sort(arr: MutableSequence[Any], comp: Less = operator.lt) -> None:
    """Bidirectional bubble sort, in place."""
    left, right = 0, len(arr) - 1
    while left < right:
        for i in range(left, right):
            if comp(arr[i + 1], arr[i]):
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
        right -= 1
        for i in range(right, left, -1):
            if comp(arr[i], arr[i - 1]):
                arr[i - 1], arr[i] = arr[i], arr[i - 1]
        left += 1


def bubble_sort_with_stats(arr: MutableSequence[Any], comp: Less = operator.lt) -> BubbleStats:
    """Early-exit bubble sort in place, returning the work it did."""
    stats = BubbleStats()
    n = len(arr)
    if n <= 1:
        return stats

    start = time.perf_counter()
    for i in range(n - 1):
        stats.passes += 1
        swapped = False
        for j in range(n - i - 1):
            stats.comparisons += 1
            if comp(arr[j + 1], arr[j]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                stats.swaps += 1
                swapped = True
        if not swapped:
            break
    stats.time_ms = (time.perf_counter() - start) * 1000.0
    return stats


def is_sorted(arr: Sequence[Any], comp: Less = operator.lt) -> bool:
    """True if no element is ordered before its predecessor."""
    return not any(comp(b, a) for a, b in zip(arr, arr[1:]))


def bubble_sort_descending(arr: MutableSequence[Any]) -> None:
    """Bubble sort in place, largest first."""
    bubble_sort(arr, operator.gt)