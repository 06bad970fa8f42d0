"""Uniform entry point to the sorting algorithms, with recommendation and benchmarking."""

from __future__ import annotations

import operator
import random
import string
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

from .bubble_sort import bubble_sort
from .insertion_sort import insertion_sort
from .merge_sort import bottom_up_merge_sort, merge_sort, optimized_merge_sort
from .quick_sort import optimized_quick_sort, quick_sort, three_way_quick_sort
from .selection_sort import selection_sort

Less = Callable[[Any, Any], bool]

VERSION = "1.0.0"

_NEARLY_SORTED_THRESHOLD = 0.8
_DUPLICATE_THRESHOLD = 0.3
_NEARLY_SORTED_SAMPLE = 100
_DUPLICATE_SAMPLE = 1000


class SortType(Enum):
    """Available sorting algorithms."""

    BUBBLE_SORT = "bubble_sort"
    SELECTION_SORT = "selection_sort"
    INSERTION_SORT = "insertion_sort"
    QUICK_SORT = "quick_sort"
    MERGE_SORT = "merge_sort"
    OPTIMIZED_QUICK_SORT = "optimized_quick_sort"
    OPTIMIZED_MERGE_SORT = "optimized_merge_sort"
    THREE_WAY_QUICK_SORT = "three_way_quick_sort"
    BOTTOM_UP_MERGE_SORT = "bottom_up_merge_sort"
    AUTO = "auto"


@dataclass
class DataCharacteristics:
    """What is known about the data to be sorted."""

    size: int = 0
    is_nearly_sorted: bool = False
    has_many_duplicates: bool = False
    is_memory_limited: bool = False
    requires_stability: bool = False
    is_real_time_processing: bool = False


@dataclass
class SortPerformance:
    """Result of timing one algorithm on one data set."""

    algorithm: SortType
    time_ms: float = 0.0
    comparisons: int = 0
    swaps: int = 0
    memory_usage: int = 0
    description: str = ""


_ALGORITHMS: dict[SortType, Callable[[list, Less], None]] = {
    SortType.BUBBLE_SORT: bubble_sort,
    SortType.SELECTION_SORT: selection_sort,
    SortType.INSERTION_SORT: insertion_sort,
    SortType.QUICK_SORT: quick_sort,
    SortType.MERGE_SORT: merge_sort,
    SortType.OPTIMIZED_QUICK_SORT: optimized_quick_sort,
    SortType.OPTIMIZED_MERGE_SORT: optimized_merge_sort,
    SortType.THREE_WAY_QUICK_SORT: three_way_quick_sort,
    SortType.BOTTOM_UP_MERGE_SORT: bottom_up_merge_sort,
}

_MERGE_FAMILY = frozenset(
    {SortType.MERGE_SORT, SortType.OPTIMIZED_MERGE_SORT, SortType.BOTTOM_UP_MERGE_SORT}
)

_ALGORITHM_INFO = {
    SortType.BUBBLE_SORT: "Bubble sort: simple exchange sort, suited to small data sets and teaching",
    SortType.SELECTION_SORT: "Selection sort: selects the smallest item each pass, few swaps",
    SortType.INSERTION_SORT: "Insertion sort: builds a sorted prefix, fast on small or nearly sorted data",
    SortType.QUICK_SORT: "Quick sort: divide and conquer with excellent average performance on large data",
    SortType.MERGE_SORT: "Merge sort: stable divide and conquer with steady running time",
    SortType.OPTIMIZED_QUICK_SORT: "Optimized quick sort: median-of-three pivots plus insertion sort for small ranges",
    SortType.OPTIMIZED_MERGE_SORT: "Optimized merge sort: insertion sort for small ranges",
    SortType.THREE_WAY_QUICK_SORT: "Three-way quick sort: quick sort tuned for repeated items",
    SortType.BOTTOM_UP_MERGE_SORT: "Bottom-up merge sort: iterative merge sort",
}

_QUADRATIC_STABLE = "Time: O(n²), Space: O(1), stable"
_QUICK_COMPLEXITY = "Time: O(n log n), Space: O(log n), unstable"
_MERGE_COMPLEXITY = "Time: O(n log n), Space: O(n), stable"

_COMPLEXITY_INFO = {
    SortType.BUBBLE_SORT: _QUADRATIC_STABLE,
    SortType.SELECTION_SORT: "Time: O(n²), Space: O(1), unstable",
    SortType.INSERTION_SORT: _QUADRATIC_STABLE,
    SortType.QUICK_SORT: _QUICK_COMPLEXITY,
    SortType.OPTIMIZED_QUICK_SORT: _QUICK_COMPLEXITY,
    SortType.THREE_WAY_QUICK_SORT: _QUICK_COMPLEXITY,
    SortType.MERGE_SORT: _MERGE_COMPLEXITY,
    SortType.OPTIMIZED_MERGE_SORT: _MERGE_COMPLEXITY,
    SortType.BOTTOM_UP_MERGE_SORT: _MERGE_COMPLEXITY,
}

_SMALL_DATA_ALGORITHMS = (
    SortType.BUBBLE_SORT,
    SortType.SELECTION_SORT,
    SortType.INSERTION_SORT,
    SortType.QUICK_SORT,
    SortType.MERGE_SORT,
)

_LARGE_DATA_ALGORITHMS = (
    SortType.INSERTION_SORT,
    SortType.QUICK_SORT,
    SortType.MERGE_SORT,
    SortType.OPTIMIZED_QUICK_SORT,
    SortType.OPTIMIZED_MERGE_SORT,
)


def library_info() -> str:
    """Name and version of the sorting library."""
    return f"Sorting Library v{VERSION}"


def sort_with(arr: list[Any], sort_type: SortType, comp: Less = operator.lt) -> None:
    """Sort ``arr`` in place with the chosen algorithm."""
    if sort_type is SortType.AUTO:
        auto_sort(arr, None, comp)
        return
    try:
        algorithm = _ALGORITHMS[sort_type]
    except KeyError:
        raise ValueError(f"unknown sort type: {sort_type!r}") from None
    algorithm(arr, comp)


def auto_sort(
    arr: list[Any],
    characteristics: Optional[DataCharacteristics] = None,
    comp: Less = operator.lt,
) -> SortType:
    """Pick an algorithm for ``arr``, sort with it in place and return the choice.

    When no characteristics are given, or their size is zero, ``arr`` is analysed.
    """
    actual = characteristics if characteristics is not None else DataCharacteristics()
    if actual.size == 0:
        actual = analyze_data(arr)
    chosen = recommend_algorithm(len(arr), actual)
    sort_with(arr, chosen, comp)
    return chosen


def recommend_algorithm(
    size: int, characteristics: Optional[DataCharacteristics] = None
) -> SortType:
    """The algorithm best suited to ``size`` items with the given characteristics."""
    traits = characteristics if characteristics is not None else DataCharacteristics()
    if size < 50:
        return SortType.INSERTION_SORT
    if traits.is_nearly_sorted:
        return SortType.INSERTION_SORT
    if traits.requires_stability:
        return SortType.MERGE_SORT
    if traits.is_memory_limited:
        return SortType.OPTIMIZED_QUICK_SORT
    if traits.has_many_duplicates:
        return SortType.THREE_WAY_QUICK_SORT
    if traits.is_real_time_processing and size < 1000:
        return SortType.INSERTION_SORT
    if size > 10000:
        return SortType.OPTIMIZED_QUICK_SORT
    return SortType.MERGE_SORT


def _measure(data: Sequence[Any], sort_type: SortType, comp: Less) -> SortPerformance:
    work = list(data)
    performance = SortPerformance(algorithm=sort_type, description=algorithm_info(sort_type))
    start = time.perf_counter()
    try:
        sort_with(work, sort_type, comp)
    except Exception:
        performance.time_ms = -1.0
        performance.description += " (execution failed)"
        return performance
    performance.time_ms = (time.perf_counter() - start) * 1000.0
    item_size = sys.getsizeof(work[0]) if work else 0
    if sort_type in _MERGE_FAMILY:
        performance.memory_usage = len(work) * item_size
    else:
        performance.memory_usage = item_size
    return performance


def benchmark(
    test_data: Sequence[Any], algorithms: Optional[Iterable[SortType]] = None
) -> list[SortPerformance]:
    """Time each algorithm on a copy of ``test_data``; fastest first.

    Without an explicit list, quadratic algorithms are skipped for more than 1000 items.
    """
    chosen = list(algorithms) if algorithms is not None else []
    if not chosen:
        chosen = list(
            _LARGE_DATA_ALGORITHMS if len(test_data) > 1000 else _SMALL_DATA_ALGORITHMS
        )
    results = [_measure(test_data, sort_type, operator.lt) for sort_type in chosen]
    results.sort(key=lambda performance: performance.time_ms)
    return results


def algorithm_info(sort_type: SortType) -> str:
    """Short description of an algorithm."""
    return _ALGORITHM_INFO.get(sort_type, "Unknown algorithm")


def complexity_info(sort_type: SortType) -> str:
    """Time and space complexity and stability of an algorithm."""
    return _COMPLEXITY_INFO.get(sort_type, "Complexity unknown")


def is_sorted(arr: Sequence[Any], comp: Less = operator.lt) -> bool:
    """True if no element is ordered before its predecessor."""
    return not any(comp(b, a) for a, b in zip(arr, arr[1:]))


def _is_nearly_sorted(arr: Sequence[Any], threshold: float = _NEARLY_SORTED_THRESHOLD) -> bool:
    if len(arr) <= 1:
        return True
    sample = arr[:_NEARLY_SORTED_SAMPLE]
    inversions = 0
    pairs = 0
    for i, first in enumerate(sample):
        for second in sample[i + 1:]:
            pairs += 1
            if first > second:
                inversions += 1
    return inversions / pairs < (1.0 - threshold)


def _has_many_duplicates(arr: Sequence[Any], threshold: float = _DUPLICATE_THRESHOLD) -> bool:
    if len(arr) <= 1:
        return False
    sample = arr[:_DUPLICATE_SAMPLE]
    unique_ratio = len(set(sample)) / len(sample)
    return unique_ratio < (1.0 - threshold)


def analyze_data(arr: Sequence[Any]) -> DataCharacteristics:
    """Estimate size, sortedness and duplication of ``arr`` from samples."""
    characteristics = DataCharacteristics(size=len(arr))
    if not arr:
        return characteristics
    characteristics.is_nearly_sorted = _is_nearly_sorted(arr)
    characteristics.has_many_duplicates = _has_many_duplicates(arr)
    return characteristics


def random_data(size: int, min_val: Any = 0, max_val: Any = 0) -> list[Any]:
    """Random test data whose kind follows ``min_val``.

    Integers and floats are drawn uniformly from ``[min_val, max_val]``; for strings,
    lowercase words of 3 to 10 letters are produced. Other kinds give an empty list.
    """
    if isinstance(min_val, str):
        return [
            "".join(random.choice(string.ascii_lowercase) for _ in range(random.randint(3, 10)))
            for _ in range(size)
        ]
    numeric = (int, float)
    if not isinstance(min_val, numeric) or not isinstance(max_val, numeric):
        return []
    if min_val > max_val:
        raise ValueError(f"min_val {min_val!r} exceeds max_val {max_val!r}")
    if isinstance(min_val, float) or isinstance(max_val, float):
        return [random.uniform(min_val, max_val) for _ in range(size)]
    return [random.randint(min_val, max_val) for _ in range(size)]


def sorted_data(size: int, start: Any = 0) -> list[Any]:
    """Ascending run ``start, start + 1, ...`` of ``size`` items."""
    return [start + i for i in range(size)]


def reverse_sorted_data(size: int, start: Any = 0) -> list[Any]:
    """Descending run ``start, start - 1, ...`` of ``size`` items."""
    return [start - i for i in range(size)]


def duplicate_data(size: int, unique_count: int) -> list[int]:
    """``size`` random integers drawn from ``range(unique_count)``."""
    if unique_count <= 0:
        raise ValueError("unique_count must be positive")
    return [random.randrange(unique_count) for _ in range(size)]


def best_algorithm(
    size: int,
    is_nearly_sorted: bool = False,
    has_duplicates: bool = False,
    requires_stability: bool = False,
) -> SortType:
    """Recommendation for data described by a few flags."""
    characteristics = DataCharacteristics(
        size=size,
        is_nearly_sorted=is_nearly_sorted,
        has_many_duplicates=has_duplicates,
        requires_stability=requires_stability,
    )
    return recommend_algorithm(size, characteristics)