import operator
import random

import pytest

from gamecore.merge_sort import (
    MergeStats,
    bottom_up_merge_sort,
    in_place_merge_sort,
    is_sorted,
    k_way_merge_sort,
    merge_sort,
    merge_sort_descending,
    merge_sort_range,
    merge_sort_with_stats,
    merge_sorted,
    optimized_merge_sort,
)


def _random_data():
    rng = random.Random(1234)
    return [rng.randint(-500, 500) for _ in range(300)]


SAMPLES = [
    [],
    [7],
    [2, 1],
    [64, 34, 25, 12, 22, 11, 90, 88, 76, 50, 42],
    [5, 3, 5, 3, 5, 3, 5, 3, 5, 3],
    list(range(10, 0, -1)),
    list(range(1, 11)),
    _random_data(),
]


@pytest.mark.parametrize("data", SAMPLES)
def test_every_variant_sorts(data):
    a, b, c, d, e = (list(data) for _ in range(5))
    merge_sort(a)
    bottom_up_merge_sort(b)
    optimized_merge_sort(c)
    in_place_merge_sort(d)
    k_way_merge_sort(e)
    expected = sorted(data)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected
    assert e == expected


def test_custom_comparator_descending():
    data = ["banana", "apple", "cherry", "date", "elderberry"]
    a, b, c, d, e = (list(data) for _ in range(5))
    merge_sort(a, comp=operator.gt)
    bottom_up_merge_sort(b, comp=operator.gt)
    optimized_merge_sort(c, comp=operator.gt)
    in_place_merge_sort(d, comp=operator.gt)
    k_way_merge_sort(e, comp=operator.gt)
    expected = sorted(data, reverse=True)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected
    assert e == expected


def test_sort_by_length():
    words = ["banana", "apple", "cherry", "date", "elderberry"]
    merge_sort(words, lambda a, b: len(a) < len(b))
    assert [len(w) for w in words] == sorted(len(w) for w in words)


def test_descending_helper():
    arr = [3, 1, 4, 1, 5, 9, 2, 6]
    merge_sort_descending(arr)
    assert arr == [9, 6, 5, 4, 3, 2, 1, 1]


def test_sort_range_touches_only_range():
    arr = [9, 8, 7, 6, 5, 4, 3]
    merge_sort_range(arr, 2, 5)
    assert arr == [9, 8, 4, 5, 6, 7, 3]


def test_k_way_with_various_k():
    rng = random.Random(7)
    data = [rng.randint(0, 50) for _ in range(101)]
    for k in (1, 2, 3, 4, 8, 200):
        arr = list(data)
        k_way_merge_sort(arr, k)
        assert arr == sorted(data)


def test_merge_sorted():
    assert merge_sorted([1, 3, 5], [2, 4]) == [1, 2, 3, 4, 5]
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([5, 3], [4, 1], operator.gt) == [5, 4, 3, 1]


def test_stats_invariants():
    data = [64, 34, 25, 12, 22, 11, 90, 88]
    arr = list(data)
    stats = merge_sort_with_stats(arr)
    assert arr == sorted(data)
    assert stats.merges == len(data) - 1
    assert stats.recursion_depth >= 1
    assert stats.comparisons > 0
    assert stats.array_accesses >= stats.comparisons * 2
    assert stats.time_ms >= 0.0


def test_stats_trivial_input():
    assert merge_sort_with_stats([1]) == MergeStats()


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([2, 1])
    assert is_sorted([3, 2, 1], operator.gt)