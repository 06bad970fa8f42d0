import bisect
import operator
import random

import pytest

from gamecore.insertion_sort import (
    binary_insertion_sort,
    binary_search,
    insertion_sort,
    insertion_sort_descending,
    insertion_sort_range,
    insertion_sort_with_stats,
    is_sorted,
)

DEMO = [64, 34, 25, 12, 22, 11, 90, 88, 76, 50, 42]


def _random_list(seed, size=60):
    rng = random.Random(seed)
    return [rng.randint(1, 40) for _ in range(size)]


def _inversions(seq):
    return sum(1 for i, a in enumerate(seq) for b in seq[i + 1:] if b < a)


DATASETS = [DEMO, _random_list(20), _random_list(21), _random_list(22), [], [3]]


@pytest.mark.parametrize("data", DATASETS)
def test_every_variant_sorts(data):
    a, b, c = (list(data) for _ in range(3))
    insertion_sort(a)
    binary_insertion_sort(b)
    insertion_sort_with_stats(c)
    expected = sorted(data)
    assert a == expected
    assert b == expected
    assert c == expected


def test_descending_comparator():
    a, b, c = (list(DEMO) for _ in range(3))
    insertion_sort(a, operator.gt)
    binary_insertion_sort(b, operator.gt)
    insertion_sort_with_stats(c, operator.gt)
    expected = sorted(DEMO, reverse=True)
    assert a == expected
    assert b == expected
    assert c == expected


def test_stable():
    items = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (0, "e"), (2, "f")]

    def by_key(x, y):
        return x[0] < y[0]

    a, b, c = (list(items) for _ in range(3))
    insertion_sort(a, by_key)
    binary_insertion_sort(b, by_key)
    insertion_sort_with_stats(c, by_key)
    expected = sorted(items, key=lambda p: p[0])
    assert a == expected
    assert b == expected
    assert c == expected


def test_descending_helper():
    data = list(DEMO)
    insertion_sort_descending(data)
    assert data == sorted(DEMO, reverse=True)


def test_sort_range_only_touches_range():
    data = list(DEMO)
    left, right = 2, 7
    insertion_sort_range(data, left, right)
    assert data[:left] == DEMO[:left]
    assert data[right + 1:] == DEMO[right + 1:]
    assert data[left:right + 1] == sorted(DEMO[left:right + 1])


def test_sort_range_empty_range_is_noop():
    data = list(DEMO)
    insertion_sort_range(data, 5, 5)
    insertion_sort_range(data, 6, 2)
    assert data == DEMO


@pytest.mark.parametrize("key", [0, 1, 3, 4, 5, 9])
def test_binary_search_matches_bisect_right(key):
    data = [1, 3, 3, 3, 5, 8]
    assert binary_search(data, 0, len(data) - 1, key) == bisect.bisect_right(data, key)


def test_binary_search_within_subrange():
    data = [1, 2, 3, 4, 5, 6, 7]
    assert binary_search(data, 2, 4, 10) == bisect.bisect_right(data, 10, 2, 5)
    assert binary_search(data, 2, 4, 0) == bisect.bisect_right(data, 0, 2, 5)


def test_stats_moves_track_inversions():
    data = _random_list(8, 30)
    inversions = _inversions(data)
    stats = insertion_sort_with_stats(data)
    assert stats.insertions == len(data) - 1
    assert stats.moves - stats.insertions == inversions
    assert data == sorted(data)
    assert stats.time_ms >= 0.0


def test_stats_on_sorted_input():
    data = list(range(12))
    stats = insertion_sort_with_stats(data)
    assert stats.comparisons == len(data) - 1
    assert stats.moves == len(data) - 1
    assert stats.insertions == len(data) - 1


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert not is_sorted([3, 1])
    assert is_sorted(["c", "b", "a"], operator.gt)