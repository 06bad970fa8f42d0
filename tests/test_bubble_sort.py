import operator
import random

import pytest

from gamecore.bubble_sort import (
    bubble_sort,
    bubble_sort_descending,
    bubble_sort_with_stats,
    cocktail_sort,
    is_sorted,
    optimized_bubble_sort,
)

DEMO = [64, 34, 25, 12, 22, 11, 90, 88, 76, 50, 42]


def _inversions(seq):
    return sum(1 for i, a in enumerate(seq) for b in seq[i + 1:] if b < a)


def _random_list(seed, size=60):
    rng = random.Random(seed)
    return [rng.randint(1, 50) for _ in range(size)]


DATASETS = [DEMO, _random_list(1), _random_list(2), _random_list(3), [], [7]]


@pytest.mark.parametrize("data", DATASETS)
def test_every_variant_sorts(data):
    a, b, c, d = (list(data) for _ in range(4))
    bubble_sort(a)
    optimized_bubble_sort(b)
    cocktail_sort(c)
    bubble_sort_with_stats(d)
    expected = sorted(data)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected


def test_custom_comparator_descending():
    a, b, c, d = (list(DEMO) for _ in range(4))
    bubble_sort(a, operator.gt)
    optimized_bubble_sort(b, operator.gt)
    cocktail_sort(c, operator.gt)
    bubble_sort_with_stats(d, operator.gt)
    expected = sorted(DEMO, reverse=True)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected


def test_stable():
    items = [(3, "a"), (1, "b"), (3, "c"), (2, "d"), (1, "e"), (3, "f")]

    def by_key(x, y):
        return x[0] < y[0]

    a, b, c, d = (list(items) for _ in range(4))
    bubble_sort(a, by_key)
    optimized_bubble_sort(b, by_key)
    cocktail_sort(c, by_key)
    bubble_sort_with_stats(d, by_key)
    expected = sorted(items, key=lambda p: p[0])
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected


def test_strings_sorted_by_length():
    words = ["banana", "apple", "cherry", "date", "elderberry"]
    data = list(words)
    bubble_sort(data, lambda a, b: len(a) < len(b))
    assert data == sorted(words, key=len)


def test_descending_helper():
    data = list(DEMO)
    bubble_sort_descending(data)
    assert data == sorted(DEMO, reverse=True)


def test_optimized_on_sorted_input_makes_one_pass():
    data = list(range(1, 11))
    assert optimized_bubble_sort(data) == 1
    assert data == list(range(1, 11))


def test_optimized_on_empty_makes_no_pass():
    assert optimized_bubble_sort([]) == 0


def test_optimized_passes_bounded():
    data = _random_list(9, 30)
    passes = optimized_bubble_sort(data)
    assert 1 <= passes <= len(data) - 1
    assert is_sorted(data)


def test_stats_swaps_equal_inversions():
    data = _random_list(5, 40)
    inversions = _inversions(data)
    stats = bubble_sort_with_stats(data)
    assert stats.swaps == inversions
    assert data == sorted(data)
    assert stats.time_ms >= 0.0


def test_stats_on_sorted_input():
    data = list(range(20))
    stats = bubble_sort_with_stats(data)
    assert stats.passes == 1
    assert stats.comparisons == len(data) - 1
    assert stats.swaps == 0


def test_stats_trivial_input_is_zero():
    stats = bubble_sort_with_stats([42])
    assert (stats.comparisons, stats.swaps, stats.passes) == (0, 0, 0)


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([2, 1])
    assert is_sorted([3, 2, 1], operator.gt)
    assert is_sorted([])