import random

import pytest

from algokit.sorting import partition, quick_sort, randomized_quick_sort


def test_partition_places_pivot():
    original = [3, 8, 1, 9, 4, 7, 2]
    values = list(original)
    index = partition(values, 0, len(values) - 1)
    pivot = values[index]
    assert pivot == original[-1]
    assert all(v <= pivot for v in values[:index])
    assert all(v > pivot for v in values[index + 1:])
    assert sorted(values) == sorted(original)


def test_partition_subrange_leaves_rest():
    values = [9, 5, 3, 6, 1, 0]
    index = partition(values, 1, 4)
    assert values[0] == 9 and values[5] == 0
    assert 1 <= index <= 4
    assert sorted(values[1:5]) == [1, 3, 5, 6]
    assert all(v <= values[index] for v in values[1:index])


@pytest.mark.parametrize(
    "data",
    [[], [1], [10, 7, 8, 9, 1, 5], [5, 5, 5], [3, -1, 2, -1, 0], list(range(50, 0, -1))],
)
def test_quick_sort_matches_sorted(data):
    assert quick_sort(data) == sorted(data)


def test_quick_sort_does_not_modify_input():
    data = [4, 2, 3]
    quick_sort(data)
    assert data == [4, 2, 3]


def test_quick_sort_large_presorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_randomized_quick_sort_matches_sorted(seed):
    data = random.Random(seed + 100).choices(range(-20, 20), k=200)
    assert randomized_quick_sort(data, random.Random(seed)) == sorted(data)


def test_randomized_quick_sort_default_rng():
    data = [10, 7, 8, 9, 1, 5]
    assert randomized_quick_sort(data) == sorted(data)
    assert data == [10, 7, 8, 9, 1, 5]


def test_randomized_quick_sort_strings():
    data = ["pear", "apple", "fig", "apple"]
    assert randomized_quick_sort(data, random.Random(7)) == sorted(data)