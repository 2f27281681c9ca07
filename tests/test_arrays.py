from collections import Counter

import pytest

from algokit import arrays


def test_is_sorted_and_dedup_sorted_input():
    values = [1, 2, 2, 3, 4, 4, 5]
    is_sorted, deduped = arrays.is_sorted_and_dedup(values)
    assert is_sorted is True
    assert deduped == sorted(set(values))


def test_is_sorted_and_dedup_unsorted_input():
    is_sorted, deduped = arrays.is_sorted_and_dedup([3, 1, 2])
    assert is_sorted is False
    assert deduped == [3, 1, 2]


def test_is_sorted_and_dedup_empty():
    assert arrays.is_sorted_and_dedup([]) == (True, [])


def test_intersection_matches_set_semantics():
    first, second = [1, 2, 2, 1], [2, 2]
    result = arrays.intersection(first, second)
    assert set(result) == set(first) & set(second)
    assert len(result) == len(set(result))


def test_largest_two_source_example():
    assert arrays.largest_two([10, 20, 4, 45, 99, 99, 23]) == (99, 45)


def test_largest_two_edge_cases():
    assert arrays.largest_two([]) == (None, None)
    assert arrays.largest_two([5, 5]) == (5, None)


def test_smallest_two():
    values = [10, 20, 4, 45, 99, 99, 23]
    smallest, second = arrays.smallest_two(values)
    assert smallest == min(values)
    assert second == sorted(set(values))[1]
    assert arrays.smallest_two([]) == (None, None)


def test_left_rotate_source_example():
    assert arrays.left_rotate([1, 2, 3, 4, 5, 6, 7], 2) == [3, 4, 5, 6, 7, 1, 2]


@pytest.mark.parametrize("d", [0, 1, 3, 5])
def test_left_rotate_round_trip(d):
    values = [9, 8, 7, 6, 5]
    rotated = arrays.left_rotate(values, d)
    assert arrays.left_rotate(rotated, len(values) - d) == values


def test_left_rotate_rejects_bad_amount():
    with pytest.raises(ValueError):
        arrays.left_rotate([1, 2], 3)
    with pytest.raises(ValueError):
        arrays.left_rotate([1, 2], -1)


def test_linear_search():
    values = [10, 20, 30, 40, 50]
    index = arrays.linear_search(values, 30)
    assert values[index] == 30
    assert arrays.linear_search(values, 35) == -1


def test_merge_sorted():
    first, second = [1, 3, 5, 7], [2, 4, 6, 8]
    merged = arrays.merge_sorted(first, second)
    assert merged == sorted(first + second)
    assert arrays.merge_sorted([], second) == second


def test_move_zeros_right_and_left():
    values = [0, 1, 0, 3, 12, 0, 5]
    non_zero = [v for v in values if v != 0]
    zeros = values.count(0)
    right = arrays.move_zeros_right(values)
    left = arrays.move_zeros_left(values)
    assert right[: len(non_zero)] == non_zero
    assert right[len(non_zero):] == [0] * zeros
    assert left[:zeros] == [0] * zeros
    assert left[zeros:] == non_zero


def test_remove_sorted_duplicates():
    values = [1, 1, 2, 2, 3, 4, 4, 5]
    assert arrays.remove_sorted_duplicates(values) == sorted(set(values))


def test_unique_sorted_and_in_order():
    values = [3, 1, 3, 2, 1]
    ordered = arrays.unique_sorted(values)
    assert ordered == sorted(ordered)
    assert set(ordered) == set(values)
    in_order = arrays.unique_in_order(values)
    assert set(in_order) == set(values)
    assert len(in_order) == len(set(values))
    positions = [values.index(v) for v in in_order]
    assert positions == sorted(positions)


def test_reverse():
    values = [1, 2, 3, 4, 5]
    reversed_values = arrays.reverse(values)
    assert reversed_values[0] == values[-1]
    assert arrays.reverse(reversed_values) == values
    assert values == [1, 2, 3, 4, 5]


def test_rotate_matrix():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotated = arrays.rotate_matrix(matrix)
    assert rotated[0] == [row[0] for row in reversed(matrix)]
    result = matrix
    for _ in range(4):
        result = arrays.rotate_matrix(result)
    assert result == matrix


def test_rotate_matrix_requires_square():
    with pytest.raises(ValueError):
        arrays.rotate_matrix([[1, 2, 3], [4, 5, 6]])


def test_pascal_triangle_invariants():
    triangle = arrays.pascal_triangle(6)
    assert len(triangle) == 6
    for i, row in enumerate(triangle):
        assert len(row) == i + 1
        assert sum(row) == 2**i
        assert row == row[::-1]


def test_pascal_triangle_bounds():
    assert arrays.pascal_triangle(0) == []
    with pytest.raises(ValueError):
        arrays.pascal_triangle(-1)


def test_sorted_intersection():
    first = [1, 2, 3, 3, 4, 5, 6, 7]
    second = [3, 3, 4, 4, 5, 8]
    result = arrays.sorted_intersection(first, second)
    assert Counter(result) == Counter(first) & Counter(second)
    assert result == sorted(result)