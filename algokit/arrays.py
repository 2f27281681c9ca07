"""Everyday list algorithms: searching, merging, deduplicating, rotating."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional


def is_sorted_and_dedup(values: Sequence[Any]) -> tuple[bool, list[Any]]:
    """Tell whether ``values`` is non-decreasing and drop adjacent repeats.

    Returns the sortedness flag together with a new list in which runs of
    equal neighbouring values are collapsed to one.
    """
    if not values:
        return True, []
    is_sorted = True
    deduped = [values[0]]
    for previous, current in zip(values, values[1:]):
        if current < previous:
            is_sorted = False
        if current != previous:
            deduped.append(current)
    return is_sorted, deduped


def intersection(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Distinct values present in both inputs, in order of first appearance in ``second``."""
    lookup = set(first)
    return list(dict.fromkeys(value for value in second if value in lookup))


def largest_two(values: Iterable[Any]) -> tuple[Optional[Any], Optional[Any]]:
    """Return the largest value and the largest value strictly below it.

    Missing entries are ``None``: both for an empty input, the second when all
    values are equal.
    """
    largest: Optional[Any] = None
    second: Optional[Any] = None
    for value in values:
        if largest is None or value > largest:
            second = largest
            largest = value
        elif value != largest and (second is None or value > second):
            second = value
    return largest, second


def smallest_two(values: Iterable[Any]) -> tuple[Optional[Any], Optional[Any]]:
    """Return the smallest value and the smallest value strictly above it."""
    smallest: Optional[Any] = None
    second: Optional[Any] = None
    for value in values:
        if smallest is None or value < smallest:
            second = smallest
            smallest = value
        elif value != smallest and (second is None or value < second):
            second = value
    return smallest, second


def left_rotate(values: Sequence[Any], d: int) -> list[Any]:
    """Shift ``values`` left by ``d`` places, wrapping the front to the back."""
    if d < 0 or d > len(values):
        raise ValueError("rotation must be between 0 and the length of the list")
    return list(values[d:]) + list(values[:d])


def linear_search(values: Iterable[Any], key: Any) -> int:
    """Index of the first occurrence of ``key``, or -1 when it is absent."""
    return next((index for index, value in enumerate(values) if value == key), -1)


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list; ties take from ``first``."""
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def move_zeros_right(values: Iterable[Any]) -> list[Any]:
    """Move every zero to the end, keeping the other values in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def move_zeros_left(values: Iterable[Any]) -> list[Any]:
    """Move every zero to the front, keeping the other values in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return [0] * (len(items) - len(non_zero)) + non_zero


def remove_sorted_duplicates(values: Sequence[Any]) -> list[Any]:
    """Collapse runs of equal neighbours; on sorted input this removes all duplicates."""
    return is_sorted_and_dedup(values)[1]


def unique_sorted(values: Iterable[Any]) -> list[Any]:
    """Distinct values in ascending order."""
    return sorted(set(values))


def unique_in_order(values: Iterable[Any]) -> list[Any]:
    """Distinct values in the order they first appear."""
    return list(dict.fromkeys(values))


def reverse(values: Sequence[Any]) -> list[Any]:
    """Return the values in reverse order."""
    items = list(values)
    for i in range(len(items) // 2):
        items[i], items[-i - 1] = items[-i - 1], items[i]
    return items


def rotate_matrix(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Rotate a square matrix a quarter turn clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("Input matrix must be square.")
    transposed = [list(column) for column in zip(*matrix)]
    return [row[::-1] for row in transposed]


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("number of rows must not be negative")
    triangle: list[list[int]] = []
    for _ in range(rows):
        if not triangle:
            triangle.append([1])
            continue
        previous = triangle[-1]
        inner = [a + b for a, b in zip(previous, previous[1:])]
        triangle.append([1, *inner, 1])
    return triangle


def sorted_intersection(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Common values of two sorted sequences, repeated as often as both hold them."""
    common = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            common.append(first[i])
            i += 1
            j += 1
    return common