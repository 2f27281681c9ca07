"""Quick sort with a last-element pivot and with a random pivot."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any, MutableSequence, Optional


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around its last element.

    Values not greater than the pivot end up before it, larger ones after it.
    Returns the pivot's final index.
    """
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def _random_partition(values: list[Any], low: int, high: int, rng: random.Random) -> int:
    chosen = rng.randint(low, high)
    values[chosen], values[high] = values[high], values[chosen]
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def _sort(values: list[Any], split) -> list[Any]:
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot_index = split(values, low, high)
        ranges.append((low, pivot_index - 1))
        ranges.append((pivot_index + 1, high))
    return values


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using quick sort."""
    return _sort(list(values), partition)


def randomized_quick_sort(
    values: Iterable[Any], rng: Optional[random.Random] = None
) -> list[Any]:
    """Return a sorted copy of ``values``, choosing each pivot at random from ``rng``."""
    generator = rng if rng is not None else random.Random()
    return _sort(
        list(values),
        lambda items, low, high: _random_partition(items, low, high, generator),
    )