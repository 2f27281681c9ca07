"""Counting, membership and set-style operations on plain collections."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, MutableMapping
from typing import Any, Optional


def is_subset(superset: Iterable[Hashable], subset: Iterable[Hashable]) -> bool:
    """Tell whether every element of ``subset`` occurs in ``superset``."""
    return set(subset) <= set(superset)


def duplicate_counts(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Items seen more than once, mapped to how often they appear."""
    counts = Counter(items)
    return {item: count for item, count in counts.items() if count > 1}


def _spans(values: Iterable[Hashable]) -> dict[Hashable, tuple[int, int]]:
    spans: dict[Hashable, tuple[int, int]] = {}
    for index, value in enumerate(values):
        first = spans.get(value, (index, index))[0]
        spans[value] = (first, index)
    return spans


def max_distance(values: Iterable[Hashable]) -> int:
    """Largest index gap between two occurrences of the same value; 0 if none repeat."""
    return max((last - first for first, last in _spans(values).values()), default=0)


def element_with_max_distance(values: Iterable[Hashable]) -> Optional[Hashable]:
    """The first-seen value whose occurrences span the largest gap, or ``None`` if empty."""
    spans = _spans(values)
    best = max((last - first for first, last in spans.values()), default=0)
    return next(
        (value for value, (first, last) in spans.items() if last - first == best),
        None,
    )


def first_unique(values: Iterable[Hashable]) -> Optional[Hashable]:
    """The first value that occurs exactly once, or ``None``."""
    items = list(values)
    counts = Counter(items)
    return next((value for value in items if counts[value] == 1), None)


def index_map(values: Iterable[Any]) -> dict[Any, int]:
    """Map each value to the index of its last occurrence, keys in ascending order."""
    positions = {value: index for index, value in enumerate(values)}
    return dict(sorted(positions.items()))


def map_erase(mapping: MutableMapping[Any, Any], key: Any) -> bool:
    """Remove ``key`` from ``mapping``; tell whether it was present."""
    if key in mapping:
        del mapping[key]
        return True
    return False


def most_frequent(names: Iterable[Hashable]) -> Optional[Hashable]:
    """The name that first reaches the highest count, or ``None`` for no names."""
    counts: Counter = Counter()
    best: Optional[Hashable] = None
    best_count = 0
    for name in names:
        counts[name] += 1
        if counts[name] > best_count:
            best_count = counts[name]
            best = name
    return best


def are_anagrams(first: str, second: str) -> bool:
    """Tell whether the two words use exactly the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def common_elements(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Values present in both inputs, ascending and without repeats."""
    return sorted(set(first) & set(second))


def missing_elements(everyone: Iterable[Hashable], present: Iterable[Hashable]) -> list[Hashable]:
    """Members of ``everyone`` not found in ``present``, in their original order."""
    seen = set(present)
    return [member for member in everyone if member not in seen]


def organize(items: Iterable[Any]) -> list[Any]:
    """Distinct items in ascending order."""
    return sorted(set(items))