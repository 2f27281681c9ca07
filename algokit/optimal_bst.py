"""Optimal binary search tree built by dynamic programming over key frequencies."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate
from typing import Any


class OptimalBST:
    """Optimal binary search tree for sorted ``keys`` searched with the given frequencies."""

    def __init__(self, keys: Sequence[Any], freq: Sequence[int]) -> None:
        if len(keys) != len(freq):
            raise ValueError("keys and frequencies must have the same length")
        if not keys:
            raise ValueError("at least one key is required")
        self.keys = list(keys)
        self.freq = list(freq)
        size = len(self.keys)
        self._prefix = [0, *accumulate(self.freq)]
        self._cost = [[0] * size for _ in range(size)]
        self._root = [[0] * size for _ in range(size)]
        self._build()

    def _weight(self, i: int, j: int) -> int:
        return self._prefix[j + 1] - self._prefix[i]

    def _sub_cost(self, i: int, j: int) -> int:
        return self._cost[i][j] if i <= j else 0

    def _build(self) -> None:
        size = len(self.keys)
        for i, weight in enumerate(self.freq):
            self._cost[i][i] = weight
            self._root[i][i] = i
        for span in range(2, size + 1):
            for i in range(size - span + 1):
                j = i + span - 1
                weight = self._weight(i, j)
                best_cost, best_root = min(
                    (
                        (self._sub_cost(i, r - 1) + self._sub_cost(r + 1, j) + weight, r)
                        for r in range(i, j + 1)
                    ),
                    key=lambda pair: pair[0],
                )
                self._cost[i][j] = best_cost
                self._root[i][j] = best_root

    def min_cost(self) -> int:
        """Minimum total weighted search cost of the whole tree."""
        return self._cost[0][len(self.keys) - 1]

    def root_index(self, i: int, j: int) -> int:
        """Index of the key chosen as root for the keys ``i`` to ``j`` inclusive."""
        if not 0 <= i <= j < len(self.keys):
            raise IndexError(f"invalid key range [{i}, {j}]")
        return self._root[i][j]

    def describe(self) -> list[str]:
        """Lines describing the tree structure, root first, then left and right subtrees."""
        lines: list[str] = []

        def walk(i: int, j: int) -> None:
            if i > j:
                return
            r = self._root[i][j]
            key = self.keys[r]
            lines.append(f"Key: {key} (Frequency: {self.freq[r]})")
            lines.append(f"Left subtree of {key}:")
            walk(i, r - 1)
            lines.append(f"Right subtree of {key}:")
            walk(r + 1, j)

        walk(0, len(self.keys) - 1)
        return lines