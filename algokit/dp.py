"""Dynamic-programming classics: stairs, coins, Fibonacci, jumps, selection and tours."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two steps at a time."""
    if n <= 1:
        return 1
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 when it cannot be made.

    Every coin may be used any number of times.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")
    best = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        best[total] = min(
            (1 + best[total - coin] for coin in coins if 0 < coin <= total),
            default=math.inf,
        )
    return -1 if best[amount] == math.inf else int(best[amount])


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` up to 1 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def min_jumps(n: int, jump_distance: int) -> int:
    """Fewest jumps of at most ``jump_distance`` to cover ``n`` steps.

    When ``n`` does not exceed ``jump_distance`` the answer is ``n`` itself;
    -1 means the end cannot be reached.
    """
    if n <= jump_distance:
        return n
    if jump_distance < 1:
        return -1
    jumps = [0] + [1] * jump_distance
    for i in range(jump_distance + 1, n + 1):
        jumps.append(min(jumps[i - j] + 1 for j in range(1, jump_distance + 1)))
    return jumps[n]


def max_value(values: Sequence[int], k: int) -> int:
    """Largest sum obtainable by picking at most ``k`` of ``values``."""
    if k < 0:
        raise ValueError("k must not be negative")
    best = [0] * (k + 1)
    for count, value in enumerate(values, start=1):
        for j in range(min(count, k), 0, -1):
            best[j] = max(best[j], best[j - 1] + value)
    return best[k]


def tsp(graph: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest tour starting and ending at city 0 that visits every city."""
    size = len(graph)
    if size == 0:
        raise ValueError("graph must contain at least one city")
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    everyone = (1 << size) - 1

    @lru_cache(maxsize=None)
    def cheapest(position: int, visited: int) -> float:
        if visited == everyone:
            return graph[position][0]
        return min(
            graph[position][city] + cheapest(city, visited | (1 << city))
            for city in range(size)
            if not visited & (1 << city)
        )

    return cheapest(0, 1)