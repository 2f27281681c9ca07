"""Shortest paths: multistage graphs, Floyd-Warshall and Dijkstra with path recovery."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from typing import Optional

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a graph contains a cycle of negative total weight."""


def _square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def multistage_forward(
    matrix: Sequence[Sequence[int]], start: int, target: int
) -> Optional[int]:
    """Cheapest cost from ``start`` to ``target``, relaxing vertices forwards.

    A zero entry means no edge. Returns ``None`` when ``target`` is unreachable.
    """
    size = _square(matrix)
    cost = [INF] * size
    cost[start] = 0
    for i in range(start, size):
        if cost[i] == INF:
            continue
        for j, weight in enumerate(matrix[i]):
            if weight != 0 and cost[i] + weight < cost[j]:
                cost[j] = cost[i] + weight
    return None if cost[target] == INF else cost[target]


def multistage_backward(
    matrix: Sequence[Sequence[int]], start: int, target: int
) -> Optional[int]:
    """Cheapest cost from ``start`` to ``target``, relaxing vertices backwards from ``target``.

    A zero entry means no edge. Returns ``None`` when ``target`` is unreachable.
    """
    size = _square(matrix)
    cost = [INF] * size
    cost[target] = 0
    for i in range(target, -1, -1):
        for j, weight in enumerate(matrix[i]):
            if weight != 0 and cost[j] != INF and cost[j] + weight < cost[i]:
                cost[i] = cost[j] + weight
    return None if cost[start] == INF else cost[start]


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; ``math.inf`` marks a missing edge.

    The input is left untouched.
    """
    size = _square(dist)
    result = [list(row) for row in dist]
    for k in range(size):
        through = result[k]
        for row in result:
            if row[k] == INF:
                continue
            for j in range(size):
                if through[j] != INF and row[k] + through[j] < row[j]:
                    row[j] = row[k] + through[j]
    return result


def floyd_warshall_checked(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """Like :func:`floyd_warshall`, raising :class:`NegativeCycleError` on a negative cycle."""
    result = floyd_warshall(dist)
    if any(row[i] < 0 for i, row in enumerate(result)):
        raise NegativeCycleError("Negative weight cycle detected.")
    return result


class WeightedDigraph:
    """Directed graph with weighted edges stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, start: int, end: int, weight: int) -> None:
        """Add a directed edge from ``start`` to ``end``."""
        self._check(start)
        self._check(end)
        self._adjacency[start].append((end, weight))

    def dijkstra(self, start: int, target: int) -> Optional[tuple[int, list[int]]]:
        """Cheapest cost and vertex path from ``start`` to ``target``, or ``None`` if unreachable."""
        self._check(start)
        self._check(target)
        dist = [INF] * len(self._adjacency)
        prev: list[Optional[int]] = [None] * len(self._adjacency)
        dist[start] = 0
        queue = [(0, start)]
        while queue:
            current, u = heapq.heappop(queue)
            if current > dist[u]:
                continue
            for v, weight in self._adjacency[u]:
                if dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    prev[v] = u
                    heapq.heappush(queue, (dist[v], v))
        if dist[target] == INF:
            return None
        path = []
        at: Optional[int] = target
        while at is not None:
            path.append(at)
            at = prev[at]
        return dist[target], path[::-1]