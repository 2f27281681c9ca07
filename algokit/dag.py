"""Longest paths and project costs on directed acyclic graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable


def _finish_order(adjacency: list[list[tuple[int, int]]]) -> list[int]:
    """Vertices in the order a depth-first search from 0, 1, ... finishes them."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour, _ in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def longest_path(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Length of the longest path from the first vertex in topological order.

    ``edges`` holds ``(u, v, weight)`` triples. Only the vertex that the
    depth-first topological sort places first is used as the source; 0 is
    returned when no path exists.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
    order = _finish_order(adjacency)
    if not order:
        return 0
    dist = [-math.inf] * n
    dist[order[-1]] = 0
    for u in reversed(order):
        if dist[u] == -math.inf:
            continue
        for v, weight in adjacency[u]:
            dist[v] = max(dist[v], dist[u] + weight)
    best = max(dist)
    return 0 if best == -math.inf else best


def min_project_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total of the cheapest costs reachable from the last task, over a topological pass.

    ``edges`` holds ``(from, to, cost)`` triples. Task ``n - 1`` starts at cost
    0; every task reached in topological order adds its cheapest cost to the
    total. Tasks caught in a cycle are left out.
    """
    if n <= 0:
        return 0
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for source, dest, cost in edges:
        graph[source].append((dest, cost))
        in_degree[dest] += 1
    min_cost = [math.inf] * n
    min_cost[n - 1] = 0
    queue = deque(vertex for vertex in range(n) if in_degree[vertex] == 0)
    while queue:
        current = queue.popleft()
        for dest, cost in graph[current]:
            if min_cost[current] != math.inf:
                min_cost[dest] = min(min_cost[dest], min_cost[current] + cost)
            in_degree[dest] -= 1
            if in_degree[dest] == 0:
                queue.append(dest)
    return sum(
        cost
        for degree, cost in zip(in_degree, min_cost)
        if degree == 0 and cost != math.inf
    )