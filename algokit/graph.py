"""Undirected graph stored as adjacency lists."""

from __future__ import annotations


class Graph:
    """Undirected graph with a fixed number of vertices."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` and ``w`` in both directions."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)
        self._adjacency[w].append(v)

    def neighbours(self, v: int) -> list[int]:
        """Vertices adjacent to ``v``, in the order their edges were added."""
        self._check(v)
        return list(self._adjacency[v])

    def describe(self) -> str:
        """Text listing every vertex's adjacency list."""
        blocks = []
        for vertex, adjacent in enumerate(self._adjacency):
            chain = "".join(f" -> {other}" for other in adjacent)
            blocks.append(f"Adjacency list of vertex {vertex}\n head{chain}\n")
        return "".join(blocks)