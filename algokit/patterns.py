"""Text patterns made of stars, digits and alternating symbols."""

from __future__ import annotations


def pyramid(rows: int) -> list[str]:
    """A centred pyramid of stars, one string per row."""
    return [" " * (rows - i) + "*" * (2 * i - 1) for i in range(1, rows + 1)]


def checkerboard(rows: int, cols: int) -> list[str]:
    """Rows of alternating ``1`` and ``2``, starting with ``1`` in the top-left corner."""
    return [
        "".join("1" if (i + j) % 2 == 0 else "2" for j in range(1, cols + 1))
        for i in range(1, rows + 1)
    ]


def rotated_numbers(rows: int) -> list[str]:
    """Row ``i`` counts from ``i`` up to ``rows`` and then wraps round from 1."""
    return [
        "".join(str(j) for j in [*range(i, rows + 1), *range(1, i)])
        for i in range(1, rows + 1)
    ]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """A rectangle outlined in stars with a blank interior."""
    return [
        "".join(
            "*" if i in (1, rows) or j in (1, cols) else " "
            for j in range(1, cols + 1)
        )
        for i in range(1, rows + 1)
    ]