"""Singly linked list built from plain nodes, with insertion, removal and search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Optional["Node"] = None


def from_list(values: Iterable[Any]) -> Optional[Node]:
    """Build a linked list holding ``values`` in order; an empty input gives ``None``."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Optional[Node]) -> Iterator[Any]:
    """Yield the values of the list starting at ``head``."""
    node = head
    while node is not None:
        yield node.data
        node = node.next


def to_list(head: Optional[Node]) -> list[Any]:
    """Return the values of the list as a Python list."""
    return list(iter_values(head))


def length(head: Optional[Node]) -> int:
    """Count the nodes in the list."""
    return sum(1 for _ in iter_values(head))


def contains(head: Optional[Node], value: Any) -> bool:
    """Tell whether ``value`` is stored in the list."""
    return any(item == value for item in iter_values(head))


def format_list(head: Optional[Node]) -> str:
    """Render the list as space separated values, or ``Empty list.`` when empty."""
    if head is None:
        return "Empty list."
    return " ".join(str(value) for value in iter_values(head))


def remove_head(head: Optional[Node]) -> Optional[Node]:
    """Drop the first node and return the new head."""
    if head is None:
        return None
    new_head = head.next
    head.next = None
    return new_head


def remove_tail(head: Optional[Node]) -> Optional[Node]:
    """Drop the last node; a list of one node becomes empty."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def remove_kth(head: Optional[Node], k: int) -> Optional[Node]:
    """Remove the ``k``-th node (counted from 1); out-of-range ``k`` leaves the list as is."""
    if head is None:
        return None
    if k == 1:
        return remove_head(head)
    prev: Optional[Node] = None
    node: Optional[Node] = head
    position = 0
    while node is not None:
        position += 1
        if position == k:
            prev.next = node.next
            node.next = None
            break
        prev = node
        node = node.next
    return head


def insert_head(head: Optional[Node], value: Any) -> Node:
    """Put ``value`` in front of the list and return the new head."""
    return Node(value, head)


def insert_end(head: Optional[Node], value: Any) -> Node:
    """Append ``value`` to the end of the list."""
    new_node = Node(value)
    if head is None:
        return new_node
    node = head
    while node.next is not None:
        node = node.next
    node.next = new_node
    return head


def insert_kth(head: Optional[Node], value: Any, k: int) -> Node:
    """Insert ``value`` at position ``k``.

    With ``k == 1`` the value becomes the new head; for larger ``k`` it is linked
    in right after the ``k``-th node. ``k`` must lie between 1 and the list length.
    """
    if k == 1:
        return Node(value, head)
    size = length(head)
    if k <= 0 or k > size:
        raise IndexError(
            "invalid insertion position (k must be between 1 and the list length)"
        )
    node = head
    for _ in range(k - 1):
        node = node.next
    node.next = Node(value, node.next)
    return head