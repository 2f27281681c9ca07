"""Doubly linked list with head, tail, positional and by-node removal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class DNode:
    """One cell of a doubly linked list."""

    data: Any
    next: Optional["DNode"] = None
    prev: Optional["DNode"] = None

    def __repr__(self) -> str:
        return f"DNode({self.data!r})"


def from_list(values: Iterable[Any]) -> Optional[DNode]:
    """Build a doubly linked list from ``values``; an empty input gives ``None``."""
    head: Optional[DNode] = None
    tail: Optional[DNode] = None
    for value in values:
        node = DNode(value, None, tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[DNode]) -> list[Any]:
    """Return the values from ``head`` forwards."""
    values = []
    node = head
    while node is not None:
        values.append(node.data)
        node = node.next
    return values


def remove_head(head: Optional[DNode]) -> Optional[DNode]:
    """Drop the first node; a list of one node becomes empty."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.prev = None
    head.next = None
    return new_head


def remove_tail(head: Optional[DNode]) -> Optional[DNode]:
    """Drop the last node; a list of one node becomes empty."""
    if head is None or head.next is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.prev.next = None
    tail.prev = None
    return head


def remove_kth(head: Optional[DNode], k: int) -> Optional[DNode]:
    """Remove the ``k``-th node (counted from 1); out-of-range ``k`` leaves the list as is."""
    if head is None:
        return None
    if k == 1:
        new_head = head.next
        if new_head is not None:
            new_head.prev = None
        head.next = None
        return new_head
    node = head
    position = 1
    while node is not None and position < k:
        node = node.next
        position += 1
    if node is None or k < 1:
        return head
    node.prev.next = node.next
    if node.next is not None:
        node.next.prev = node.prev
    node.next = node.prev = None
    return head


def delete_node(node: DNode) -> None:
    """Unlink ``node`` from its list; the node must not be the head."""
    back = node.prev
    if back is None:
        raise ValueError("cannot delete the head node without access to the list")
    front = node.next
    back.next = front
    if front is not None:
        front.prev = back
    node.next = node.prev = None


def remove_kth_safe(head: Optional[DNode], k: int) -> Optional[DNode]:
    """Remove the ``k``-th node, handling head, tail and single-node lists.

    Raises ``IndexError`` when the list has no ``k``-th node.
    """
    if head is None:
        return None
    node = head
    position = 1
    while node is not None and position < k:
        node = node.next
        position += 1
    if node is None or k < 1:
        raise IndexError(f"list has no node at position {k}")
    back, front = node.prev, node.next
    if back is None and front is None:
        return None
    if back is None:
        return remove_head(head)
    if front is None:
        return remove_tail(head)
    back.next = front
    front.prev = back
    node.next = node.prev = None
    return head