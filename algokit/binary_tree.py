"""Binary tree node and the classic traversals, recursive and iterative."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def preorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Preorder traversal using an explicit stack."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Inorder traversal using an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[Any]:
    """Postorder traversal using two stacks."""
    if root is None:
        return []
    first = [root]
    second = []
    while first:
        node = first.pop()
        second.append(node)
        if node.left is not None:
            first.append(node.left)
        if node.right is not None:
            first.append(node.right)
    return [node.val for node in reversed(second)]


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Values grouped by depth, each level from left to right."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            level.append(node.val)
        levels.append(level)
    return levels