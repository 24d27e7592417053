"""Binary tree construction, traversals, views and burn time."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the inorder values using threaded traversal, restoring the tree."""
    values: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            values.append(current.val)
            current = current.right
            continue
        prev = current.left
        while prev.right is not None and prev.right is not current:
            prev = prev.right
        if prev.right is None:
            prev.right = current
            current = current.left
        else:
            prev.right = None
            values.append(current.val)
            current = current.right
    return values


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    position = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        value = next(values)
        try:
            mid = position[value]
        except KeyError:
            raise ValueError(f"value {value!r} is missing from inorder") from None
        node = TreeNode(value)
        node.left = build(lo, mid - 1)
        node.right = build(mid + 1, hi)
        return node

    return build(0, len(inorder) - 1)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, node, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.val)
        current = current.right
    return values


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """Return the last node seen on each vertical line, from left to right."""
    bottom: dict[int, int] = {}
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, line = queue.popleft()
        bottom[line] = node.val
        if node.left is not None:
            queue.append((node.left, line - 1))
        if node.right is not None:
            queue.append((node.right, line + 1))
    return [bottom[line] for line in sorted(bottom)]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value on each level."""
    return [level[-1].val for level in _levels(root)]


def left_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the leftmost value on each level."""
    return [level[0].val for level in _levels(root)]


def min_burn_time(root: TreeNode, target: int) -> int:
    """Return the time for fire starting at ``target`` to burn the whole tree.

    Fire spreads each second to a node's children and parent. When several
    nodes hold ``target``, the last one in level order is the start.
    """
    parent: dict[TreeNode, TreeNode] = {}
    start: Optional[TreeNode] = None
    for level in _levels(root):
        for node in level:
            if node.val == target:
                start = node
            for child in (node.left, node.right):
                if child is not None:
                    parent[child] = node
    if start is None:
        raise ValueError(f"target {target!r} is not in the tree")

    burnt = {start}
    front = [start]
    seconds = 0
    while front:
        spread = []
        for node in front:
            for neighbour in (node.left, node.right, parent.get(node)):
                if neighbour is not None and neighbour not in burnt:
                    burnt.add(neighbour)
                    spread.append(neighbour)
        if spread:
            seconds += 1
        front = spread
    return seconds