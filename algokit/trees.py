"""Binary tree helpers and level-based tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def children(self) -> list[TreeNode]:
        """Return the present children, left first."""
        return [child for child in (self.left, self.right) if child is not None]


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.left = TreeNode(value)
            queue.append(node.left)
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.right = TreeNode(value)
            queue.append(node.right)
    return root


def tree_to_list(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Serialise a tree to a level-order list, trailing gaps removed."""
    if root is None:
        return []
    result: list[Optional[int]] = [root.val]
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                result.append(None)
            else:
                result.append(child.val)
                queue.append(child)
    while result and result[-1] is None:
        result.pop()
    return result


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children()]


def flip_equiv(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether two trees match after swapping children at some nodes."""
    if root1 is root2:
        return True
    if root1 is None or root2 is None or root1.val != root2.val:
        return False
    return (
        flip_equiv(root1.left, root2.left) and flip_equiv(root1.right, root2.right)
    ) or (
        flip_equiv(root1.left, root2.right) and flip_equiv(root1.right, root2.left)
    )


def reverse_odd_levels(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Reverse the node values on every odd level, in place."""
    for depth, level in enumerate(_levels(root)):
        if depth % 2 == 1:
            values = [node.val for node in level]
            for node, value in zip(level, reversed(values)):
                node.val = value
    return root


def tree_queries(root: Optional[TreeNode], queries: Iterable[int]) -> list[int]:
    """For each queried value, the tree height once that node's subtree is removed."""
    heights: dict[int, int] = {}

    best = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        heights[node.val] = best
        best = max(best, depth)
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))

    best = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        heights[node.val] = max(heights[node.val], best)
        best = max(best, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))

    return [heights[query] for query in queries]


def kth_largest_level_sum(root: Optional[TreeNode], k: int) -> int:
    """The k-th largest sum over tree levels, or -1 if there are fewer levels."""
    if root is None:
        return -1
    sums = sorted((sum(node.val for node in level) for level in _levels(root)), reverse=True)
    if k > len(sums):
        return -1
    return sums[k - 1]


def replace_value_in_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace every value by the sum of its cousins' values, in place."""
    if root is None:
        return None
    for level in _levels(root):
        next_total = sum(child.val for node in level for child in node.children())
        for node in level:
            kids = node.children()
            siblings = sum(child.val for child in kids)
            for child in kids:
                child.val = next_total - siblings
    root.val = 0
    return root