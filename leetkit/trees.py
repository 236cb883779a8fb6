"""Binary tree helpers and tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def serialize_tree(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, None for gaps, trailing Nones trimmed."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


class FindElements:
    """Recovers a contaminated tree whose root is 0, left is 2x+1 and right is 2x+2."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values: set[int] = set()
        queue = deque([(root, 0)] if root is not None else [])
        while queue:
            node, value = queue.popleft()
            self._values.add(value)
            if node.left is not None:
                queue.append((node.left, value * 2 + 1))
            if node.right is not None:
                queue.append((node.right, value * 2 + 2))

    def find(self, target: int) -> bool:
        """Return whether ``target`` is a value of the recovered tree."""
        return target in self._values


def _min_swaps_to_sort(values: list[int]) -> int:
    order = sorted(range(len(values)), key=values.__getitem__)
    seen = [False] * len(values)
    swaps = 0
    for start in range(len(values)):
        length = 0
        position = start
        while not seen[position]:
            seen[position] = True
            position = order[position]
            length += 1
        if length:
            swaps += length - 1
    return swaps


def minimum_operations(root: Optional[TreeNode]) -> int:
    """Minimum swaps needed to sort every level of a tree with distinct values."""
    total = 0
    level = [root] if root is not None else []
    while level:
        total += _min_swaps_to_sort([node.val for node in level])
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return total


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """All structurally unique BSTs holding 1..n; subtrees are shared between results."""

    @lru_cache(maxsize=None)
    def build(low: int, high: int) -> tuple[Optional[TreeNode], ...]:
        if low > high:
            return (None,)
        return tuple(
            TreeNode(root, left, right)
            for root in range(low, high + 1)
            for left in build(low, root - 1)
            for right in build(root + 1, high)
        )

    return list(build(1, n))