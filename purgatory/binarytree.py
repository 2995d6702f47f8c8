"""Binary trees: building, level-order traversals and a text codec."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree of integers."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from its level-order listing, ``None`` marking a missing child."""
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    pending = deque([root])
    children = iter(values[1:])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(children)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Return the mean value of each level, top first."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, top first."""
    return [level[-1].val for level in _levels(root)]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level, left to right, top first."""
    return [[node.val for node in level] for level in _levels(root)]


class Codec:
    """Turns trees into comma-separated preorder text and back."""

    def serialize(self, root: TreeNode | None) -> str:
        """Return the preorder listing of ``root``, each entry followed by a comma."""
        parts = []
        stack: list[TreeNode | None] = [root]
        while stack:
            node = stack.pop()
            if node is None:
                parts.append("null,")
            else:
                parts.append(f"{node.val},")
                stack.append(node.right)
                stack.append(node.left)
        return "".join(parts)

    def deserialize(self, data: str) -> TreeNode | None:
        """Rebuild a tree from text made by :meth:`serialize`."""
        tokens = iter([token for token in (t.strip() for t in data.split(",")) if token])

        def build() -> TreeNode | None:
            token = next(tokens, "null")
            if token == "null":
                return None
            node = TreeNode(int(token))
            node.left = build()
            node.right = build()
            return node

        return build()