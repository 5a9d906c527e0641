"""Binary tree node, (de)serialisation helpers and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def serialize_level_order(root: Optional[TreeNode]) -> str:
    """Render the tree breadth first, writing ``#`` for every missing child."""
    parts: list[str] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            parts.append("#")
        else:
            parts.append(str(node.val))
            pending.append(node.left)
            pending.append(node.right)
    return "".join(parts)


def serialize_preorder(root: Optional[TreeNode]) -> str:
    """Render the tree depth first (root, left, right) with ``#`` for empty links."""

    def walk(node: Optional[TreeNode]) -> Iterator[str]:
        if node is None:
            yield "#"
            return
        yield str(node.val)
        yield from walk(node.left)
        yield from walk(node.right)

    return "".join(walk(root))


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    if root is None:
        return
    current = [root]
    while current:
        yield [node.val for node in current]
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by level, top to bottom."""
    return list(_levels(root))


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return levels top to bottom, alternating left-to-right and right-to-left."""
    return [
        level[::-1] if depth % 2 else level
        for depth, level in enumerate(_levels(root))
    ]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by level, bottom to top."""
    return list(_levels(root))[::-1]


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in pre-order using an explicit stack."""
    result: list[int] = []
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is not None:
            result.append(node.val)
            stack.append(node.right)
            stack.append(node.left)
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in in-order using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in post-order using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    last: Optional[TreeNode] = None
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last:
            node = top.right
        else:
            stack.pop()
            result.append(top.val)
            last = top
    return result


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the value of the rightmost node on each level."""
    return [level[-1] for level in _levels(root)]


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending values.

    With an even count the upper of the two middle values becomes the root.
    """
    if not nums:
        return None
    middle = len(nums) // 2
    return TreeNode(
        nums[middle],
        sorted_array_to_bst(nums[:middle]),
        sorted_array_to_bst(nums[middle + 1:]),
    )


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place, breadth first, and return its root."""
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is not None:
            node.left, node.right = node.right, node.left
            pending.append(node.left)
            pending.append(node.right)
    return root


def invert_tree_recursive(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place recursively and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree_recursive(root.left)
    invert_tree_recursive(root.right)
    return root