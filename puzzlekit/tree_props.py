"""Structural and search-tree properties of binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Optional

from puzzlekit.tree import TreeNode


def _mirrors(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return whether every node's subtrees differ in depth by at most one."""
    if root is None:
        return True
    if abs(max_depth(root.left) - max_depth(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    left = min_depth(root.left)
    right = min_depth(root.right)
    if left == 0 or right == 0:
        return left + right + 1
    return min(left, right) + 1


def has_path_sum(root: Optional[TreeNode], total: int) -> bool:
    """Return whether some root-to-leaf path adds up to ``total``."""
    if root is None:
        return False
    remain = total - root.val
    if root.left is None and root.right is None:
        return remain == 0
    return has_path_sum(root.left, remain) or has_path_sum(root.right, remain)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a search tree with strictly ordered values."""

    def within(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.val <= low:
            return False
        if high is not None and node.val >= high:
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, None, None)


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree.

    Subtrees whose leftmost and rightmost spines have equal length are
    counted as perfect trees without visiting their nodes.
    """
    if root is None:
        return 0
    left_height = right_height = 1
    node = root.left
    while node is not None:
        node = node.left
        left_height += 1
    node = root.right
    while node is not None:
        node = node.right
        right_height += 1
    if left_height == right_height:
        return (1 << left_height) - 1
    return count_nodes(root.left) + count_nodes(root.right) + 1


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.val
            node = node.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a search tree."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for value in islice(_inorder(root), k - 1, k):
        return value
    raise ValueError(f"the tree holds fewer than {k} values")


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Return the lowest node of a search tree that is an ancestor of both nodes."""
    if root is None:
        return None
    if p is None:
        return q
    if q is None:
        return p
    node: Optional[TreeNode] = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None