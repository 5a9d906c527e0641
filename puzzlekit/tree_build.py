"""Constructing binary trees from traversals and enumerating search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Optional

from puzzlekit.tree import TreeNode


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def _locate(inorder: Sequence[int], value: int) -> int:
    try:
        return list(inorder).index(value)
    except ValueError:
        raise ValueError(f"value {value} is missing from the in-order traversal") from None


def build_tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order and in-order traversals."""
    _check_lengths(preorder, inorder)
    if not preorder:
        return None
    value = preorder[0]
    index = _locate(inorder, value)
    return TreeNode(
        value,
        build_tree_from_preorder_inorder(preorder[1:index + 1], inorder[:index]),
        build_tree_from_preorder_inorder(preorder[index + 1:], inorder[index + 1:]),
    )


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its in-order and post-order traversals."""
    _check_lengths(inorder, postorder)
    if not postorder:
        return None
    value = postorder[-1]
    index = _locate(inorder, value)
    return TreeNode(
        value,
        build_tree_from_inorder_postorder(inorder[:index], postorder[:index]),
        build_tree_from_inorder_postorder(inorder[index + 1:], postorder[index:-1]),
    )


def shift_tree(root: Optional[TreeNode], offset: int) -> Optional[TreeNode]:
    """Return a copy of the tree with ``offset`` added to every value."""
    if root is None:
        return None
    return TreeNode(
        root.val + offset,
        shift_tree(root.left, offset),
        shift_tree(root.right, offset),
    )


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally distinct search tree holding the values 1..n.

    For ``n == 0`` the result is a single empty tree. Left subtrees are shared
    between the returned trees.
    """
    table: list[list[Optional[TreeNode]]] = [[None]]
    if n == 0:
        return table[0]
    table.append([TreeNode(1)])
    for size in range(2, n + 1):
        trees: list[Optional[TreeNode]] = []
        for root_value in range(1, size + 1):
            for left in table[root_value - 1]:
                for right in table[size - root_value]:
                    trees.append(TreeNode(root_value, left, shift_tree(right, root_value)))
        table.append(trees)
    return table[n]


def compact_level_order(root: Optional[TreeNode]) -> str:
    """Render the tree breadth first, writing ``#`` for empty links.

    Children of a leaf are omitted, so trailing empty links do not appear.
    """
    parts: list[str] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            parts.append("#")
            continue
        parts.append(str(node.val))
        if node.left is not None or node.right is not None:
            pending.append(node.left)
            pending.append(node.right)
    return "".join(parts)