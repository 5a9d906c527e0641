import pytest

from puzzlekit.tree import TreeNode, inorder_traversal, level_order, tree_from_level_order
from puzzlekit.tree_props import (
    count_nodes,
    has_path_sum,
    is_balanced,
    is_symmetric,
    is_valid_bst,
    kth_smallest,
    lowest_common_ancestor,
    max_depth,
    min_depth,
)


def test_symmetric_tree():
    assert is_symmetric(tree_from_level_order([1, 2, 2, 3, 4, 4, 3])) is True
    assert is_symmetric(tree_from_level_order([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(None) is True


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, None, None, None, 4], [1], [3, 9, 20, None, None, 15, 7], [1, 2, None, 3]],
)
def test_max_depth_matches_level_count(values):
    root = tree_from_level_order(values)
    assert max_depth(root) == len(level_order(root))


def test_max_depth_edges():
    assert max_depth(None) == 0
    assert max_depth(TreeNode(5)) == 1


def _unbalanced_tree():
    left = TreeNode(2, TreeNode(3, TreeNode(4)))
    right = TreeNode(2, None, TreeNode(3, None, TreeNode(4)))
    return TreeNode(1, left, right)


def test_is_balanced():
    root = _unbalanced_tree()
    assert is_balanced(root) is False
    assert is_balanced(root.left) is False
    assert is_balanced(root.left.left) is True
    assert is_balanced(None) is True


def test_min_depth_follows_only_child():
    root = tree_from_level_order([1, None, 2, 3, None, None, 4])
    assert min_depth(root) == 4
    assert min_depth(None) == 0


def test_min_depth_never_exceeds_max_depth():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    assert min_depth(root) <= max_depth(root)


def test_has_path_sum():
    root = tree_from_level_order([1, -2, 0])
    assert has_path_sum(root, 1) is True
    assert has_path_sum(root, 0) is False
    assert has_path_sum(root, -1) is True
    assert has_path_sum(None, 0) is False


def test_is_valid_bst():
    root = tree_from_level_order([4, 2, 5, 1, 3])
    assert is_valid_bst(root) is True
    root.right.left = TreeNode(2)
    assert is_valid_bst(root) is False


def test_is_valid_bst_rejects_equal_values():
    assert is_valid_bst(TreeNode(2, TreeNode(2))) is False
    assert is_valid_bst(None) is True


def test_count_nodes_complete_tree():
    root = tree_from_level_order(list(range(1, 10)))
    assert count_nodes(root) == 9
    assert count_nodes(None) == 0


@pytest.mark.parametrize("size", range(1, 16))
def test_count_nodes_matches_traversal(size):
    root = tree_from_level_order(list(range(size)))
    assert count_nodes(root) == len(inorder_traversal(root))


def _search_tree():
    return tree_from_level_order([6, 2, 7, 1, 4, None, 9, None, None, 3, 5, 8])


@pytest.mark.parametrize("k", range(1, 10))
def test_kth_smallest(k):
    assert kth_smallest(_search_tree(), k) == k


@pytest.mark.parametrize("k", [0, 10])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(_search_tree(), k)


def test_lowest_common_ancestor():
    root = tree_from_level_order([6, 2, 8, 0, 4, 7, 9, None, None, 3, 5])
    two, eight, four = root.left, root.right, root.left.right
    assert lowest_common_ancestor(root, two, eight) is root
    assert lowest_common_ancestor(root, two, four) is two


def test_lowest_common_ancestor_missing_nodes():
    root = tree_from_level_order([6, 2, 8])
    assert lowest_common_ancestor(root, None, root.right) is root.right
    assert lowest_common_ancestor(None, root.left, root.right) is None