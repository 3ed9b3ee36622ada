import pytest

from algodrills.nodes import TreeNode, tree_from_level_order
from algodrills.trees import (
    inorder,
    is_same_tree,
    kth_smallest,
    postorder,
    preorder,
    root_equals_sum_of_children,
)


def test_same_tree_identical():
    values = [1, 2, 3, None, 4]
    assert is_same_tree(tree_from_level_order(values), tree_from_level_order(values))


def test_same_tree_both_empty():
    assert is_same_tree(None, None) is True


@pytest.mark.parametrize(
    "a,b", [([1, 2], [1, None, 2]), ([1, 2, 1], [1, 1, 2]), ([1], []), ([1, 2, 3], [1, 2, 4])]
)
def test_same_tree_differs(a, b):
    assert is_same_tree(tree_from_level_order(a), tree_from_level_order(b)) is False


def test_traversal_example():
    root = tree_from_level_order([1, None, 2, 3])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [1, 3, 2]
    assert postorder(root) == [3, 2, 1]


def test_traversals_of_empty_tree():
    assert preorder(None) == inorder(None) == postorder(None) == []


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 4, 7, 9], [1, 2, None, 3, None, 4]])
def test_traversals_visit_every_value(values):
    root = tree_from_level_order(values)
    present = sorted(v for v in values if v is not None)
    for order in (preorder(root), inorder(root), postorder(root)):
        assert sorted(order) == present


def test_preorder_starts_and_postorder_ends_with_root():
    root = tree_from_level_order([5, 3, 8, 1, 4])
    assert preorder(root)[0] == 5
    assert postorder(root)[-1] == 5


def test_inorder_of_bst_is_sorted():
    values = [5, 3, 8, 1, 4, 7, 9]
    assert inorder(tree_from_level_order(values)) == sorted(values)


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_kth_smallest(k):
    values = [3, 1, 4, None, 2]
    present = sorted(v for v in values if v is not None)
    assert kth_smallest(tree_from_level_order(values), k) == present[k - 1]


@pytest.mark.parametrize("k", [0, 5])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(tree_from_level_order([3, 1, 4, None, 2]), k)


def test_root_equals_sum_true():
    assert root_equals_sum_of_children(tree_from_level_order([10, 4, 6])) is True


def test_root_equals_sum_false():
    assert root_equals_sum_of_children(tree_from_level_order([5, 3, 1])) is False


def test_root_equals_sum_requires_children():
    with pytest.raises(ValueError):
        root_equals_sum_of_children(TreeNode(1, TreeNode(1)))