"""Comparisons and traversals of binary trees."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional

from algodrills.nodes import TreeNode


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.val
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    value = next(islice(_inorder(root), k - 1, None), None)
    if value is None:
        raise ValueError(f"tree has fewer than {k} nodes")
    return value


def root_equals_sum_of_children(root: TreeNode) -> bool:
    """Tell whether the root's value equals the sum of its two children."""
    if root is None or root.left is None or root.right is None:
        raise ValueError("root must have both a left and a right child")
    return root.left.val + root.right.val == root.val