"""Traversals and simple queries on binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from leetsolve.nodes import TreeNode


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, left to right within each level."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the first node in preorder holding ``val``, or None."""
    if root is None:
        return None
    if root.val == val:
        return root
    return search_bst(root.left, val) or search_bst(root.right, val)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        raise ValueError("tree is empty")
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return any(
        has_path_sum(child, remaining)
        for child in (root.left, root.right)
        if child is not None
    )


def _mirrored(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _mirrored(p.left, q.right) and _mirrored(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself."""
    if root is None:
        raise ValueError("tree is empty")
    return _mirrored(root.left, root.right)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)