"""Path sums and distances in binary trees."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from leetsolve.nodes import TreeNode


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """All root-to-leaf paths whose values add up to ``target_sum``, left first."""
    found: list[list[int]] = []

    def walk(node: Optional[TreeNode], path: list[int]) -> None:
        if node is None:
            return
        path = [*path, node.val]
        if node.left is None and node.right is None and sum(path) == target_sum:
            found.append(path)
            return
        walk(node.left, path)
        walk(node.right, path)

    walk(root, [])
    return found


def count_path_sums(root: Optional[TreeNode], target_sum: int) -> int:
    """Number of downward paths, starting at any node, adding up to ``target_sum``."""
    prefixes: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        count = prefixes[running - target_sum]
        prefixes[running] += 1
        count += walk(node.left, running) + walk(node.right, running)
        prefixes[running] -= 1
        return count

    return walk(root, 0)


def distance_k(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Values of nodes exactly ``k`` edges from the node matching ``target``'s value."""
    found: list[int] = []

    def collect_down(node: Optional[TreeNode], depth: int) -> None:
        if node is None or depth < 0:
            return
        if depth == 0:
            found.append(node.val)
            return
        collect_down(node.left, depth - 1)
        collect_down(node.right, depth - 1)

    def locate(node: Optional[TreeNode]) -> Optional[int]:
        """Distance from ``node`` down to the target, collecting along the way."""
        if node is None:
            return None
        if node.val == target.val:
            collect_down(node, k)
            return 0
        for near, far in ((node.left, node.right), (node.right, node.left)):
            distance = locate(near)
            if distance is not None:
                if distance + 1 == k:
                    found.append(node.val)
                else:
                    collect_down(far, k - distance - 2)
                return distance + 1
        return None

    locate(root)
    return found