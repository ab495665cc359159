"""Node types for binary trees and singly linked lists, plus builders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, Union

LevelValue = Union[int, str, None]


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _as_value(item: LevelValue) -> Optional[int]:
    """Return the integer an entry stands for, or None for a missing node."""
    if item is None:
        return None
    if isinstance(item, int):
        return item
    try:
        return int(item)
    except ValueError:
        return None


def tree_from_level_order(values: Sequence[LevelValue]) -> Optional[TreeNode]:
    """Build a tree from heap-ordered values.

    The children of position ``i`` sit at ``2*i + 1`` and ``2*i + 2``.
    ``None`` or any entry that is not an integer (such as ``"null"``)
    marks a missing node; everything below a missing node is ignored.
    """
    parsed = [_as_value(item) for item in values]

    def build(index: int) -> Optional[TreeNode]:
        if index >= len(parsed) or parsed[index] is None:
            return None
        return TreeNode(parsed[index], build(2 * index + 1), build(2 * index + 2))

    return build(0)


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return list(head) if head is not None else []