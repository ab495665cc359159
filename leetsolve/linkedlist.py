"""Operations on singly linked lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from leetsolve.nodes import ListNode


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap the values of each adjacent pair of nodes; return the head."""
    node = head
    while node is not None and node.next is not None:
        node.val, node.next.val = node.next.val, node.val
        node = node.next.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome_sequence(values: Sequence[int]) -> bool:
    """Whether ``values`` reads the same forwards and backwards."""
    return list(values) == list(reversed(values))


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the list's values read the same forwards and backwards."""
    values = list(head) if head is not None else []
    return is_palindrome_sequence(values)