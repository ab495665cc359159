"""Searching problems: sorted rows, bad versions, binary search and bit flips."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence


def binary_search(arr: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in the ascending sequence ``arr``."""
    index = bisect_left(arr, target)
    return index < len(arr) and arr[index] == target


def search_matrix(matrix: Iterable[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs in a matrix whose rows are sorted ascending."""
    return any(binary_search(row, target) for row in matrix)


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """The first bad version among 1..n, or -1 if none of them is bad.

    Once a version is bad, every later version is taken to be bad too.
    """
    low, high = 1, n
    first = -1
    while low <= high:
        middle = (low + high) // 2
        if is_bad_version(middle):
            first = middle
            high = middle - 1
        else:
            low = middle + 1
    return first


def search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in the ascending sequence ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def min_operations(nums: Iterable[int]) -> int:
    """Fewest flips of three consecutive bits that turn every bit to 1, or -1.

    The input is left unchanged.
    """
    bits = list(nums)
    flips = 0
    for start in range(len(bits) - 2):
        if bits[start] == 0:
            bits[start : start + 3] = [1 - bit for bit in bits[start : start + 3]]
            flips += 1
    return flips if all(bits) else -1