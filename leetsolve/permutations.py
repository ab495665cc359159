"""Permutations and combinations: next permutation, k-th permutation and sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Iterator, MutableSequence
from itertools import combinations
from math import factorial
from typing import TypeVar

T = TypeVar("T")


def reverse_in_place(nums: MutableSequence[T]) -> None:
    """Reverse ``nums`` in place."""
    nums[:] = nums[::-1]


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next permutation in lexicographic order.

    The last permutation wraps around to the first, the ascending order.
    """
    pivot = next((x for x in range(len(nums) - 2, -1, -1) if nums[x] < nums[x + 1]), None)
    if pivot is None:
        reverse_in_place(nums)
        return
    successor = next(x for x in range(len(nums) - 1, pivot, -1) if nums[pivot] < nums[x])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[:pivot:-1]


def get_permutation(n: int, k: int) -> str:
    """The k-th (1-based) permutation of 1..n in lexicographic order, as digits.

    Values of ``k`` past n! wrap around to the start again.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    digits = list(range(1, n + 1))
    index = (k - 1) % factorial(n)
    chosen: list[int] = []
    for remaining in range(n, 0, -1):
        position, index = divmod(index, factorial(remaining - 1))
        chosen.append(digits.pop(position))
    return "".join(map(str, chosen))


def _heap_permutations(values: list[int], size: int) -> Iterator[tuple[int, ...]]:
    """Yield permutations of ``values`` in the order of Heap's algorithm."""
    if size <= 1:
        yield tuple(values)
        return
    yield from _heap_permutations(values, size - 1)
    for i in range(size - 1):
        j = i if size % 2 == 0 else 0
        values[size - 1], values[j] = values[j], values[size - 1]
        yield from _heap_permutations(values, size - 1)


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Distinct permutations of ``nums``, in the order Heap's algorithm meets them."""
    values = list(nums)
    unique = dict.fromkeys(_heap_permutations(values, len(values)))
    return [list(permutation) for permutation in unique]


def combine(n: int, k: int) -> list[list[int]]:
    """All k-element combinations of 1..n in lexicographic order."""
    if k < 1:
        return []
    return [list(combination) for combination in combinations(range(1, n + 1), k)]


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct multisets of candidates, reusable, that add up to ``target``.

    Each combination is ascending and the list is in lexicographic order.
    """
    values = sorted(set(candidates))
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []

    def extend(start: int, chosen: list[int], remaining: int) -> None:
        for position, value in enumerate(values[start:], start):
            if value > remaining:
                break
            chosen.append(value)
            if value == remaining:
                found.append(list(chosen))
            else:
                extend(position, chosen, remaining - value)
            chosen.pop()

    extend(0, [], target)
    return found


def are_permutation(a: Iterable[Hashable], b: Iterable[Hashable]) -> bool:
    """Whether ``a`` and ``b`` hold the same items the same number of times."""
    return Counter(a) == Counter(b)