"""Dynamic-programming problems: squares, coins, bits, partitions and sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def num_squares(n: int) -> int:
    """Fewest perfect squares that add up to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    best = [0] + [n + 1] * n
    root = 1
    while root * root <= n:
        square = root * root
        for total in range(square, n + 1):
            best[total] = min(best[total], 1 + best[total - square])
        root += 1
    return best[n]


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins adding up to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    denominations = sorted(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    unreachable = float("inf")
    fewest: list[float] = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in denominations:
            if coin > total:
                break
            fewest[total] = min(fewest[total], 1 + fewest[total - coin])
    return -1 if fewest[amount] == unreachable else int(fewest[amount])


def count_bits(n: int) -> list[int]:
    """Number of set bits in each of 0..n; always starts with 0."""
    return [0] + [bin(value).count("1") for value in range(1, n + 1)]


def can_partition(nums: Iterable[int]) -> bool:
    """Whether the numbers split into two groups with equal sums."""
    values = list(nums)
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    reachable = {0}
    for value in values:
        reachable |= {s + value for s in reachable if s + value <= target}
    return target in reachable


def delete_and_earn(nums: Sequence[int]) -> int:
    """Most points from taking values, where taking ``v`` removes ``v-1`` and ``v+1``."""
    if not nums:
        raise ValueError("nums must not be empty")
    highest = max(nums)
    if highest < 0:
        raise ValueError("nums must hold a non-negative value")
    counts = Counter(nums)
    two_back, one_back = 0, 0
    for value in range(1, highest + 1):
        two_back, one_back = one_back, max(value * counts[value] + two_back, one_back)
    return one_back


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Length of the shortest subarray whose removal makes the sum divisible by ``p``.

    Returns -1 when only removing everything would do.
    """
    if p <= 0:
        raise ValueError(f"p must be positive, got {p}")
    need = sum(nums) % p
    last_index = {0: -1}
    running = 0
    shortest = len(nums)
    for index, num in enumerate(nums):
        running = (running + num) % p
        last_index[running] = index
        wanted = (running - need) % p
        if wanted in last_index:
            shortest = min(shortest, index - last_index[wanted])
    return shortest if shortest < len(nums) else -1