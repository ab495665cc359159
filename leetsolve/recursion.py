"""Small recursive exercises: strings, Pascal's triangle, Fibonacci, powers."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def reverse_string(s: MutableSequence[T]) -> None:
    """Reverse ``s`` in place."""
    s[:] = s[::-1]


def get_row(row_index: int) -> list[int]:
    """Row ``row_index`` (zero-based) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return row


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values below 2 are returned as they are."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 3:
        return n
    previous, current = 2, 3
    for _ in range(n - 3):
        previous, current = current, previous + current
    return current


def _positive_pow(x: float, n: int) -> float:
    cache: dict[int, float] = {0: 1.0, 1: x}

    def power(m: int) -> float:
        if m not in cache:
            half = m // 2
            cache[m] = power(half) * power(m - half)
        return cache[m]

    return power(n)


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated halving."""
    if n < 0:
        return 1 / _positive_pow(x, -n)
    return _positive_pow(x, n)