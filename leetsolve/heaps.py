"""Heap-based problems: events, k-th largest, medians, frequencies and ranks."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence

LAST_DAY = 100_000

_MEDALS = {1: "Gold Medal", 2: "Silver Medal", 3: "Bronze Medal"}


def max_events(events: Iterable[Sequence[int]]) -> int:
    """Most events attendable, one per day, each on a day within its [start, end].

    Days run from 1 to ``LAST_DAY``.
    """
    upcoming = deque(sorted(((start, end) for start, end in events), key=lambda e: e[0]))
    open_ends: list[int] = []
    joined = 0
    for day in range(1, LAST_DAY + 1):
        while upcoming and upcoming[0][0] <= day:
            heapq.heappush(open_ends, upcoming.popleft()[1])
        while open_ends and open_ends[0] < day:
            heapq.heappop(open_ends)
        if open_ends:
            heapq.heappop(open_ends)
            joined += 1
        elif not upcoming:
            break
    return joined


def _check_k(k: int, size: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k must be between 1 and {size}, got {k}")


def _partition(values: list[int], left: int, right: int) -> int:
    """Lomuto partition around ``values[right]``; return the pivot's final index."""
    pivot = values[right]
    store = left
    for j in range(left, right):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[right] = values[right], values[store]
    return store


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, found by quickselect."""
    values = list(nums)
    _check_k(k, len(values))
    target = len(values) - k
    left, right = 0, len(values) - 1
    while True:
        index = _partition(values, left, right)
        if index == target:
            return values[index]
        if index > target:
            right = index - 1
        else:
            left = index + 1


def find_kth_largest_sorted(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, found by sorting."""
    _check_k(k, len(nums))
    return sorted(nums)[len(nums) - k]


def find_kth_largest_heap(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, found with a min-heap of size k."""
    _check_k(k, len(nums))
    largest: list[int] = []
    for num in nums:
        heapq.heappush(largest, num)
        if len(largest) > k:
            heapq.heappop(largest)
    return largest[0]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The k most frequent values, most frequent first."""
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    return [value for value, _ in counts.most_common(k)]


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Rank labels for each score: medals for the top three, numbers after."""
    ranks: dict[int, str] = {}
    for rank, value in enumerate(sorted(score, reverse=True), start=1):
        ranks[value] = _MEDALS.get(rank, str(rank))
    return [ranks[value] for value in score]


class MedianFinder:
    """Running median of a stream of integers, kept in two heaps."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the lower half, values negated
        self._high: list[int] = []  # min-heap of the upper half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if num > self.find_median():
            heapq.heappush(self._high, num)
        else:
            heapq.heappush(self._low, -num)
        if len(self._low) - len(self._high) > 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) - len(self._low) > 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Median of the numbers added so far; 0.0 before any are added."""
        if not self._low and not self._high:
            return 0.0
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        if len(self._low) < len(self._high):
            return float(self._high[0])
        return (-self._low[0] + self._high[0]) / 2


class KthLargest:
    """Tracks the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self._largest = heapq.nlargest(k, nums)
        heapq.heapify(self._largest)

    def add(self, val: int) -> int:
        """Add ``val`` and return the current k-th largest value.

        While fewer than k values have been seen, the smallest is returned.
        """
        if len(self._largest) < self.k:
            heapq.heappush(self._largest, val)
        elif val > self._largest[0]:
            heapq.heapreplace(self._largest, val)
        return self._largest[0]