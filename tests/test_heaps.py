import pytest

from leetsolve.heaps import (
    KthLargest,
    MedianFinder,
    find_kth_largest,
    find_kth_largest_heap,
    find_kth_largest_sorted,
    find_relative_ranks,
    max_events,
    top_k_frequent,
)

KTH_CASES = [
    ([3, 2, 1, 5, 6, 4], 2, 5),
    ([3, 2, 3, 1, 2, 4, 5, 5, 6], 4, 4),
]


@pytest.mark.parametrize("nums, k, expected", KTH_CASES)
def test_find_kth_largest(nums, k, expected):
    assert find_kth_largest(nums, k) == expected


@pytest.mark.parametrize("nums, k, expected", KTH_CASES)
def test_find_kth_largest_sorted(nums, k, expected):
    assert find_kth_largest_sorted(nums, k) == expected


@pytest.mark.parametrize("nums, k, expected", KTH_CASES)
def test_find_kth_largest_heap(nums, k, expected):
    assert find_kth_largest_heap(nums, k) == expected


def test_find_kth_largest_leaves_input_alone():
    nums = [3, 2, 1, 5, 6, 4]
    find_kth_largest(nums, 2)
    assert nums == [3, 2, 1, 5, 6, 4]


@pytest.mark.parametrize(
    "function", [find_kth_largest, find_kth_largest_sorted, find_kth_largest_heap]
)
@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_rejects_bad_k(function, k):
    with pytest.raises(ValueError):
        function([1, 2, 3], k)


def test_median_finder():
    finder = MedianFinder()
    finder.add_num(1)
    finder.add_num(2)
    assert finder.find_median() == 1.5
    finder.add_num(3)
    assert finder.find_median() == 2.0


def test_median_finder_longer_stream():
    finder = MedianFinder()
    steps = [
        (6, 6.0), (10, 8.0), (2, 6.0), (6, 6.0), (5, 6.0), (0, 5.5),
        (6, 6.0), (3, 5.5), (1, 5.0), (0, 4.0), (0, 3.0),
    ]
    for num, expected in steps:
        finder.add_num(num)
        assert finder.find_median() == expected


def test_median_finder_empty():
    assert MedianFinder().find_median() == 0.0


@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([1, 1, 1, 2, 2, 3], 2, [1, 2]),
        ([1, 1, 1, 2, 2, 8, 8, 8, 8, 8, 3], 2, [8, 1]),
        ([1], 1, [1]),
    ],
)
def test_top_k_frequent(nums, k, expected):
    assert top_k_frequent(nums, k) == expected


def test_top_k_frequent_rejects_too_large_k():
    with pytest.raises(ValueError):
        top_k_frequent([1, 1, 2], 3)


@pytest.mark.parametrize(
    "score, expected",
    [
        ([5, 4, 3, 2, 1], ["Gold Medal", "Silver Medal", "Bronze Medal", "4", "5"]),
        ([10, 3, 8, 9, 4], ["Gold Medal", "5", "Bronze Medal", "Silver Medal", "4"]),
    ],
)
def test_find_relative_ranks(score, expected):
    assert find_relative_ranks(score) == expected


def test_kth_largest_stream():
    tracker = KthLargest(3, [4, 5, 8, 2])
    assert tracker.add(3) == 4
    assert tracker.add(5) == 5
    assert tracker.add(10) == 5
    assert tracker.add(9) == 8
    assert tracker.add(4) == 8


def test_kth_largest_stream_k_one():
    tracker = KthLargest(1, [-2])
    assert tracker.add(-3) == -2
    assert tracker.add(0) == 0
    assert tracker.add(2) == 2
    assert tracker.add(-1) == 2
    assert tracker.add(4) == 4


def test_kth_largest_stream_starting_short():
    tracker = KthLargest(2, [])
    assert tracker.add(5) == 5
    assert tracker.add(3) == 3
    assert tracker.add(7) == 5


def test_kth_largest_rejects_zero_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1, 2])


@pytest.mark.parametrize(
    "events, expected",
    [
        ([[1, 2], [2, 3], [3, 4]], 3),
        ([[1, 2], [2, 3], [3, 4], [1, 2]], 4),
        ([[1, 1], [1, 1], [1, 1]], 1),
        ([], 0),
    ],
)
def test_max_events(events, expected):
    assert max_events(events) == expected


def test_max_events_never_exceeds_event_count():
    events = [[1, 5], [1, 5], [1, 5], [2, 3], [2, 3]]
    assert max_events(events) == 5