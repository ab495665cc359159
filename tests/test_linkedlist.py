import pytest

from leetsolve.linkedlist import (
    is_palindrome,
    is_palindrome_sequence,
    reverse_list,
    swap_pairs,
)
from leetsolve.nodes import list_from_values, list_to_values


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3, 4], [2, 1, 4, 3]), ([], []), ([1], [1])],
)
def test_swap_pairs(values, expected):
    assert list_to_values(swap_pairs(list_from_values(values))) == expected


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]), ([], []), ([1, 2], [2, 1])],
)
def test_reverse_list(values, expected):
    assert list_to_values(reverse_list(list_from_values(values))) == expected


@pytest.mark.parametrize("values, expected", [([1, 2, 2, 1], True), ([1, 2], False)])
def test_is_palindrome(values, expected):
    assert is_palindrome(list_from_values(values)) is expected


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2, 3, 2, 1], True), ([1, 2], False)],
)
def test_is_palindrome_sequence(values, expected):
    assert is_palindrome_sequence(values) is expected