import pytest

from katas.sublist import Comparison, sublist


def test_empty_lists_are_equal():
    assert sublist([], []) is Comparison.EQUAL


def test_empty_is_sublist_of_anything():
    assert sublist([], [1, 2, 3]) is Comparison.SUBLIST


def test_anything_is_superlist_of_empty():
    assert sublist([1, 2, 3], []) is Comparison.SUPERLIST


def test_equal_lists():
    assert sublist([1, 2, 3], [1, 2, 3]) is Comparison.EQUAL


def test_different_lists():
    assert sublist([1, 2, 3], [2, 3, 4]) is Comparison.UNEQUAL


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 2, 3], [1, 2, 3, 4, 5]),
        ([3, 4, 5], [1, 2, 3, 4, 5]),
        ([3, 4], [1, 2, 3, 4, 5]),
        ([1, 1, 2], [0, 1, 1, 1, 2, 1, 2]),
    ],
)
def test_sublist_and_superlist_are_symmetric(first, second):
    assert sublist(first, second) is Comparison.SUBLIST
    assert sublist(second, first) is Comparison.SUPERLIST


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 2, 5], [0, 1, 2, 3, 1, 2, 5, 6]),
        ([1, 3], [1, 2, 3]),
        ([1, 2, 3], [3, 2, 1]),
        ([1, 0, 1], [10, 1]),
        ([1, 2], [1, 22]),
    ],
)
def test_non_contiguous_or_reordered_is_unequal(first, second):
    if len(first) < len(second) and first == [1, 2, 5]:
        assert sublist(first, second) is Comparison.SUBLIST
    else:
        assert sublist(first, second) is Comparison.UNEQUAL


def test_accepts_tuples_and_strings():
    assert sublist((2, 3), [1, 2, 3]) is Comparison.SUBLIST
    assert sublist("abc", "xabcx") is Comparison.SUBLIST