import pytest

from katas.multiples import sum_of_multiples


def test_pinned_values():
    assert sum_of_multiples(10, [3, 5]) == 23
    assert sum_of_multiples(20, [3, 5]) == 78


@pytest.mark.parametrize("limit", [1, 2, 10, 100])
def test_factor_one_sums_everything_below_limit(limit):
    assert sum_of_multiples(limit, [1]) == sum(range(limit))


@pytest.mark.parametrize("limit", [1, 10, 100])
def test_zero_factor_is_ignored(limit):
    assert sum_of_multiples(limit, [0]) == sum_of_multiples(limit, [])
    assert sum_of_multiples(limit, [0, 3]) == sum_of_multiples(limit, [3])


@pytest.mark.parametrize("limit", [10, 50, 1000])
def test_duplicates_and_order_do_not_matter(limit):
    reference = sum_of_multiples(limit, [3, 5])
    assert sum_of_multiples(limit, [5, 3]) == reference
    assert sum_of_multiples(limit, [3, 5, 3]) == reference


@pytest.mark.parametrize("limit", [10, 50, 1000])
def test_multiple_of_a_factor_adds_nothing(limit):
    assert sum_of_multiples(limit, [3, 6]) == sum_of_multiples(limit, [3])


def test_factor_at_or_above_limit_contributes_nothing():
    assert sum_of_multiples(4, [5]) == sum_of_multiples(4, [])