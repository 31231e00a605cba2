"""Sum of the numbers below a limit that are multiples of given factors."""

from collections.abc import Iterable


def sum_of_multiples(limit: int, factors: Iterable[int]) -> int:
    """Return the sum of numbers in 1..limit-1 divisible by any positive factor."""
    usable = [factor for factor in factors if factor > 0]
    return sum(n for n in range(1, limit) if any(n % factor == 0 for factor in usable))