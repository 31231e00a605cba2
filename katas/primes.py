"""Prime numbers: a primality test, an endless generator and the nth prime."""

from itertools import islice
from math import isqrt


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime."""
    if number < 2:
        return False
    if number % 2 == 0:
        return number == 2
    return all(number % divisor for divisor in range(3, isqrt(number) + 1, 2))


class PrimeNumbers:
    """An endless iterator over the primes in increasing order."""

    def __init__(self) -> None:
        self._last = 1

    def __iter__(self) -> "PrimeNumbers":
        return self

    def __next__(self) -> int:
        candidate = self._last + 1
        while not is_prime(candidate):
            candidate += 1
        self._last = candidate
        return candidate


def nth(n: int) -> int:
    """Return the prime at zero-based position ``n``."""
    if n < 0:
        raise ValueError(f"position must not be negative, got {n}")
    return next(islice(PrimeNumbers(), n, None))