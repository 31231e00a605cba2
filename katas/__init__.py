"""Small, self-contained programming exercises: primes, poker hands, sublists and more."""

__version__ = "0.1.0"