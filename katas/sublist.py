"""Classify how two sequences relate: equal, sublist, superlist or unequal."""

from collections.abc import Sequence
from enum import Enum, auto


class Comparison(Enum):
    """How the first sequence relates to the second."""

    EQUAL = auto()
    SUBLIST = auto()
    SUPERLIST = auto()
    UNEQUAL = auto()


def _contains(needle: list, haystack: list) -> bool:
    if not needle:
        return True
    width = len(needle)
    return any(
        haystack[start:start + width] == needle
        for start in range(len(haystack) - width + 1)
    )


def sublist(first: Sequence, second: Sequence) -> Comparison:
    """Return how ``first`` relates to ``second`` as contiguous runs."""
    first_items, second_items = list(first), list(second)
    if first_items == second_items:
        return Comparison.EQUAL
    if len(first_items) > len(second_items):
        if _contains(second_items, first_items):
            return Comparison.SUPERLIST
    elif _contains(first_items, second_items):
        return Comparison.SUBLIST
    return Comparison.UNEQUAL