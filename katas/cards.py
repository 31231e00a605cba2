"""Playing cards: ranks, suits, parsing and the categories of poker hands."""

import re
from dataclasses import dataclass
from enum import IntEnum

_FACES = ("J", "Q", "K", "A")
_FIRST_FACE_RANK = 11
_MAX_RANK_VALUE = 255
_NUMERIC_RANK = re.compile(r"\+?[0-9]+")


def rank_from_str(text: str) -> int:
    """Return the numeric rank written as ``text``: a number, or J, Q, K, A."""
    if text in _FACES:
        return _FACES.index(text) + _FIRST_FACE_RANK
    if not _NUMERIC_RANK.fullmatch(text):
        raise ValueError(f"Invalid rank: '{text}'")
    rank = int(text)
    if rank > _MAX_RANK_VALUE:
        raise ValueError(f"Invalid rank: '{text}'")
    return rank


def string_from_rank(rank: int) -> str:
    """Return the written form of ``rank``; both 1 and 14 are an ace."""
    if 2 <= rank <= 10:
        return str(rank)
    if rank in (1, 14):
        return "A"
    if 11 <= rank <= 13:
        return _FACES[rank - _FIRST_FACE_RANK]
    raise ValueError(f"Invalid rank number: '{rank}'")


@dataclass(frozen=True, order=True)
class Card:
    """A card with a numeric rank, a one-character suit and its written form."""

    rank: int
    suit: str
    text: str

    @classmethod
    def parse(cls, text: str) -> "Card":
        """Read a card such as ``"10H"`` or ``"QS"``: rank first, suit last."""
        if not text:
            raise ValueError("Empty card")
        suit = text[-1]
        return cls(rank_from_str(text[:-1]), suit, text)

    @classmethod
    def from_rank(cls, rank: int, suit: str) -> "Card":
        """Build a card from a numeric rank and a suit."""
        return cls(rank, suit, string_from_rank(rank) + suit)

    def __str__(self) -> str:
        return self.text


class RankingCategory(IntEnum):
    """Categories of poker hands, weakest first."""

    HIGHEST_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    TRIPS = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL = 6
    QUADS = 7
    STRAIGHT_FLUSH = 8