"""Poker hands: parsing, categorising, scoring and picking the winners."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from katas.cards import Card, RankingCategory

_HAND_SIZE = 5
_LOW_ACE_STRAIGHT = (2, 3, 4, 5, 14)
_LOW_ACE_RANK = 1
_CATEGORY_WEIGHT = 10**6

_CATEGORY_BY_COUNTS = {
    (1, 4): RankingCategory.QUADS,
    (2, 3): RankingCategory.FULL,
    (1, 1, 3): RankingCategory.TRIPS,
    (1, 2, 2): RankingCategory.TWO_PAIR,
    (1, 1, 1, 2): RankingCategory.ONE_PAIR,
}


def _sort_cards(cards: Sequence[Card]) -> tuple[Card, ...]:
    """Order cards by group size, then rank, so the deciding cards come last."""
    groups: dict[int, list[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    ordered = sorted(groups.items(), key=lambda item: (len(item[1]), item[0]))
    sorted_cards = [card for _, group in ordered for card in group]

    if tuple(card.rank for card in sorted_cards) == _LOW_ACE_STRAIGHT:
        high_ace = sorted_cards[-1]
        low_ace = Card.from_rank(_LOW_ACE_RANK, high_ace.suit)
        sorted_cards = [low_ace, *sorted_cards[:-1]]
    return tuple(sorted_cards)


@dataclass(frozen=True)
class Hand:
    """Five cards, ordered so that the cards deciding a tie come last."""

    cards: tuple[Card, ...]

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """Read a hand of five whitespace-separated cards such as ``"4S 5H 4C 8D 4H"``."""
        cards = [Card.parse(word) for word in text.split()]
        if len(cards) != _HAND_SIZE:
            raise ValueError(
                f"A hand holds {_HAND_SIZE} cards, got {len(cards)}: '{text}'"
            )
        return cls(_sort_cards(cards))

    def _is_straight(self) -> bool:
        ranks = [card.rank for card in self.cards]
        return len(set(ranks)) == _HAND_SIZE and ranks[-1] - ranks[0] == _HAND_SIZE - 1

    def _is_flush(self) -> bool:
        return len({card.suit for card in self.cards}) == 1

    def category(self) -> RankingCategory:
        """Return the category of this hand."""
        straight = self._is_straight()
        flush = self._is_flush()
        if straight and flush:
            return RankingCategory.STRAIGHT_FLUSH
        if flush:
            return RankingCategory.FLUSH
        if straight:
            return RankingCategory.STRAIGHT
        counts = tuple(sorted(Counter(card.rank for card in self.cards).values()))
        return _CATEGORY_BY_COUNTS.get(counts, RankingCategory.HIGHEST_CARD)

    def ranking(self) -> int:
        """Return a score where a higher value means a stronger hand."""
        cards_score = sum(card.rank * 10**position for position, card in enumerate(self.cards))
        return cards_score + int(self.category()) * _CATEGORY_WEIGHT

    def __str__(self) -> str:
        return "".join(f"[{card}]" for card in self.cards)


def winning_hands(hands: Sequence[str]) -> list[str]:
    """Return the hands that win, as the very strings given, in their input order."""
    if not hands:
        raise ValueError("No hands to compare")
    ranked = [(hand, Hand.parse(hand).ranking()) for hand in hands]
    top = max(ranking for _, ranking in ranked)
    return [hand for hand, ranking in ranked if ranking == top]