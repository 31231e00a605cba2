"""A player's high score list."""

from collections.abc import Iterable


class HighScores:
    """An immutable record of scores in the order they were made."""

    def __init__(self, scores: Iterable[int]) -> None:
        self.scores: tuple[int, ...] = tuple(scores)

    def __repr__(self) -> str:
        return f"HighScores({list(self.scores)!r})"

    def latest(self) -> int | None:
        """Return the most recent score, or None if there is none."""
        return self.scores[-1] if self.scores else None

    def personal_best(self) -> int | None:
        """Return the highest score, or None if there is none."""
        return max(self.scores, default=None)

    def personal_top_three(self) -> list[int]:
        """Return up to three highest scores, highest first."""
        return sorted(self.scores, reverse=True)[:3]