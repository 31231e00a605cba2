"""A user with basic health statistics."""

from dataclasses import dataclass


@dataclass
class User:
    """A named user with an age in years and a weight."""

    name: str
    age: int
    weight: float