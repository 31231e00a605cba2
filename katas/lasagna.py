"""Cooking times for a layered lasagna."""

_EXPECTED_MINUTES_IN_OVEN = 40
_MINUTES_PER_LAYER = 2


def expected_minutes_in_oven() -> int:
    """Return how long the lasagna should bake, in minutes."""
    return _EXPECTED_MINUTES_IN_OVEN


def remaining_minutes_in_oven(actual_minutes_in_oven: int) -> int:
    """Return the minutes left to bake after ``actual_minutes_in_oven``."""
    return expected_minutes_in_oven() - actual_minutes_in_oven


def preparation_time_in_minutes(number_of_layers: int) -> int:
    """Return the preparation time for the given number of layers."""
    return _MINUTES_PER_LAYER * number_of_layers


def elapsed_time_in_minutes(number_of_layers: int, actual_minutes_in_oven: int) -> int:
    """Return preparation time plus time already spent in the oven."""
    return actual_minutes_in_oven + preparation_time_in_minutes(number_of_layers)