"""Production figures for a car assembly line."""

_CARS_PER_HOUR_PER_SPEED = 221.0
_MAX_SPEED = 255


def _success_rate(speed: int) -> float:
    if speed <= 4:
        return 1.0
    if speed <= 8:
        return 0.9
    return 0.77


def production_rate_per_hour(speed: int) -> float:
    """Return the number of working cars produced per hour at ``speed``."""
    if not 0 <= speed <= _MAX_SPEED:
        raise ValueError(f"speed must be between 0 and {_MAX_SPEED}, got {speed}")
    return speed * _CARS_PER_HOUR_PER_SPEED * _success_rate(speed)


def working_items_per_minute(speed: int) -> int:
    """Return the whole number of working cars produced per minute."""
    return int(production_rate_per_hour(speed) / 60.0)