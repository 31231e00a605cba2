"""The moment one gigasecond after a given moment."""

from datetime import datetime, timedelta

GIGASECOND = timedelta(seconds=1_000_000_000)


def after(start: datetime) -> datetime:
    """Return the datetime one billion seconds after ``start``."""
    return start + GIGASECOND