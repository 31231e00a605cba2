"""Simple level-tagged log lines."""

from enum import Enum


class LogLevel(Enum):
    """Severity of a log line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def log(level: LogLevel, message: str) -> str:
    """Return ``message`` tagged with ``level``."""
    return f"[{level.value}]: {message}"


def info(message: str) -> str:
    """Return ``message`` tagged as info."""
    return log(LogLevel.INFO, message)


def warn(message: str) -> str:
    """Return ``message`` tagged as a warning."""
    return log(LogLevel.WARNING, message)


def error(message: str) -> str:
    """Return ``message`` tagged as an error."""
    return log(LogLevel.ERROR, message)