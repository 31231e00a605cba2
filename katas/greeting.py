"""The classic greeting."""


def hello() -> str:
    """Return the greeting."""
    return "Hello, World!"