"""Small byte vectors: empty, zero-filled and the first Fibonacci numbers."""


def create_empty() -> list[int]:
    """Return an empty list."""
    return []


def create_buffer(count: int) -> list[int]:
    """Return a list of ``count`` zeroes."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return [0] * count


def fibonacci() -> list[int]:
    """Return the first five Fibonacci numbers."""
    return [1, 1, 2, 3, 5]