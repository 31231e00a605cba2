"""Checks that brackets in a text are properly paired and nested."""

_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def brackets_are_balanced(text: str) -> bool:
    """Return True if every (), [] and {} in ``text`` is matched and nested."""
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[char]:
                return False
    return not stack