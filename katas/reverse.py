"""String reversal by code point or by grapheme cluster."""

import regex


def reverse(text: str) -> str:
    """Return ``text`` with its code points in reverse order."""
    return text[::-1]


def reverse_graphemes(text: str) -> str:
    """Return ``text`` with its user-perceived characters in reverse order."""
    return "".join(reversed(regex.findall(r"\X", text)))