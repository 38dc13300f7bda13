"""Column width measurement for rendered rows."""

import unicodedata


def display_width(text: str) -> int:
    """Count every code point as one column, wide glyphs included."""
    return len(text)


def terminal_width(text: str) -> int:
    """Count wide and fullwidth characters as two columns."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)
