"""
Terminal display width of characters.
"""
import unicodedata

# Categories that occupy no column: marks, controls, format and separators
ZERO_WIDTH_CATEGORIES = {"Mn", "Me", "Cc", "Cf", "Cs", "Cn", "Zl", "Zp"}

WIDE_EAST_ASIAN = {"W", "F"}


def char_width(ch: str) -> int:
    """
    Columns taken by a single character on a terminal.

    Args:
        ch: One character

    Returns:
        0, 1 or 2
    """
    if ch == " ":
        return 1
    if unicodedata.category(ch) in ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(ch) in WIDE_EAST_ASIAN:
        return 2
    return 1


def next_tab_stop(column: int, tab_width: int = 8) -> int:
    """Column reached by a tab typed at `column`."""
    return column + tab_width - column % tab_width
