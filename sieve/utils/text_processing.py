"""
Text processing utilities shared by the intake and scoring contexts.
"""

import math
import re
from typing import Iterable, List

# Characters that open a bullet line in extracted résumé text
BULLET_CHARS = "•·▪►●○◦‣⁃∙*-–—"

_LEADING_BULLET = re.compile(rf"^[{re.escape(BULLET_CHARS)}]+\s*")


def is_bullet(line: str) -> bool:
    """Check whether a (stripped) line starts with a bullet character."""
    return bool(line) and line[0] in BULLET_CHARS


def strip_bullet(line: str) -> str:
    """
    Remove a leading bullet marker and the whitespace after it.

    Example:
        >>> strip_bullet("• Built data pipelines")
        'Built data pipelines'
        >>> strip_bullet("-- Led team of 4")
        'Led team of 4'
    """
    return _LEADING_BULLET.sub("", line.strip(), count=1)


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    """
    Remove exact duplicates, keeping the first occurrence of each item.

    Comparison is case-sensitive: "Python" and "python" are both kept.
    """
    return list(dict.fromkeys(items))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves going up.

    Python's round() uses banker's rounding (round(12.5) == 12); scores are
    reported the way a person would round them.
    """
    return int(math.floor(value + 0.5))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
