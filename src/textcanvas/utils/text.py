#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/utils/text.py
"""String helpers used by the layout engine.

Functions
---------
is_blank : Check whether a string is empty or whitespace-only
pad_left : Right-align text in a fixed-width field
pad_right : Left-align text in a fixed-width field
pad_center : Center text in a fixed-width field
split_bounded : Split a string a limited number of times
split_lines : Split a string into lines, always yielding one entry

Examples
--------
    >>> from textcanvas.utils.text import pad_center
    >>> pad_center("ab", 5)
    ' ab  '

"""

from __future__ import annotations


def is_blank(text: str | None) -> bool:
    """Return True if ``text`` is None, empty, or consists of whitespace only."""
    return not text or text.isspace()


def pad_left(text: str, width: int) -> str:
    """Prepend spaces until ``text`` is ``width`` characters long.

    Text that already is at least ``width`` characters long is returned
    unchanged (padding never truncates).
    """
    return text.rjust(width)


def pad_right(text: str, width: int) -> str:
    """Append spaces until ``text`` is ``width`` characters long."""
    return text.ljust(width)


def pad_center(text: str, width: int) -> str:
    """Center ``text`` in a field of ``width`` characters.

    Parameters
    ----------
    text : str
        The text to pad
    width : int
        The target width

    Returns
    -------
    str
        The padded text. If the number of padding characters is odd, the
        extra space is added on the right.

    """
    missing = width - len(text)
    if missing <= 0:
        return text
    front = missing // 2
    return " " * front + text + " " * (missing - front)


def split_bounded(text: str, separator: str, max_splits: int) -> list[str]:
    """Split ``text`` on ``separator`` at most ``max_splits`` times.

    The remainder after the last split is kept as the final element, so
    ``split_bounded("a:b:c", ":", 1)`` yields ``["a", "b:c"]``. A
    ``max_splits`` lower than 1 returns the whole string as the only element.
    """
    if max_splits < 1:
        return [text]
    return text.split(separator, max_splits)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newline characters.

    Unlike :meth:`str.splitlines`, trailing newlines produce trailing empty
    entries and an empty string yields ``[""]``, which keeps the number of
    entries equal to the number of visual lines.
    """
    return text.split("\n")
