#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/utils/width.py
"""Display-width measurement for fixed-width terminal output.

Characters whose East Asian Width property is Wide (``W``) or Fullwidth
(``F``) occupy two terminal columns; every other character occupies one.
Column sizing, padding and anchor-based slicing in the grid codec all work
in these display columns rather than in code points.

Functions
---------
char_width : Width of a single character
display_width : Width of a string
pad_to_width : Right-pad a string to a display width
slice_columns : Cut a string by display-column positions

Examples
--------
    >>> display_width("abc")
    3
    >>> display_width("中文")
    4
    >>> pad_to_width("中", 4)
    '中  '

"""

from __future__ import annotations

import unicodedata

_WIDE_CLASSES = frozenset({"W", "F"})


def char_width(char: str) -> int:
    """Return the display width of a single character (1 or 2)."""
    return 2 if unicodedata.east_asian_width(char) in _WIDE_CLASSES else 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Parameters
    ----------
    text : str
        String to measure

    Returns
    -------
    int
        Sum of per-character display widths

    """
    return sum(char_width(char) for char in text)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces until it spans ``width`` display columns.

    Text that is already as wide as ``width`` (or wider) is returned unchanged.
    """
    padding = width - display_width(text)
    if padding <= 0:
        return text
    return text + " " * padding


def slice_columns(text: str, start: int, end: int | None = None) -> str:
    """Return the characters of ``text`` lying within display columns ``[start, end)``.

    A wide character is included when its first column falls inside the range.

    Parameters
    ----------
    text : str
        Source string
    start : int
        First display column (inclusive)
    end : int or None, default None
        Last display column (exclusive); ``None`` means end of string

    Returns
    -------
    str
        The selected characters

    """
    selected = []
    column = 0
    for char in text:
        if end is not None and column >= end:
            break
        if column >= start:
            selected.append(char)
        column += char_width(char)
    return "".join(selected)
