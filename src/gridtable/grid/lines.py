#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/grid/lines.py
"""Line-level helpers for the grid-table parser.

Each function takes the raw line and the resolved :class:`GridStyle`
explicitly so it can be used and tested apart from the parser loop.

Functions
---------
is_border_line : Line made only of joint and fill glyphs
is_data_line : Line bounded by delimiter glyphs
find_anchors : Display columns of the joint glyphs on a border line
split_cells : Cells of a data line, split on the delimiter glyph
slice_cells_by_anchors : Cells of a data line, cut at border anchor columns
anchors_aligned : Whether a data line carries delimiters at every anchor
cells_past_anchors : Cells a data line carries beyond the last anchor

"""

from __future__ import annotations

from gridtable.grid.style import GridStyle
from gridtable.utils.width import char_width, slice_columns


def is_border_line(line: str, style: GridStyle) -> bool:
    """Check whether ``line`` is a border line such as ``+---+---+``.

    The trimmed line must start and end with the joint glyph, consist only
    of joint and fill glyphs, and hold at least one fill glyph between its
    ends.
    """
    trimmed = line.strip()
    if len(trimmed) < 3:
        return False
    if not (trimmed.startswith(style.joint) and trimmed.endswith(style.joint)):
        return False
    allowed = {style.joint, style.fill}
    if any(char not in allowed for char in trimmed):
        return False
    return style.fill in trimmed[1:-1]


def is_data_line(line: str, style: GridStyle) -> bool:
    """Check whether ``line`` is a header or data line such as ``| a | b |``."""
    trimmed = line.strip()
    return bool(trimmed) and trimmed.startswith(style.delimiter) and trimmed.endswith(style.delimiter)


def find_anchors(line: str, style: GridStyle) -> list[int]:
    """Return the display columns of every joint glyph on a border line.

    Columns are counted from the first non-blank character of the line.

    Parameters
    ----------
    line : str
        A line already classified as a border line
    style : GridStyle
        Active glyph set

    Returns
    -------
    list of int
        Anchor columns in ascending order, or an empty list when fewer than
        two anchors (a leading and a trailing joint) are present

    """
    anchors = []
    column = 0
    for char in line.strip():
        if char == style.joint:
            anchors.append(column)
        column += char_width(char)
    if len(anchors) < 2:
        return []
    return anchors


def split_cells(line: str, style: GridStyle) -> list[str]:
    """Split a data line on the delimiter glyph and trim each cell.

    Exactly one leading and one trailing delimiter are removed before
    splitting. A delimiter inside cell text is indistinguishable from a
    cell boundary.

    Examples
    --------
        >>> from gridtable.grid.style import BOX_STYLE
        >>> split_cells("| a | b  |", BOX_STYLE)
        ['a', 'b']

    """
    trimmed = line.strip()
    if len(trimmed) < 2:
        return []
    inner = trimmed[len(style.delimiter) : -len(style.delimiter)]
    return [cell.strip() for cell in inner.split(style.delimiter)]


def slice_cells_by_anchors(line: str, anchors: list[int]) -> list[str]:
    """Cut a data line at the columns between consecutive border anchors.

    The line is trimmed the same way the border line was, so a table
    indented as a whole still lines up with its anchors.
    """
    trimmed = line.strip()
    return [slice_columns(trimmed, start + 1, end).strip() for start, end in zip(anchors, anchors[1:])]


def cells_past_anchors(line: str, anchors: list[int], style: GridStyle) -> list[str]:
    """Return the cells a data line carries right of its last border anchor.

    :func:`slice_cells_by_anchors` stops at the last anchor. A lone trailing
    delimiter counts as one empty cell.
    """
    rest = slice_columns(line.strip(), anchors[-1] + 1)
    if not rest.strip():
        return []
    cells = [cell.strip() for cell in rest.split(style.delimiter) if cell.strip()]
    return cells or [""]


def anchors_aligned(line: str, anchors: list[int], style: GridStyle) -> bool:
    """Check that ``line`` has the delimiter glyph at every anchor column."""
    trimmed = line.strip()
    return all(slice_columns(trimmed, anchor, anchor + 1) == style.delimiter for anchor in anchors)
