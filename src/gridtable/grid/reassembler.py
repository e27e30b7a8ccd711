#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/grid/reassembler.py
"""Reassembly of grid lines that arrive in pieces.

Once the parser knows how wide the table is (from the anchors of its top
border), a line that is narrower than that width and *looks like* the start
of a border or data line is held back and joined with whatever arrives next.
This lets the parser consume sources that yield arbitrary text fragments,
not only complete lines.

The decision of what "looks like" a table line is the heuristic
:func:`is_partial_line_candidate`. A genuinely short unrelated line that
happens to start with the delimiter glyph will also be buffered.
"""

from __future__ import annotations

import logging

from gridtable.grid.style import GridStyle
from gridtable.utils.width import display_width

logger = logging.getLogger(__name__)


def is_partial_line_candidate(line: str, style: GridStyle) -> bool:
    """Decide whether a short line plausibly continues a border or data line.

    Parameters
    ----------
    line : str
        A line narrower than the expected table width
    style : GridStyle
        Active glyph set

    Returns
    -------
    bool
        True when the trimmed line begins with a joint-and-fill border
        prefix or with the delimiter glyph

    """
    trimmed = line.strip()
    return trimmed.startswith(style.joint + style.fill) or trimmed.startswith(style.delimiter)


class PartialLineReassembler:
    """Buffer at most one short line and join it with the following input.

    Parameters
    ----------
    expected_min_length : int
        Display width every complete table line reaches
    style : GridStyle
        Active glyph set, used by the candidate policy

    """

    def __init__(self, expected_min_length: int, style: GridStyle):
        self.expected_min_length = expected_min_length
        self.style = style
        self._pending = ""

    @property
    def pending(self) -> str:
        """The buffered fragment, or an empty string."""
        return self._pending

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def _is_short(self, line: str) -> bool:
        return display_width(line) < self.expected_min_length

    def feed(self, line: str) -> str | None:
        """Offer the next scanned line.

        Parameters
        ----------
        line : str
            Next line or fragment, without its line terminator

        Returns
        -------
        str or None
            A line ready for classification, or None while a fragment is
            being held back

        """
        if self._pending:
            line = self._pending + line
            if self._is_short(line):
                self._pending = line
                return None
            logger.debug("Reassembled partial line: %r", line)
            self._pending = ""
            return line

        if self._is_short(line) and is_partial_line_candidate(line, self.style):
            self._pending = line
            return None
        return line
