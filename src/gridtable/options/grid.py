#  Copyright (c) 2025 Tom Villani, Ph.D.

# gridtable/options/grid.py
"""Configuration options for grid-table parsing and rendering.

This module defines the options controlling how box-drawn tables are
decoded (strictness, column recovery, partial-line handling) and encoded
(glyph style, line terminator).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gridtable.constants import (
    DEFAULT_COLUMN_BOUNDARIES,
    DEFAULT_LINE_TERMINATOR,
    DEFAULT_REASSEMBLE_PARTIAL_LINES,
    DEFAULT_STRICT_COLUMNS,
    ColumnBoundaryMode,
)
from gridtable.options.base import BaseParserOptions, BaseRendererOptions

_COLUMN_BOUNDARY_CHOICES = ("delimiter", "anchors")


@dataclass(frozen=True)
class GridParserOptions(BaseParserOptions):
    """Configuration options for decoding grid tables.

    Parameters
    ----------
    style : str, default "box"
        Table style name or single glyph.
    strict : bool, default True
        Fail on a data row whose cell count differs from the header count.
        When False the row is padded with empty cells or truncated to fit
        and a warning is logged.
    column_boundaries : {"delimiter", "anchors"}, default "delimiter"
        How cells are recovered from a data line:
        - "delimiter": split on the delimiter glyph
        - "anchors": cut at the joint positions of the top border, which
          allows the delimiter glyph inside cell text
    reassemble_partial_lines : bool, default True
        Join a line narrower than the table with the following input when it
        looks like the start of a table line.

    Examples
    --------
    Accept rows with a wrong number of cells:
        >>> options = GridParserOptions(strict=False)

    Parse MySQL client output containing ``|`` in cell values:
        >>> options = GridParserOptions(column_boundaries="anchors")

    """

    strict: bool = field(
        default=DEFAULT_STRICT_COLUMNS,
        metadata={
            "help": "Fail on rows whose column count differs from the header",
            "cli_name": "lenient",
            "importance": "core",
        },
    )
    column_boundaries: ColumnBoundaryMode = field(
        default=DEFAULT_COLUMN_BOUNDARIES,
        metadata={
            "help": "Recover cells by splitting on the delimiter or by border anchor columns",
            "choices": list(_COLUMN_BOUNDARY_CHOICES),
            "importance": "advanced",
        },
    )
    reassemble_partial_lines: bool = field(
        default=DEFAULT_REASSEMBLE_PARTIAL_LINES,
        metadata={
            "help": "Join truncated table lines with the following input",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate enumerated options.

        Raises
        ------
        ValueError
            If ``column_boundaries`` is not a supported mode.

        """
        if self.column_boundaries not in _COLUMN_BOUNDARY_CHOICES:
            raise ValueError(
                f"column_boundaries must be one of {', '.join(_COLUMN_BOUNDARY_CHOICES)}, "
                f"got {self.column_boundaries!r}"
            )


@dataclass(frozen=True)
class GridRendererOptions(BaseRendererOptions):
    r"""Configuration options for rendering grid tables.

    Parameters
    ----------
    style : str, default "box"
        Table style name or single glyph. Unknown styles fall back to ``box``.
    line_terminator : str, default "\\n"
        Line ending written after every output line.

    """

    line_terminator: str = field(
        default=DEFAULT_LINE_TERMINATOR,
        metadata={"help": "Line ending style ('\\n' or '\\r\\n')", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the line terminator.

        Raises
        ------
        ValueError
            If the line terminator is not a line break sequence.

        """
        if self.line_terminator not in ("\n", "\r\n", "\r"):
            raise ValueError(f"line_terminator must be '\\n', '\\r\\n' or '\\r', got {self.line_terminator!r}")
