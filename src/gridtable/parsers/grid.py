#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/parsers/grid.py
"""Grid table to Table converter.

This module parses box-drawn tables such as MySQL client output::

    +----------+--------------+
    |  FIELD   |     TYPE     |
    +----------+--------------+
    | user_id  | smallint(5)  |
    +----------+--------------+

Parsing is a line-driven state machine::

    START -> HEADER -> HEADER_SEPARATOR -> DATA -> END

Free text before the top border and after the bottom border is ignored.
The first border fixes the table width; from then on, lines narrower than
the table that look like table lines are joined with the following input
(see :mod:`gridtable.grid.reassembler`).

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from gridtable.exceptions import ConfigurationError, ParseError
from gridtable.grid.lines import (
    anchors_aligned,
    cells_past_anchors,
    find_anchors,
    is_border_line,
    is_data_line,
    slice_cells_by_anchors,
    split_cells,
)
from gridtable.grid.reassembler import PartialLineReassembler
from gridtable.grid.style import GridStyle, resolve_style
from gridtable.options.grid import GridParserOptions
from gridtable.parsers.base import BaseParser
from gridtable.table import Table
from gridtable.utils.inputs import InputSource, open_lines

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Position of the parser within the table structure."""

    START = "start"
    HEADER = "header"
    HEADER_SEPARATOR = "header_separator"
    DATA = "data"
    END = "end"


@dataclass
class _DecodeContext:
    """Mutable state of a single parse call."""

    style: GridStyle
    state: ParserState = ParserState.START
    table: Table = field(default_factory=Table)
    anchors: list[int] = field(default_factory=list)
    expected_min_length: int = 0
    reassembler: Optional[PartialLineReassembler] = None
    line_number: int = 0
    stop: bool = False

    def error(self, message: str, line: str) -> ParseError:
        return ParseError(self.line_number, message, line, parsing_stage=self.state.value)

    def transition(self, state: ParserState) -> None:
        logger.debug("Line %d: %s -> %s", self.line_number, self.state.value, state.value)
        self.state = state


class GridParser(BaseParser):
    """Convert box-drawn grid tables to :class:`Table`.

    Parameters
    ----------
    options : GridParserOptions or None, default = None
        Grid parsing options

    Examples
    --------
        >>> parser = GridParser()
        >>> table = parser.parse("+---+\\n| A |\\n+---+\\n| 1 |\\n+---+\\n")
        >>> table.headers, table.rows
        (['A'], [['1']])

    """

    def __init__(self, options: GridParserOptions | None = None):
        """Initialize the grid parser with options."""
        BaseParser._validate_options_type(options, GridParserOptions, "grid")
        options = options or GridParserOptions()
        super().__init__(options)
        self.options: GridParserOptions = options
        self._handlers: dict[ParserState, Callable[[_DecodeContext, str], None]] = {
            ParserState.START: self._handle_start,
            ParserState.HEADER: self._handle_header,
            ParserState.HEADER_SEPARATOR: self._handle_header_separator,
            ParserState.DATA: self._handle_data,
            ParserState.END: self._handle_end,
        }

    def parse(self, input_data: InputSource) -> Table:
        """Parse a grid table.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], IO[bytes] or iterable of str
            Table text, a file, a stream, or an iterable of lines/fragments

        Returns
        -------
        Table
            Parsed headers and rows

        Raises
        ------
        ConfigurationError
            If the style cannot be resolved; raised before any input is read
        ParseError
            If the table is structurally invalid

        """
        style = self._resolve_style()
        with open_lines(input_data) as lines:
            return self.parse_lines(lines, style)

    def parse_into(self, input_data: InputSource, table: Table) -> Table:
        """Parse ``input_data`` and store the result in an existing table.

        The table is only modified when parsing succeeds.
        """
        parsed = self.parse(input_data)
        table.headers = parsed.headers
        table.rows = parsed.rows
        return table

    def parse_lines(self, lines: Iterable[str], style: GridStyle | None = None) -> Table:
        """Run the state machine over already split lines.

        Parameters
        ----------
        lines : iterable of str
            Lines or line fragments without terminators
        style : GridStyle or None, default None
            Resolved glyph set; resolved from the options when omitted

        Returns
        -------
        Table
            Parsed headers and rows

        """
        ctx = _DecodeContext(style=style or self._resolve_style())

        for raw_line in lines:
            ctx.line_number += 1
            line = self._reassemble(ctx, raw_line)
            if line is None or not line.strip():
                continue
            self._handlers[ctx.state](ctx, line)
            if ctx.stop:
                break

        self._finish(ctx)
        logger.debug("Parsed grid table with %d columns and %d rows", ctx.table.column_count, len(ctx.table.rows))
        return ctx.table

    def _resolve_style(self) -> GridStyle:
        style = resolve_style(self.options.style, strict=True)
        if self.options.column_boundaries == "anchors" and style.is_single_glyph:
            raise ConfigurationError(
                f"column_boundaries='anchors' needs distinct joint and fill glyphs; style {style.name!r} has one glyph",
                parameter_name="column_boundaries",
                parameter_value=self.options.column_boundaries,
            )
        return style

    @staticmethod
    def _reassemble(ctx: _DecodeContext, line: str) -> str | None:
        if ctx.reassembler is None or ctx.state is ParserState.END:
            return line
        return ctx.reassembler.feed(line)

    def _split(self, ctx: _DecodeContext, line: str) -> list[str]:
        if self.options.column_boundaries != "anchors":
            return split_cells(line, ctx.style)

        if self.options.strict and not anchors_aligned(line, ctx.anchors, ctx.style):
            raise ctx.error("cell boundaries do not line up with border anchors", line)
        cells = slice_cells_by_anchors(line, ctx.anchors)
        overflow = cells_past_anchors(line, ctx.anchors, ctx.style)
        if overflow:
            found = len(cells) + len(overflow)
            if self.options.strict:
                if ctx.state is ParserState.HEADER:
                    raise ctx.error(f"header column count ({found}) does not match border anchors ({len(cells)})", line)
                raise ctx.error(
                    f"data column count ({found}) does not match header count ({ctx.table.column_count})", line
                )
            logger.warning(
                "Line %d: %d cell(s) past the last border anchor; normalizing row", ctx.line_number, len(overflow)
            )
        return cells

    def _handle_start(self, ctx: _DecodeContext, line: str) -> None:
        # Anything before the top border is introductory text
        if not is_border_line(line, ctx.style):
            return

        anchors = find_anchors(line, ctx.style)
        if not anchors:
            raise ctx.error(f"failed to parse header anchors (need at least two '{ctx.style.joint}')", line)
        ctx.anchors = anchors
        ctx.expected_min_length = anchors[-1] + 1
        if self.options.reassemble_partial_lines:
            ctx.reassembler = PartialLineReassembler(ctx.expected_min_length, ctx.style)
        ctx.transition(ParserState.HEADER)

    def _handle_header(self, ctx: _DecodeContext, line: str) -> None:
        d = ctx.style.delimiter
        if is_border_line(line, ctx.style):
            raise ctx.error(f"expected header data line ({d} Header {d}), got another border", line)
        if not is_data_line(line, ctx.style):
            raise ctx.error(f"expected header data line ({d} Header {d})", line)

        cells = self._split(ctx, line)
        if not cells:
            raise ctx.error("failed to parse header fields from data line", line)
        ctx.table.headers = cells
        ctx.transition(ParserState.HEADER_SEPARATOR)

    def _handle_header_separator(self, ctx: _DecodeContext, line: str) -> None:
        if not is_border_line(line, ctx.style):
            s = ctx.style
            raise ctx.error(f"expected header separator line ({s.joint}{s.fill}{s.fill}{s.joint})", line)
        ctx.transition(ParserState.DATA)

    def _handle_data(self, ctx: _DecodeContext, line: str) -> None:
        if is_border_line(line, ctx.style):
            ctx.transition(ParserState.END)
            return
        if not is_data_line(line, ctx.style):
            s = ctx.style
            raise ctx.error(
                f"expected data line ({s.delimiter} Data {s.delimiter}) "
                f"or bottom border line ({s.joint}{s.fill}{s.fill}{s.joint})",
                line,
            )

        cells = self._split(ctx, line)
        expected = ctx.table.column_count
        if len(cells) != expected:
            if self.options.strict:
                raise ctx.error(f"data column count ({len(cells)}) does not match header count ({expected})", line)
            logger.warning(
                "Line %d: data column count (%d) does not match header count (%d); normalizing row",
                ctx.line_number,
                len(cells),
                expected,
            )
            cells = cells[:expected] + [""] * (expected - len(cells))
        ctx.table.append_row(cells)

    @staticmethod
    def _handle_end(ctx: _DecodeContext, line: str) -> None:
        # Trailing content such as "1 row in set (0.00 sec)" is left unread
        ctx.stop = True

    @staticmethod
    def _finish(ctx: _DecodeContext) -> None:
        if ctx.reassembler is not None and ctx.reassembler.has_pending:
            raise ctx.error(f"input ended with incomplete line in state '{ctx.state.value}'", ctx.reassembler.pending)

        if ctx.state is ParserState.END or ctx.state is ParserState.DATA:
            return
        if ctx.state is ParserState.HEADER_SEPARATOR and ctx.table.headers:
            return
        raise ctx.error(
            f"input ended unexpectedly in state '{ctx.state.value}', table possibly incomplete or malformed", ""
        )
