#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/renderers/grid.py
"""Grid table rendering.

This module provides the GridRenderer class which writes a Table as a
box-drawn grid::

    +---------+-------+
    | name    | city  |
    +---------+-------+
    | Alice   | 東京  |
    +---------+-------+

Column widths are measured in display columns, so double-width characters
keep the borders aligned. The whole table is validated before the first
line is written: a failed render produces no output.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from gridtable.constants import CELL_PADDING
from gridtable.exceptions import ValidationError
from gridtable.grid.style import GridStyle, resolve_style
from gridtable.options.grid import GridRendererOptions
from gridtable.renderers.base import BaseRenderer
from gridtable.table import Table
from gridtable.utils.io_utils import OutputTarget, open_writer
from gridtable.utils.width import display_width, pad_to_width

logger = logging.getLogger(__name__)


def validate_table(table: Table | None) -> None:
    """Check that ``table`` can be rendered as a grid.

    Every row is checked before returning.

    Raises
    ------
    ValidationError
        If the table is None, has no headers, has a row whose length differs
        from the header count, or has a cell containing a line break

    """
    if table is None:
        raise ValidationError("input table cannot be None", parameter_name="table")

    column_count = len(table.headers)
    if column_count == 0:
        raise ValidationError("table must have at least one header", parameter_name="headers")

    _check_cells(table.headers, "header")
    for index, row in enumerate(table.rows):
        if len(row) != column_count:
            raise ValidationError(
                f"row {index} has {len(row)} columns, but table has {column_count}",
                parameter_name="rows",
                parameter_value=row,
            )
        _check_cells(row, f"row {index}")


def _check_cells(cells: Sequence[str], where: str) -> None:
    for cell in cells:
        if "\n" in cell or "\r" in cell:
            raise ValidationError(f"{where} has a cell containing a line break: {cell!r}", parameter_value=cell)


def compute_column_widths(table: Table) -> list[int]:
    """Return the display width of the widest header or cell in each column."""
    widths = [display_width(header) for header in table.headers]
    for row in table.rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], display_width(cell))
    return widths


class GridRenderer(BaseRenderer):
    """Render a Table as a box-drawn grid.

    Parameters
    ----------
    options : GridRendererOptions or None, default = None
        Grid rendering options

    Examples
    --------
        >>> from gridtable.table import Table
        >>> renderer = GridRenderer()
        >>> print(renderer.render_to_string(Table(headers=["A", "B"])), end="")
        +---+---+
        | A | B |
        +---+---+

    """

    def __init__(self, options: GridRendererOptions | None = None):
        """Initialize the grid renderer with options."""
        BaseRenderer._validate_options_type(options, GridRendererOptions, "grid")
        options = options or GridRendererOptions()
        super().__init__(options)
        self.options: GridRendererOptions = options
        self.style: GridStyle = resolve_style(options.style, strict=False)

    def render(self, table: Table, output: OutputTarget) -> None:
        """Render the table to a file path or stream.

        Parameters
        ----------
        table : Table
            Table to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination; paths are only opened once validation passes

        Raises
        ------
        ValidationError
            If the table is invalid

        """
        validate_table(table)
        widths = compute_column_widths(table)
        with open_writer(output) as write:
            self._write_lines(table, widths, write)

    def _write_lines(self, table: Table, widths: list[int], write: Callable[[str], object]) -> None:
        border = self._border_line(widths)
        eol = self.options.line_terminator

        write(border + eol)
        write(self._cell_line(table.headers, widths) + eol)
        write(border + eol)
        for row in table.rows:
            write(self._cell_line(row, widths) + eol)
        if table.rows:
            write(border + eol)

        logger.debug("Rendered grid table with %d columns and %d rows", len(widths), len(table.rows))

    def _border_line(self, widths: list[int]) -> str:
        style = self.style
        segments = [style.joint + style.fill * (width + 2 * CELL_PADDING) for width in widths]
        return "".join(segments) + style.joint

    def _cell_line(self, cells: Sequence[str], widths: list[int]) -> str:
        delimiter = self.style.delimiter
        pad = " " * CELL_PADDING
        segments = [delimiter + pad + pad_to_width(cell, width) + pad for cell, width in zip(cells, widths)]
        return "".join(segments) + delimiter
