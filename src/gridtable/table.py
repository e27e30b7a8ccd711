#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/table.py
"""Table data model shared by the grid parser and renderer.

A ``Table`` is an ordered list of header strings plus an ordered list of
rows. Every committed row has exactly ``len(headers)`` cells; the check
happens in :meth:`Table.append_row` so a malformed row is never stored.

Examples
--------
    >>> table = Table(headers=["id", "name"])
    >>> table.append_row(["1", "Alice"])
    >>> table.column_count
    2

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from gridtable.exceptions import ValidationError

Row = List[str]


@dataclass
class Table:
    """Headers and rows of a single table.

    Parameters
    ----------
    headers : list of str, default = empty list
        Column names in display order
    rows : list of list of str, default = empty list
        Data rows; each must have ``len(headers)`` cells

    """

    headers: list[str] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        """Number of columns defined by the headers."""
        return len(self.headers)

    @property
    def is_empty(self) -> bool:
        """Whether the table has no data rows."""
        return not self.rows

    def append_row(self, row: Sequence[str]) -> None:
        """Append a row after checking it against the header count.

        Parameters
        ----------
        row : sequence of str
            Cell values for the new row

        Raises
        ------
        ValidationError
            If the row length differs from the number of headers

        """
        if len(row) != len(self.headers):
            raise ValidationError(
                f"row has {len(row)} columns, but table has {len(self.headers)}",
                parameter_name="row",
                parameter_value=list(row),
            )
        self.rows.append(list(row))

    def extend_rows(self, rows: Iterable[Sequence[str]]) -> None:
        """Append several rows, stopping at the first invalid one."""
        for row in rows:
            self.append_row(row)

    def copy(self) -> Table:
        """Return a copy whose header and row lists are independent of this table."""
        return Table(headers=list(self.headers), rows=[list(row) for row in self.rows])
