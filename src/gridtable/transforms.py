#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/transforms.py
"""Whole-table transforms applied between parsing and rendering.

Every transform takes a :class:`Table` and returns a new one; the input is
left untouched.

Available Transforms
--------------------
- transpose: Swap rows and columns
- delete-empty: Remove rows whose cells are all blank
- deduplicate: Remove repeated rows, keeping the first occurrence
- uppercase: Upper-case every header and cell
- lowercase: Lower-case every header and cell
- capitalize: Upper-case the first character of every header and cell

Examples
--------
    >>> table = Table(headers=["a"], rows=[["x"], ["x"]])
    >>> apply_transforms(table, ["deduplicate", "uppercase"]).rows
    [['X']]

"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from gridtable.constants import TRANSPOSE_CORNER_HEADER, TRANSPOSE_ROW_HEADER_PREFIX
from gridtable.exceptions import ValidationError
from gridtable.table import Table

logger = logging.getLogger(__name__)

TableTransform = Callable[[Table], Table]


def _map_cells(table: Table, func: Callable[[str], str]) -> Table:
    return Table(headers=[func(h) for h in table.headers], rows=[[func(c) for c in row] for row in table.rows])


def transpose(table: Table) -> Table:
    """Swap rows and columns.

    The new headers are ``["", "Row_1", "Row_2", ...]``; each original
    column becomes a row led by its original header.
    """
    if not table.headers:
        return table.copy()

    headers = [TRANSPOSE_CORNER_HEADER] + [f"{TRANSPOSE_ROW_HEADER_PREFIX}{i}" for i in range(1, len(table.rows) + 1)]
    rows = [[header] + [row[index] for row in table.rows] for index, header in enumerate(table.headers)]
    return Table(headers=headers, rows=rows)


def delete_empty_rows(table: Table) -> Table:
    """Drop rows in which every cell is blank."""
    rows = [list(row) for row in table.rows if any(cell.strip() for cell in row)]
    return Table(headers=list(table.headers), rows=rows)


def deduplicate_rows(table: Table) -> Table:
    """Drop rows identical to an earlier row."""
    seen: set[tuple[str, ...]] = set()
    rows = []
    for row in table.rows:
        key = tuple(row)
        if key not in seen:
            seen.add(key)
            rows.append(list(row))
    return Table(headers=list(table.headers), rows=rows)


def uppercase(table: Table) -> Table:
    """Upper-case every header and cell."""
    return _map_cells(table, str.upper)


def lowercase(table: Table) -> Table:
    """Lower-case every header and cell."""
    return _map_cells(table, str.lower)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def capitalize(table: Table) -> Table:
    """Upper-case the first character of every header and cell, leaving the rest as is."""
    return _map_cells(table, _capitalize_first)


TRANSFORMS: Mapping[str, TableTransform] = {
    "transpose": transpose,
    "delete-empty": delete_empty_rows,
    "deduplicate": deduplicate_rows,
    "uppercase": uppercase,
    "lowercase": lowercase,
    "capitalize": capitalize,
}


def apply_transforms(table: Table, names: Iterable[str]) -> Table:
    """Apply the named transforms in order.

    Parameters
    ----------
    table : Table
        Table to transform
    names : iterable of str
        Transform names from :data:`TRANSFORMS`

    Returns
    -------
    Table
        The transformed table

    Raises
    ------
    ValidationError
        If a name is not a known transform

    """
    for name in names:
        try:
            transform = TRANSFORMS[name]
        except KeyError:
            raise ValidationError(
                f"Unknown transform {name!r}; available: {', '.join(TRANSFORMS)}",
                parameter_name="transforms",
                parameter_value=name,
            ) from None
        logger.debug("Applying transform: %s", name)
        table = transform(table)
    return table
