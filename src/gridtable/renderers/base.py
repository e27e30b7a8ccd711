#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/renderers/base.py
"""Base classes for table renderers.

This module defines the abstract base class that all table renderers must inherit from.
The BaseRenderer provides a consistent interface for writing a
:class:`~gridtable.table.Table` to text outputs.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO

from gridtable.exceptions import InvalidOptionsError
from gridtable.options.base import BaseRendererOptions
from gridtable.table import Table
from gridtable.utils.io_utils import OutputTarget


class BaseRenderer(ABC):
    """Abstract base class for all table renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, table: Table, output: OutputTarget) -> None:
        """Render the table to the specified output.

        Parameters
        ----------
        table : Table
            Table to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in text or binary mode

        Raises
        ------
        ValidationError
            If the table cannot be rendered; nothing is written in that case
        OSError
            If output cannot be written

        """
        pass

    def render_to_string(self, table: Table) -> str:
        """Render the table to a string.

        Parameters
        ----------
        table : Table
            Table to render

        Returns
        -------
        str
            Rendered table

        """
        buffer = StringIO()
        self.render(table, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
