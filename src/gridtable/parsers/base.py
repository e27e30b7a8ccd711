#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/parsers/base.py
"""Base classes for table parsers.

This module defines the abstract base class that all table parsers must inherit from.
The BaseParser provides a consistent interface for converting text sources
into a :class:`~gridtable.table.Table`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gridtable.exceptions import InvalidOptionsError
from gridtable.options.base import BaseParserOptions
from gridtable.table import Table
from gridtable.utils.inputs import InputSource


class BaseParser(ABC):
    """Abstract base class for all table parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: table text
    - bytes: encoded table text
    - Path: file to read
    - IO[str] or IO[bytes]: file-like object
    - iterable of str: lines or line fragments

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputSource) -> Table:
        """Parse the input into a table.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], IO[bytes] or iterable of str
            The input to parse

        Returns
        -------
        Table
            Parsed headers and rows

        Raises
        ------
        ParseError
            If the input is structurally invalid
        ConfigurationError
            If the parser options cannot be resolved

        """
        raise NotImplementedError
