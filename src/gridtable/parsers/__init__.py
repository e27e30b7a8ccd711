#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Table parsers."""

from gridtable.parsers.base import BaseParser
from gridtable.parsers.grid import GridParser, ParserState

__all__ = ["BaseParser", "GridParser", "ParserState"]
