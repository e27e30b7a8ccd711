#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the gridtable library.

This module centralizes the default configuration values and glyph
definitions used across the grid-table codec.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Grid Styles - Glyph sets and style aliases
3. Parser Defaults - Decode behavior
4. Renderer Defaults - Encode behavior
5. Formats - Named grid formats and file extensions
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

ColumnBoundaryMode = Literal["delimiter", "anchors"]
GridFormatName = Literal["ascii", "mysql"]

# =============================================================================
# Grid Styles
# =============================================================================

BOX_STYLE_NAME = "box"
BOX_JOINT = "+"
BOX_FILL = "-"
BOX_DELIMITER = "|"

# Named single-character styles. Read-only after import.
STYLE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "plus": "+",
        "dot": "·",
        "bubble": "◌",
    }
)

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_GRID_STYLE = BOX_STYLE_NAME
DEFAULT_STRICT_COLUMNS = True
DEFAULT_COLUMN_BOUNDARIES: ColumnBoundaryMode = "delimiter"
DEFAULT_REASSEMBLE_PARTIAL_LINES = True

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_LINE_TERMINATOR = "\n"
CELL_PADDING = 1

# =============================================================================
# Formats
# =============================================================================

DEFAULT_SOURCE_FORMAT: GridFormatName = "ascii"
DEFAULT_TARGET_FORMAT: GridFormatName = "ascii"

ASCII_EXTENSIONS = (".txt", ".ascii", ".grid")
MYSQL_EXTENSIONS = (".mysql", ".out")

TRANSPOSE_CORNER_HEADER = ""
TRANSPOSE_ROW_HEADER_PREFIX = "Row_"
