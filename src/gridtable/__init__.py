"""gridtable - Parse and render box-drawn text tables.

gridtable reads tables drawn with ASCII joint, fill and delimiter glyphs,
such as the output of the MySQL command-line client, into a simple
headers-and-rows :class:`Table`, and writes tables back out in the same
format with columns aligned by display width.

Key Features
------------
- Tolerates free text before and after the table
- Reassembles lines that arrive split across several fragments
- Box style (``+ - |``) plus single-glyph styles (``plus``, ``dot``, ``bubble``
  or any character)
- Correct alignment of East Asian wide characters
- Strict or lenient handling of rows with the wrong column count
- Table transforms (transpose, deduplicate, case changes)

Supported Formats
-----------------
- **ascii**: generic grid table in any style
- **mysql**: MySQL client output, cells cut at the border columns

Requirements
------------
- Python 3.10+
- Optional ``rich`` for terminal display from the CLI

Examples
--------
Decoding MySQL output:

    >>> from gridtable import decode
    >>> table = decode(mysql_output)  # doctest: +SKIP
    >>> table.headers
    ['FIELD', 'TYPE', 'NULL', 'KEY', 'DEFAULT', 'EXTRA']

Rendering a table:

    >>> from gridtable import Table, encode
    >>> print(encode(Table(headers=["A", "B"], rows=[["1", "2"]])), end="")
    +---+---+
    | A | B |
    +---+---+
    | 1 | 2 |
    +---+---+

Converting between styles:

    >>> from gridtable import convert, GridRendererOptions
    >>> convert(text, renderer_options=GridRendererOptions(style="dot"))  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "gridtable requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from gridtable.api import convert, decode, encode  # noqa: E402
from gridtable.converter_registry import ConverterRegistry, FormatSpec, registry  # noqa: E402
from gridtable.exceptions import (  # noqa: E402
    ConfigurationError,
    DependencyError,
    FormatError,
    GridTableError,
    InvalidOptionsError,
    ParseError,
    ParsingError,
    ValidationError,
)
from gridtable.grid.style import GridStyle, list_styles, resolve_style  # noqa: E402
from gridtable.options import GridParserOptions, GridRendererOptions  # noqa: E402
from gridtable.parsers.grid import GridParser  # noqa: E402
from gridtable.renderers.grid import GridRenderer  # noqa: E402
from gridtable.table import Table  # noqa: E402
from gridtable.transforms import TRANSFORMS, apply_transforms  # noqa: E402

__all__ = [
    "__version__",
    # Main API
    "convert",
    "decode",
    "encode",
    # Data model
    "Table",
    # Codec
    "GridParser",
    "GridRenderer",
    "GridParserOptions",
    "GridRendererOptions",
    "GridStyle",
    "list_styles",
    "resolve_style",
    # Formats and transforms
    "ConverterRegistry",
    "FormatSpec",
    "registry",
    "TRANSFORMS",
    "apply_transforms",
    # Errors
    "ConfigurationError",
    "DependencyError",
    "FormatError",
    "GridTableError",
    "InvalidOptionsError",
    "ParseError",
    "ParsingError",
    "ValidationError",
]
