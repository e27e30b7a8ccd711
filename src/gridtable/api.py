#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/api.py
"""High-level entry points for decoding, encoding and converting grid tables."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from gridtable.constants import DEFAULT_SOURCE_FORMAT, DEFAULT_TARGET_FORMAT
from gridtable.converter_registry import registry
from gridtable.options.grid import GridParserOptions, GridRendererOptions
from gridtable.parsers.grid import GridParser
from gridtable.renderers.grid import GridRenderer
from gridtable.table import Table
from gridtable.transforms import apply_transforms
from gridtable.utils.inputs import InputSource
from gridtable.utils.io_utils import OutputTarget

logger = logging.getLogger(__name__)


def _merge_options(options: Any, default_cls: type, kwargs: dict[str, Any]) -> Any:
    if options is None:
        return default_cls(**kwargs)
    return options.create_updated(**kwargs) if kwargs else options


def decode(
    source: InputSource,
    table: Optional[Table] = None,
    *,
    options: Optional[GridParserOptions] = None,
    **kwargs: Any,
) -> Table:
    """Decode a grid table.

    Parameters
    ----------
    source : str, bytes, Path, IO[str], IO[bytes] or iterable of str
        Table text, file, stream or iterable of lines/fragments
    table : Table, optional
        Table to populate. Its contents are replaced only when decoding
        succeeds.
    options : GridParserOptions, optional
        Parser options
    kwargs : Any
        Overrides for individual ``GridParserOptions`` fields
        (``style``, ``strict``, ``column_boundaries``, ``reassemble_partial_lines``)

    Returns
    -------
    Table
        The decoded table (``table`` itself when one was given)

    Examples
    --------
        >>> decode("+---+\\n| A |\\n+---+\\n").headers
        ['A']
        >>> decode(text, strict=False)  # doctest: +SKIP

    """
    parser = GridParser(_merge_options(options, GridParserOptions, kwargs))
    if table is None:
        return parser.parse(source)
    return parser.parse_into(source, table)


def encode(
    table: Table,
    output: Optional[OutputTarget] = None,
    *,
    options: Optional[GridRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Encode a table as a grid.

    Parameters
    ----------
    table : Table
        Table to render
    output : str, Path, IO[bytes], IO[str] or None, optional
        Output destination. If None, the rendered text is returned.
    options : GridRendererOptions, optional
        Renderer options
    kwargs : Any
        Overrides for individual ``GridRendererOptions`` fields
        (``style``, ``line_terminator``)

    Returns
    -------
    str or None
        Rendered text when ``output`` is None, otherwise None

    Raises
    ------
    ValidationError
        If the table is invalid; nothing is written in that case

    """
    renderer = GridRenderer(_merge_options(options, GridRendererOptions, kwargs))
    if output is None:
        return renderer.render_to_string(table)
    renderer.render(table, output)
    return None


def convert(
    source: InputSource,
    output: Optional[OutputTarget] = None,
    *,
    source_format: str = DEFAULT_SOURCE_FORMAT,
    target_format: str = DEFAULT_TARGET_FORMAT,
    parser_options: Optional[GridParserOptions] = None,
    renderer_options: Optional[GridRendererOptions] = None,
    transforms: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """Convert a table between grid formats.

    Parameters
    ----------
    source : str, bytes, Path, IO[str], IO[bytes] or iterable of str
        Input table
    output : str, Path, IO[bytes], IO[str] or None, optional
        Output destination. If None, the rendered text is returned.
    source_format : str, default "ascii"
        Registered format name of the input
    target_format : str, default "ascii"
        Registered format name of the output
    parser_options : GridParserOptions, optional
        Base parser options; format defaults are applied on top
    renderer_options : GridRendererOptions, optional
        Base renderer options; format defaults are applied on top
    transforms : sequence of str, optional
        Names of table transforms applied between parsing and rendering

    Returns
    -------
    str or None
        Rendered text when ``output`` is None, otherwise None

    Examples
    --------
    Re-render MySQL output with the dot style:
        >>> options = GridRendererOptions(style="dot")
        >>> convert(mysql_text, source_format="mysql", renderer_options=options)  # doctest: +SKIP

    """
    final_parser_options = registry.parser_options_for(source_format, parser_options)
    final_renderer_options = registry.renderer_options_for(target_format, renderer_options)
    logger.debug("Converting %s -> %s", source_format, target_format)

    table = GridParser(final_parser_options).parse(source)
    if transforms:
        table = apply_transforms(table, transforms)

    renderer = GridRenderer(final_renderer_options)
    if output is None:
        return renderer.render_to_string(table)
    renderer.render(table, output)
    return None
