#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Format registry for the named grid formats.

This module maps format names to the parser and renderer option defaults
that distinguish them. Both built-in formats share the grid codec:

- ``ascii``: generic grid table, any style, cells split on the delimiter
- ``mysql``: MySQL client output, ``box`` style, cells cut at the border
  anchor columns so ``|`` may appear inside values
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from gridtable.constants import ASCII_EXTENSIONS, DEFAULT_SOURCE_FORMAT, MYSQL_EXTENSIONS
from gridtable.exceptions import FormatError
from gridtable.options.grid import GridParserOptions, GridRendererOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatSpec:
    """Description of a named grid format.

    Parameters
    ----------
    name : str
        Format name used by ``--from``/``--to``
    description : str
        One-line description for help output
    extensions : tuple of str
        File extensions detected as this format
    parser_defaults : dict
        Option values forced onto ``GridParserOptions`` for this format
    renderer_defaults : dict
        Option values forced onto ``GridRendererOptions`` for this format

    """

    name: str
    description: str
    extensions: tuple[str, ...] = ()
    parser_defaults: Dict[str, Any] = field(default_factory=dict)
    renderer_defaults: Dict[str, Any] = field(default_factory=dict)


class ConverterRegistry:
    """Registry of named grid formats.

    Formats are looked up by name; file extensions are used for detection.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._formats: Dict[str, FormatSpec] = {}

    def register(self, spec: FormatSpec) -> None:
        """Register a format, replacing any format of the same name."""
        if spec.name in self._formats:
            logger.debug("Replacing registered format: %s", spec.name)
        else:
            logger.debug("Registered format: %s", spec.name)
        self._formats[spec.name] = spec

    def list_formats(self) -> List[str]:
        """Return the registered format names in sorted order."""
        return sorted(self._formats)

    def get(self, name: str) -> FormatSpec:
        """Return the format registered as ``name``.

        Raises
        ------
        FormatError
            If no format of that name is registered

        """
        try:
            return self._formats[name.lower()]
        except KeyError:
            raise FormatError(format_type=name, supported_formats=self.list_formats()) from None

    def detect_format(
        self, path: Union[str, Path, None], default: Optional[str] = DEFAULT_SOURCE_FORMAT
    ) -> Optional[str]:
        """Detect a format from a file name extension.

        Parameters
        ----------
        path : str, Path or None
            File name to inspect
        default : str or None, default "ascii"
            Returned when no registered extension matches

        Returns
        -------
        str or None
            Detected format name, or ``default``

        """
        if path is not None:
            suffix = Path(path).suffix.lower()
            for spec in self._formats.values():
                if suffix in spec.extensions:
                    logger.debug("Detected format %s from extension %s", spec.name, suffix)
                    return spec.name
        return default

    def parser_options_for(self, name: str, base: GridParserOptions | None = None) -> GridParserOptions:
        """Apply the format's parser defaults on top of ``base``."""
        spec = self.get(name)
        options = base or GridParserOptions()
        return options.create_updated(**spec.parser_defaults) if spec.parser_defaults else options

    def renderer_options_for(self, name: str, base: GridRendererOptions | None = None) -> GridRendererOptions:
        """Apply the format's renderer defaults on top of ``base``."""
        spec = self.get(name)
        options = base or GridRendererOptions()
        return options.create_updated(**spec.renderer_defaults) if spec.renderer_defaults else options


registry = ConverterRegistry()

registry.register(
    FormatSpec(
        name="ascii",
        description="Box-drawn ASCII table (styles: box, plus, dot, bubble or one glyph)",
        extensions=ASCII_EXTENSIONS,
    )
)
registry.register(
    FormatSpec(
        name="mysql",
        description="MySQL client table output",
        extensions=MYSQL_EXTENSIONS,
        parser_defaults={"style": "box", "column_boundaries": "anchors"},
        renderer_defaults={"style": "box"},
    )
)
