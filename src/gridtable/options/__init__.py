#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options dataclasses for gridtable parsers and renderers."""

from gridtable.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from gridtable.options.grid import GridParserOptions, GridRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "GridParserOptions",
    "GridRendererOptions",
]
