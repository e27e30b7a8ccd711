"""Base classes for parser and renderer options.

This module defines the foundation classes for the grid parser and renderer
options used throughout the gridtable conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from gridtable.constants import DEFAULT_GRID_STYLE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    style : str, default "box"
        Table style name or single glyph. Unknown styles fall back to
        ``box`` when rendering.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    style: str = field(
        default=DEFAULT_GRID_STYLE,
        metadata={
            "help": "Table style: box, plus(+), dot(·), bubble(◌) or any single character",
            "importance": "core",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    style : str, default "box"
        Table style name or single glyph. Unknown styles are a
        ``ConfigurationError`` when parsing.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    style: str = field(
        default=DEFAULT_GRID_STYLE,
        metadata={
            "help": "Table style: box, plus(+), dot(·), bubble(◌) or any single character",
            "importance": "core",
        },
    )
