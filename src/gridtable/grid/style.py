#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/grid/style.py
"""Glyph sets for grid tables.

A grid style names three glyphs: the *joint* drawn where border lines meet
column boundaries, the *fill* repeated along border lines, and the
*delimiter* that separates cells on header and data lines.

The ``box`` style uses ``+``, ``-`` and ``|``. Every other style is a
single-character style in which one glyph plays all three roles::

    box        plus       dot
    +---+---+  +++++++++  ·········
    | A | B |  + A + B +  · A · B ·
    +---+---+  +++++++++  ·········

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridtable.constants import BOX_DELIMITER, BOX_FILL, BOX_JOINT, BOX_STYLE_NAME, STYLE_ALIASES
from gridtable.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridStyle:
    """Resolved glyph set for one decode or encode call.

    Parameters
    ----------
    joint : str
        Glyph at border/column intersections
    fill : str
        Glyph repeated along border lines
    delimiter : str
        Glyph separating cells on header and data lines
    name : str
        Style name the glyphs were resolved from

    """

    joint: str
    fill: str
    delimiter: str
    name: str = BOX_STYLE_NAME

    @property
    def is_single_glyph(self) -> bool:
        """Whether one glyph serves as joint, fill and delimiter."""
        return self.joint == self.fill == self.delimiter

    @classmethod
    def single(cls, glyph: str, name: str | None = None) -> GridStyle:
        """Build a single-character style from ``glyph``."""
        return cls(joint=glyph, fill=glyph, delimiter=glyph, name=name or glyph)


BOX_STYLE = GridStyle(joint=BOX_JOINT, fill=BOX_FILL, delimiter=BOX_DELIMITER, name=BOX_STYLE_NAME)


def list_styles() -> dict[str, str]:
    """Return the named styles mapped to a short glyph preview."""
    styles = {BOX_STYLE_NAME: f"{BOX_JOINT}{BOX_FILL}{BOX_DELIMITER}"}
    styles.update(STYLE_ALIASES)
    return styles


def resolve_style(name: str | None = None, *, strict: bool = True) -> GridStyle:
    """Resolve a style name or literal glyph to a :class:`GridStyle`.

    Parameters
    ----------
    name : str or None, default None
        ``"box"``, a named alias (``"plus"``, ``"dot"``, ``"bubble"``),
        or any single non-whitespace character. ``None`` selects ``box``.
    strict : bool, default True
        When True an unresolvable name raises ``ConfigurationError``.
        When False it falls back to the ``box`` style.

    Returns
    -------
    GridStyle
        The resolved glyph set

    Raises
    ------
    ConfigurationError
        If ``strict`` is True and the name is neither a known style nor a
        single non-whitespace character

    Examples
    --------
        >>> resolve_style("dot").delimiter
        '·'
        >>> resolve_style("*").joint
        '*'

    """
    if name is None:
        return BOX_STYLE

    alias = name.lower()
    if alias == BOX_STYLE_NAME:
        return BOX_STYLE
    if alias in STYLE_ALIASES:
        return GridStyle.single(STYLE_ALIASES[alias], name=alias)
    if len(name) == 1 and not name.isspace():
        return GridStyle.single(name)

    if strict:
        known = ", ".join(list_styles())
        raise ConfigurationError(
            f"Unknown table style {name!r}; expected one of {known} or a single character",
            parameter_name="style",
            parameter_value=name,
        )

    logger.debug("Unknown table style %r, falling back to %r", name, BOX_STYLE_NAME)
    return BOX_STYLE
