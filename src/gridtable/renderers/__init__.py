#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Table renderers."""

from gridtable.renderers.base import BaseRenderer
from gridtable.renderers.grid import GridRenderer, compute_column_widths, validate_table

__all__ = ["BaseRenderer", "GridRenderer", "compute_column_widths", "validate_table"]
