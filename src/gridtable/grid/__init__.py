#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Grid-table building blocks: styles, line classification and reassembly."""

from gridtable.grid.lines import (
    anchors_aligned,
    cells_past_anchors,
    find_anchors,
    is_border_line,
    is_data_line,
    slice_cells_by_anchors,
    split_cells,
)
from gridtable.grid.reassembler import PartialLineReassembler, is_partial_line_candidate
from gridtable.grid.style import BOX_STYLE, GridStyle, list_styles, resolve_style

__all__ = [
    "BOX_STYLE",
    "GridStyle",
    "PartialLineReassembler",
    "anchors_aligned",
    "cells_past_anchors",
    "find_anchors",
    "is_border_line",
    "is_data_line",
    "is_partial_line_candidate",
    "list_styles",
    "resolve_style",
    "slice_cells_by_anchors",
    "split_cells",
]
