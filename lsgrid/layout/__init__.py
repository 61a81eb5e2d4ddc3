"""Short-form grid layout primitives."""

from __future__ import annotations

from .columns import (
    Decorate,
    Display,
    column_widths,
    layout_columns,
    pad_columns,
    row_count_for,
    split_into_columns,
    transpose_to_rows,
)

__all__ = [
    "Decorate",
    "Display",
    "row_count_for",
    "split_into_columns",
    "column_widths",
    "pad_columns",
    "transpose_to_rows",
    "layout_columns",
]
