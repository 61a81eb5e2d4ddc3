"""Rendering of listings in short (grid) and long (detailed) form."""

from __future__ import annotations

from .detailed import FieldWidths, compute_field_widths, format_detailed_line, format_detailed_lines
from .listing import ListingResult, decode_entries, decode_entry, render_listing

__all__ = [
    "FieldWidths",
    "compute_field_widths",
    "format_detailed_line",
    "format_detailed_lines",
    "ListingResult",
    "decode_entry",
    "decode_entries",
    "render_listing",
]
