"""Aligned long-form rows.

Field widths depend on every entry in the listing, so all metadata must be
decoded before the first line is formatted.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..metadata.types import SYMLINK_ARROW, DecodedMetadata


@dataclass(frozen=True)
class FieldWidths:
    """Widest rendered value per aligned field across one listing."""

    link_count: int = 0
    owner: int = 0
    group: int = 0
    size: int = 0


def compute_field_widths(entries: Sequence[DecodedMetadata]) -> FieldWidths:
    if not entries:
        return FieldWidths()
    return FieldWidths(
        link_count=max(len(str(entry.link_count)) for entry in entries),
        owner=max(len(entry.owner_name) for entry in entries),
        group=max(len(entry.group_name) for entry in entries),
        size=max(len(str(entry.size_bytes)) for entry in entries),
    )


def _name_column(entry: DecodedMetadata, decorate: Callable[[str], str] | None) -> str:
    if decorate is None:
        return entry.display_name
    shown = decorate(entry.name)
    if entry.symlink_target is None:
        return shown
    return f"{shown}{SYMLINK_ARROW}{entry.display_target}"


def format_detailed_line(
    entry: DecodedMetadata,
    widths: FieldWidths,
    decorate: Callable[[str], str] | None = None,
) -> str:
    """Render one entry as ``mode  links owner  group  size time name``."""
    return (
        f"{entry.mode_string}  "
        f"{str(entry.link_count).rjust(widths.link_count)} "
        f"{entry.owner_name.ljust(widths.owner)}  "
        f"{entry.group_name.ljust(widths.group)}  "
        f"{str(entry.size_bytes).rjust(widths.size)} "
        f"{entry.mtime_display} "
        f"{_name_column(entry, decorate)}"
    )


def format_detailed_lines(
    entries: Sequence[DecodedMetadata],
    decorate: Callable[[str], str] | None = None,
) -> list[str]:
    widths = compute_field_widths(entries)
    return [format_detailed_line(entry, widths, decorate=decorate) for entry in entries]


__all__ = [
    "FieldWidths",
    "compute_field_widths",
    "format_detailed_line",
    "format_detailed_lines",
]
