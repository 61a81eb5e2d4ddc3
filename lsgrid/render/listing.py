"""Top-level listing pipeline shared by the CLI and tests.

Short form: collect names, lay out a grid.
Long form: collect names, decode each entry, format aligned rows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..errors import DecodeError, DirectoryAccessError, ListingError
from ..fs.names import collect_names
from ..fs.status import read_link_target, read_status
from ..layout.columns import layout_columns
from ..metadata.decode import decode_metadata
from ..metadata.types import DecodedMetadata
from ..text import sanitize_display_name
from .detailed import format_detailed_lines

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingResult:
    """Rendered lines plus per-entry failures that were skipped."""

    lines: tuple[str, ...]
    errors: tuple[ListingError, ...] = ()


def decode_entry(directory: Path, name: str) -> DecodedMetadata:
    """Read and decode one entry without following symlinks.

    Raises ``DirectoryAccessError`` or ``DecodeError`` for that entry only.
    """
    path = directory / name
    raw_status = read_status(path, follow_symlinks=False)
    link = raw_status.is_symlink
    target = read_link_target(path) if link else None
    return decode_metadata(raw_status, link, target, name)


def decode_entries(
    directory: Path,
    names: Sequence[str],
) -> tuple[list[DecodedMetadata], list[ListingError]]:
    """Decode every name, isolating failures so one entry never aborts the batch."""
    entries: list[DecodedMetadata] = []
    errors: list[ListingError] = []
    for name in names:
        try:
            entries.append(decode_entry(directory, name))
        except (DirectoryAccessError, DecodeError) as exc:
            LOGGER.debug("skipping %s: %s", name, exc)
            errors.append(exc)
    return entries, errors


def render_listing(
    directory: Path | str,
    long_format: bool,
    show_hidden: bool,
    column_count: int,
    padding: int,
    decorate: Callable[[str], str] | None = None,
) -> ListingResult:
    """Render one directory snapshot.

    Enumeration failures propagate as ``DirectoryAccessError``. An empty
    directory yields no lines. ``decorate`` receives raw entry names and must
    return their escaped display text, optionally styled.
    """
    root = Path(directory)
    names = collect_names(root, show_hidden)
    LOGGER.debug("collected %d names from %s", len(names), root)
    if not names:
        return ListingResult(lines=())

    if not long_format:
        rows = layout_columns(names, column_count, padding, decorate=decorate, display=sanitize_display_name)
        return ListingResult(lines=tuple(rows))

    entries, errors = decode_entries(root, names)
    lines = format_detailed_lines(entries, decorate=decorate)
    return ListingResult(lines=tuple(lines), errors=tuple(errors))


__all__ = [
    "ListingResult",
    "decode_entry",
    "decode_entries",
    "render_listing",
]
