"""Decoded per-entry metadata consumed by the detailed formatter."""

from __future__ import annotations

from dataclasses import dataclass

from ..text import sanitize_display_name

SYMLINK_ARROW = " -> "


@dataclass(frozen=True)
class DecodedMetadata:
    """One long-form row's worth of fields, derived once from a status snapshot.

    ``name`` and ``symlink_target`` hold the raw filesystem text; escaping for
    the terminal happens only when building ``display_name``.
    """

    type_char: str
    permissions: str
    link_count: int
    owner_name: str
    group_name: str
    size_bytes: int
    mtime_display: str
    name: str
    symlink_target: str | None = None

    @property
    def mode_string(self) -> str:
        """Ten-character token such as ``-rw-r--r--``."""
        return self.type_char + self.permissions

    @property
    def display_target(self) -> str | None:
        if self.symlink_target is None:
            return None
        return sanitize_display_name(self.symlink_target)

    @property
    def display_name(self) -> str:
        shown = sanitize_display_name(self.name)
        if self.symlink_target is None:
            return shown
        return f"{shown}{SYMLINK_ARROW}{self.display_target}"


__all__ = [
    "SYMLINK_ARROW",
    "DecodedMetadata",
]
