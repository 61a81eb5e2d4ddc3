"""Directory enumeration and visible-name collection."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import DirectoryAccessError

HIDDEN_PREFIX = "."


def list_entries(directory: Path | str) -> set[str]:
    """Return the raw, unsorted member names of ``directory``.

    Raises ``DirectoryAccessError`` when the path is missing, unreadable, or
    not a directory.
    """
    try:
        with os.scandir(directory) as entries:
            return {entry.name for entry in entries}
    except OSError as exc:
        raise DirectoryAccessError.from_os_error(directory, exc) from exc


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def name_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive order with the raw name as a stable tie-breaker."""
    return (name.casefold(), name)


def collect_names(directory: Path | str, show_hidden: bool) -> list[str]:
    """List visible names of ``directory`` in case-insensitive order."""
    names = list_entries(directory)
    if not show_hidden:
        names = {name for name in names if not is_hidden(name)}
    return sorted(names, key=name_sort_key)


__all__ = [
    "HIDDEN_PREFIX",
    "list_entries",
    "is_hidden",
    "name_sort_key",
    "collect_names",
]
