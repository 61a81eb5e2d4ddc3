"""Optional ANSI coloring of entry names.

Colors come from ``pygments.console`` so escape sequences match the palette
Pygments uses for terminal output. Coloring wraps only the visible name;
callers measure widths on the plain text.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

from pygments.console import ansiformat

from .text import sanitize_display_name

DIRECTORY_STYLE = "*blue*"
SYMLINK_STYLE = "cyan"
EXECUTABLE_STYLE = "green"


def style_for_mode(mode: int) -> str | None:
    """Return a ``pygments.console.ansiformat`` attribute for ``mode``, or ``None``."""
    if stat.S_ISLNK(mode):
        return SYMLINK_STYLE
    if stat.S_ISDIR(mode):
        return DIRECTORY_STYLE
    if stat.S_ISREG(mode) and mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        return EXECUTABLE_STYLE
    return None


def colorize_name(path: Path, name: str) -> str:
    """Wrap ``name`` in the color for ``path``; leave it plain when lstat fails."""
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return name
    style = style_for_mode(mode)
    if style is None:
        return name
    return ansiformat(style, name)


def name_decorator(directory: Path) -> Callable[[str], str]:
    """Build a decorate callback for raw names found in ``directory``.

    The entry is classified by its real path; the returned text is the
    escaped display form of the name.
    """

    def decorate(name: str) -> str:
        return colorize_name(directory / name, sanitize_display_name(name))

    return decorate


__all__ = [
    "DIRECTORY_STYLE",
    "SYMLINK_STYLE",
    "EXECUTABLE_STYLE",
    "style_for_mode",
    "colorize_name",
    "name_decorator",
]
