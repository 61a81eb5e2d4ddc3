"""Terminal-safe rendering of entry names."""

from __future__ import annotations

import re

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_display_name(name: str) -> str:
    """Escape control bytes so a name cannot move the cursor or break a row.

    Unlike file contents, names are always single-line, so newlines and tabs
    are escaped too. Escaped bytes render as ``\\xNN``.
    """
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", name)


__all__ = ["sanitize_display_name"]
