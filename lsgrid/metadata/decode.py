"""Decode raw status records into long-form metadata.

The type/permission bit field is rendered as six zero-padded octal digits:
two type digits, one setuid/setgid/sticky digit (ignored), and three
permission digits for owner, group, and other.

Unrecognized type codes (sockets, FIFOs, devices) degrade to ``'?'`` so a
single exotic entry never aborts a listing. A bit field that does not fit
the six-digit shape raises ``DecodeError``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from types import MappingProxyType

from ..errors import DecodeError
from ..fs.identity import resolve_group_name, resolve_owner_name
from ..fs.status import RawStatus
from .types import DecodedMetadata

MODE_OCTAL_DIGITS = 6
UNKNOWN_TYPE_CHAR = "?"

FILE_TYPE_CODES = MappingProxyType(
    {
        "04": "d",
        "10": "-",
        "12": "l",
    }
)

PERMISSION_TRIPLES = MappingProxyType(
    {
        "0": "---",
        "1": "--x",
        "2": "-w-",
        "3": "-wx",
        "4": "r--",
        "5": "r-x",
        "6": "rw-",
        "7": "rwx",
    }
)


def mode_octal(mode: int) -> str:
    """Render ``mode`` as six zero-padded octal digits or raise ``DecodeError``."""
    if isinstance(mode, bool) or not isinstance(mode, int) or mode < 0:
        raise DecodeError("<status>", f"malformed mode bits: {mode!r}")
    digits = f"{mode:0{MODE_OCTAL_DIGITS}o}"
    if len(digits) != MODE_OCTAL_DIGITS:
        raise DecodeError("<status>", f"malformed mode bits: {digits}")
    return digits


def decode_file_type(mode: int) -> str:
    return FILE_TYPE_CODES.get(mode_octal(mode)[:2], UNKNOWN_TYPE_CHAR)


def decode_permissions(mode: int) -> str:
    """Return the nine-character owner/group/other permission string."""
    digits = mode_octal(mode)[-3:]
    return "".join(PERMISSION_TRIPLES[digit] for digit in digits)


def format_mtime(mtime: float) -> str:
    """Format a timestamp as ``MM DD HH:MM`` with space-padded month and day.

    Raises ``DecodeError`` for timestamps the platform cannot convert, such as
    years past 9999.
    """
    try:
        stamp = datetime.fromtimestamp(mtime)
    except (ValueError, OverflowError, OSError) as exc:
        raise DecodeError("<status>", f"unrepresentable mtime: {mtime!r}") from exc
    return f"{stamp.month:>2} {stamp.day:>2} {stamp:%H:%M}"


def decode_metadata(
    raw_status: RawStatus,
    is_symlink: bool,
    symlink_target: str | None,
    display_name: str,
    resolve_owner: Callable[[int], str] | None = None,
    resolve_group: Callable[[int], str] | None = None,
) -> DecodedMetadata:
    """Decode one status snapshot.

    ``raw_status`` must describe the entry itself (not a link's target) so
    links keep their ``'l'`` type character. Identity lookups raise
    ``DecodeError`` for unknown IDs rather than yielding blank names.
    """
    if resolve_owner is None:
        resolve_owner = resolve_owner_name
    if resolve_group is None:
        resolve_group = resolve_group_name

    try:
        type_char = decode_file_type(raw_status.mode)
        permissions = decode_permissions(raw_status.mode)
        owner_name = resolve_owner(raw_status.uid)
        group_name = resolve_group(raw_status.gid)
        mtime_display = format_mtime(raw_status.mtime)
    except DecodeError as exc:
        raise DecodeError(display_name, exc.reason) from exc

    return DecodedMetadata(
        type_char=type_char,
        permissions=permissions,
        link_count=raw_status.nlink,
        owner_name=owner_name,
        group_name=group_name,
        size_bytes=raw_status.size,
        mtime_display=mtime_display,
        name=display_name,
        symlink_target=symlink_target if is_symlink else None,
    )


__all__ = [
    "MODE_OCTAL_DIGITS",
    "UNKNOWN_TYPE_CHAR",
    "FILE_TYPE_CODES",
    "PERMISSION_TRIPLES",
    "mode_octal",
    "decode_file_type",
    "decode_permissions",
    "format_mtime",
    "decode_metadata",
]
