"""Status-record decoding for the long listing form."""

from __future__ import annotations

from .decode import (
    FILE_TYPE_CODES,
    PERMISSION_TRIPLES,
    UNKNOWN_TYPE_CHAR,
    decode_file_type,
    decode_metadata,
    decode_permissions,
    format_mtime,
    mode_octal,
)
from .types import SYMLINK_ARROW, DecodedMetadata

__all__ = [
    "DecodedMetadata",
    "SYMLINK_ARROW",
    "FILE_TYPE_CODES",
    "PERMISSION_TRIPLES",
    "UNKNOWN_TYPE_CHAR",
    "mode_octal",
    "decode_file_type",
    "decode_permissions",
    "format_mtime",
    "decode_metadata",
]
