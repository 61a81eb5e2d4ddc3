"""Error taxonomy shared by enumeration, decoding, and rendering.

``DirectoryAccessError`` covers filesystem reads that failed.
``DecodeError`` covers status records or identities that could not be decoded.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base error carrying the offending path and a short reason."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot access '{self.path}': {reason}")


class DirectoryAccessError(ListingError):
    """Directory enumeration or per-entry status retrieval failed."""

    @classmethod
    def from_os_error(cls, path: Path | str, exc: OSError) -> "DirectoryAccessError":
        reason = exc.strerror or exc.__class__.__name__
        return cls(path, reason)


class DecodeError(ListingError):
    """Status bits were malformed or an owner/group ID had no name."""


__all__ = [
    "ListingError",
    "DirectoryAccessError",
    "DecodeError",
]
