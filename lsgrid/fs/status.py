"""Per-entry status and symlink lookups.

Every ``OSError`` is translated into ``DirectoryAccessError`` so callers can
skip a single vanished or unreadable entry without aborting the listing.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..errors import DirectoryAccessError


@dataclass(frozen=True)
class RawStatus:
    """Subset of ``os.stat_result`` consumed by the metadata decoder."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "RawStatus":
        return cls(
            mode=int(result.st_mode),
            nlink=int(result.st_nlink),
            uid=int(result.st_uid),
            gid=int(result.st_gid),
            size=int(result.st_size),
            mtime=float(result.st_mtime),
        )

    @property
    def is_symlink(self) -> bool:
        """Whether this snapshot describes a symbolic link itself."""
        return stat.S_ISLNK(self.mode)


def read_status(path: Path | str, follow_symlinks: bool = False) -> RawStatus:
    """Return the status of ``path``, describing the link itself by default."""
    try:
        result = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise DirectoryAccessError.from_os_error(path, exc) from exc
    return RawStatus.from_stat_result(result)


def read_link_target(path: Path | str) -> str:
    """Return the raw link text of ``path`` without resolving it."""
    try:
        return os.readlink(path)
    except OSError as exc:
        raise DirectoryAccessError.from_os_error(path, exc) from exc


__all__ = [
    "RawStatus",
    "read_status",
    "read_link_target",
]
