"""Numeric owner/group ID to name resolution."""

from __future__ import annotations

import grp
import pwd
from functools import lru_cache

from ..errors import DecodeError


@lru_cache(maxsize=256)
def resolve_owner_name(uid: int) -> str:
    """Return the login name registered for ``uid``.

    Raises ``DecodeError`` for IDs without a passwd entry.
    """
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError as exc:
        raise DecodeError(str(uid), f"no user with uid {uid}") from exc


@lru_cache(maxsize=256)
def resolve_group_name(gid: int) -> str:
    """Return the group name registered for ``gid``.

    Raises ``DecodeError`` for IDs without a group entry.
    """
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError as exc:
        raise DecodeError(str(gid), f"no group with gid {gid}") from exc


def clear_identity_cache() -> None:
    """Forget memoized lookups, e.g. after patching the user database in tests."""
    resolve_owner_name.cache_clear()
    resolve_group_name.cache_clear()


__all__ = [
    "resolve_owner_name",
    "resolve_group_name",
    "clear_identity_cache",
]
