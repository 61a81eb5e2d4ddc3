"""Filesystem collaborators for one directory snapshot.

This package wraps the OS primitives a listing depends on:
- name enumeration plus hidden-entry filtering and ordering
- non-following status retrieval and symlink target lookup
- owner/group ID to name resolution
"""

from __future__ import annotations

from .identity import clear_identity_cache, resolve_group_name, resolve_owner_name
from .names import HIDDEN_PREFIX, collect_names, is_hidden, list_entries, name_sort_key
from .status import RawStatus, read_link_target, read_status

__all__ = [
    "HIDDEN_PREFIX",
    "list_entries",
    "is_hidden",
    "name_sort_key",
    "collect_names",
    "RawStatus",
    "read_status",
    "read_link_target",
    "resolve_owner_name",
    "resolve_group_name",
    "clear_identity_cache",
]
