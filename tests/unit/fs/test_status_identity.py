"""Status retrieval, symlink, and identity-resolution collaborator tests."""

from __future__ import annotations

import os
import stat
import tempfile
import types
import unittest
from pathlib import Path
from unittest import mock

from lsgrid.errors import DecodeError, DirectoryAccessError
from lsgrid.fs import (
    clear_identity_cache,
    read_link_target,
    read_status,
    resolve_group_name,
    resolve_owner_name,
)


class ReadStatusTests(unittest.TestCase):
    def test_does_not_follow_symlinks_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "target"
            target.mkdir()
            link = root / "link"
            os.symlink(target, link)

            link_status = read_status(link)
            followed = read_status(link, follow_symlinks=True)

            self.assertTrue(stat.S_ISLNK(link_status.mode))
            self.assertTrue(stat.S_ISDIR(followed.mode))
            self.assertTrue(link_status.is_symlink)
            self.assertFalse(followed.is_symlink)
            self.assertEqual(read_link_target(link), str(target))

    def test_regular_file_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.bin"
            path.write_bytes(b"12345")

            status = read_status(path)

        self.assertEqual(status.size, 5)
        self.assertEqual(status.nlink, 1)
        self.assertTrue(stat.S_ISREG(status.mode))

    def test_missing_entry_raises_access_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(DirectoryAccessError):
                read_status(Path(tmp) / "gone")
            with self.assertRaises(DirectoryAccessError):
                read_link_target(Path(tmp) / "gone")


class IdentityTests(unittest.TestCase):
    def setUp(self) -> None:
        clear_identity_cache()
        self.addCleanup(clear_identity_cache)

    def test_resolves_names_from_user_database(self) -> None:
        with (
            mock.patch("lsgrid.fs.identity.pwd.getpwuid", return_value=types.SimpleNamespace(pw_name="alice")),
            mock.patch("lsgrid.fs.identity.grp.getgrgid", return_value=types.SimpleNamespace(gr_name="staff")),
        ):
            self.assertEqual(resolve_owner_name(1000), "alice")
            self.assertEqual(resolve_group_name(100), "staff")

    def test_lookups_are_memoized(self) -> None:
        with mock.patch(
            "lsgrid.fs.identity.pwd.getpwuid",
            return_value=types.SimpleNamespace(pw_name="alice"),
        ) as getpwuid:
            resolve_owner_name(1000)
            resolve_owner_name(1000)

        getpwuid.assert_called_once_with(1000)

    def test_unknown_ids_raise_decode_error(self) -> None:
        with (
            mock.patch("lsgrid.fs.identity.pwd.getpwuid", side_effect=KeyError(4242)),
            mock.patch("lsgrid.fs.identity.grp.getgrgid", side_effect=KeyError(4343)),
        ):
            with self.assertRaises(DecodeError):
                resolve_owner_name(4242)
            with self.assertRaises(DecodeError):
                resolve_group_name(4343)


if __name__ == "__main__":
    unittest.main()
