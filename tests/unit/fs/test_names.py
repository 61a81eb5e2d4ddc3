"""Name collection tests: hidden filtering, ordering, and access failures."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lsgrid.errors import DirectoryAccessError
from lsgrid.fs import collect_names, list_entries


class CollectNamesTests(unittest.TestCase):
    def test_sorts_case_insensitively_and_hides_dot_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("beta", "Alpha", ".git", "gamma", "Zeta"):
                (root / name).write_text("", encoding="utf-8")

            names = collect_names(root, show_hidden=False)

        self.assertEqual(names, ["Alpha", "beta", "gamma", "Zeta"])

    def test_show_hidden_keeps_dot_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".env").write_text("", encoding="utf-8")
            (root / "app").mkdir()

            names = collect_names(root, show_hidden=True)

        self.assertEqual(names, [".env", "app"])

    def test_list_entries_returns_unsorted_set(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b").write_text("", encoding="utf-8")
            (root / "a").write_text("", encoding="utf-8")

            self.assertEqual(list_entries(root), {"a", "b"})

    def test_missing_directory_raises_access_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            with self.assertRaises(DirectoryAccessError) as ctx:
                collect_names(missing, show_hidden=False)

        self.assertEqual(ctx.exception.path, missing)
        self.assertIn("cannot access", str(ctx.exception))

    def test_regular_file_is_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")
            with self.assertRaises(DirectoryAccessError):
                collect_names(target, show_hidden=False)


if __name__ == "__main__":
    unittest.main()
