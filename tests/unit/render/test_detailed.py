"""Long-form row formatting tests.

Field widths are derived from the whole entry set; these cases pin the exact
separator spacing and show that one wide value widens every row.
"""

from __future__ import annotations

import unittest

from lsgrid.metadata import DecodedMetadata
from lsgrid.render import FieldWidths, compute_field_widths, format_detailed_lines

STAMP = " 3  5 14:07"


def _entry(**overrides) -> DecodedMetadata:
    fields = {
        "type_char": "-",
        "permissions": "rw-r--r--",
        "link_count": 1,
        "owner_name": "alice",
        "group_name": "staff",
        "size_bytes": 42,
        "mtime_display": STAMP,
        "name": "a.txt",
    }
    fields.update(overrides)
    return DecodedMetadata(**fields)


class ComputeFieldWidthsTests(unittest.TestCase):
    def test_widths_are_maximum_rendered_lengths(self) -> None:
        widths = compute_field_widths(
            [
                _entry(),
                _entry(link_count=12, owner_name="bob", group_name="wheel", size_bytes=4096),
            ]
        )
        self.assertEqual(widths, FieldWidths(link_count=2, owner=5, group=5, size=4))

    def test_empty_entries_have_zero_widths(self) -> None:
        self.assertEqual(compute_field_widths([]), FieldWidths())


class FormatDetailedLinesTests(unittest.TestCase):
    def test_exact_separator_spacing(self) -> None:
        lines = format_detailed_lines(
            [
                _entry(),
                _entry(
                    type_char="d",
                    permissions="rwxr-xr-x",
                    link_count=12,
                    owner_name="bob",
                    group_name="wheel",
                    size_bytes=4096,
                    name="docs",
                ),
            ]
        )

        self.assertEqual(
            lines,
            [
                "-rw-r--r--   1 alice  staff    42  3  5 14:07 a.txt",
                "drwxr-xr-x  12 bob    wheel  4096  3  5 14:07 docs",
            ],
        )

    def test_long_owner_widens_every_row(self) -> None:
        entries = [
            _entry(owner_name="al", name="one"),
            _entry(owner_name="maximilian", name="two"),
            _entry(owner_name="bo", name="three"),
        ]

        lines = format_detailed_lines(entries)

        group_columns = {line.index("staff") for line in lines}
        self.assertEqual(len(group_columns), 1)
        self.assertTrue(lines[0].startswith("-rw-r--r--  1 al          staff"))

    def test_symlink_renders_arrow_and_link_type(self) -> None:
        lines = format_detailed_lines(
            [_entry(type_char="l", permissions="rwxrwxrwx", name="latest", symlink_target="release-2")]
        )
        self.assertTrue(lines[0].startswith("lrwxrwxrwx"))
        self.assertTrue(lines[0].endswith(" latest -> release-2"))

    def test_decorate_wraps_only_the_link_name(self) -> None:
        lines = format_detailed_lines(
            [_entry(name="latest", symlink_target="release-2")],
            decorate=lambda name: f"[{name}]",
        )
        self.assertTrue(lines[0].endswith(f"{STAMP} [latest] -> release-2"))

    def test_empty_entries_produce_no_lines(self) -> None:
        self.assertEqual(format_detailed_lines([]), [])


if __name__ == "__main__":
    unittest.main()
