"""Multi-column grid layout for the short listing form.

Names are distributed column-major into at most ``column_count`` columns,
each column is padded to its own width, and the padded grid is transposed
into row-major print order by modular indexing over a flattened grid.

Column sizes are balanced rather than filled greedily: with four names and
three columns the groups are ``[2, 1, 1]``, not ``[2, 2]``, so the requested
column count is honored whenever there are enough names. Only the first
column is guaranteed to hold ``ceil(n / column_count)`` names; seven names in
three columns split ``[3, 2, 2]``.

Layout runs on raw names. ``display`` maps a raw name to the plain text that
is measured and printed, and ``decorate`` maps a raw name to that text plus
styling, so styling can inspect the real entry while widths ignore escapes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

Decorate = Callable[[str], str]
Display = Callable[[str], str]


def _identity(name: str) -> str:
    return name


def row_count_for(total: int, column_count: int) -> int:
    """Return ``ceil(total / column_count)``; zero when there is nothing to lay out."""
    if column_count < 1:
        raise ValueError("column_count must be >= 1")
    if total <= 0:
        return 0
    return -(-total // column_count)


def split_into_columns(names: Sequence[str], column_count: int) -> list[list[str]]:
    """Partition ``names`` into contiguous column-major groups.

    Uses ``min(column_count, len(names))`` columns whose sizes differ by at
    most one, longer columns first. The first column therefore always holds
    exactly ``row_count_for(len(names), column_count)`` names.
    """
    if column_count < 1:
        raise ValueError("column_count must be >= 1")
    total = len(names)
    if total == 0:
        return []

    used_columns = min(column_count, total)
    base, extra = divmod(total, used_columns)
    columns: list[list[str]] = []
    start = 0
    for col_idx in range(used_columns):
        size = base + (1 if col_idx < extra else 0)
        columns.append(list(names[start : start + size]))
        start += size
    return columns


def column_widths(
    columns: Sequence[Sequence[str]],
    padding: int,
    display: Display | None = None,
) -> list[int]:
    """Return each column's width: its own longest shown name plus ``padding``."""
    if padding < 0:
        raise ValueError("padding must be >= 0")
    shown = display or _identity
    return [max(len(shown(name)) for name in column) + padding for column in columns]


def pad_columns(
    columns: Sequence[Sequence[str]],
    padding: int,
    decorate: Decorate | None = None,
    display: Display | None = None,
) -> list[list[str]]:
    """Left-justify every name to its column width.

    Padding is computed from ``display(name)``; ``decorate(name)`` supplies
    the printed text (e.g. with ANSI color) so escapes never affect alignment.
    """
    shown_for = display or _identity
    widths = column_widths(columns, padding, display=shown_for)
    padded: list[list[str]] = []
    for column, width in zip(columns, widths):
        cells: list[str] = []
        for name in column:
            plain = shown_for(name)
            printed = decorate(name) if decorate is not None else plain
            cells.append(printed + " " * (width - len(plain)))
        padded.append(cells)
    return padded


def transpose_to_rows(columns: Sequence[Sequence[str]], row_count: int) -> list[list[str]]:
    """Redistribute column-major cells into ``row_count`` print-order rows.

    Each column is treated as ``row_count`` slots long; missing slots at the
    bottom of shorter columns are skipped rather than emitted as blanks. Flat
    slot ``i`` lands in row ``i % row_count``.
    """
    if row_count <= 0:
        return []

    slots: list[str | None] = []
    for column in columns:
        if len(column) > row_count:
            raise ValueError("column is longer than row_count")
        slots.extend(column)
        slots.extend([None] * (row_count - len(column)))

    rows: list[list[str]] = [[] for _ in range(row_count)]
    for idx, cell in enumerate(slots):
        if cell is None:
            continue
        rows[idx % row_count].append(cell)
    return rows


def layout_columns(
    names: Sequence[str],
    column_count: int,
    padding: int,
    decorate: Decorate | None = None,
    display: Display | None = None,
) -> list[str]:
    """Lay out ``names`` as grid rows ready to print, one string per row."""
    if not names:
        return []
    columns = split_into_columns(names, column_count)
    padded = pad_columns(columns, padding, decorate=decorate, display=display)
    row_count = row_count_for(len(names), column_count)
    return ["".join(row) for row in transpose_to_rows(padded, row_count)]


__all__ = [
    "Decorate",
    "Display",
    "row_count_for",
    "split_into_columns",
    "column_widths",
    "pad_columns",
    "transpose_to_rows",
    "layout_columns",
]
