"""Command-line front door for lsgrid.

Parses ``-l``/``-a`` and an optional directory, merges config defaults, and
writes the rendered listing to standard output.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .errors import DirectoryAccessError
from .render.listing import render_listing
from .style import name_decorator
from .text import sanitize_display_name

PROG = "lsgrid"
DEBUG_ENV_VAR = "LSGRID_DEBUG"


def _configure_logging() -> None:
    """Send debug diagnostics to stderr only when explicitly requested."""
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List directory contents as a column grid or a detailed report.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to list. Defaults to the current directory.")
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use the long listing format.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", help="Include entries whose names start with '.'.")
    return parser


def main() -> None:
    """Parse CLI arguments and print one directory listing.

    Exits with status 1 when the directory cannot be read, or after printing
    the listing when individual entries had to be skipped.
    """
    _configure_logging()
    args = _build_parser().parse_args()

    directory = Path(args.directory)
    show_hidden = args.show_hidden or config.load_show_hidden()
    decorate = name_decorator(directory) if config.load_color() and sys.stdout.isatty() else None

    try:
        result = render_listing(
            directory,
            long_format=args.long_format,
            show_hidden=show_hidden,
            column_count=config.load_column_count(),
            padding=config.load_padding(),
            decorate=decorate,
        )
    except DirectoryAccessError as exc:
        raise SystemExit(f"{PROG}: {sanitize_display_name(str(exc))}") from exc

    for line in result.lines:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()

    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{PROG}: {sanitize_display_name(str(error))}\n")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
