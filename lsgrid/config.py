"""JSON config loaders.

Reads listing defaults: column count, column padding, hidden-entry
preference, and color. All access is defensive: malformed or missing config
falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lsgrid"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_COLUMN_COUNT = 3
DEFAULT_PADDING = 2


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_int(key: str, default: int, minimum: int) -> int:
    """Read an integer config value no smaller than ``minimum``.

    Booleans, floats, and out-of-range values fall back to ``default``.
    """
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum:
        return default
    return value


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return bool(value) if isinstance(value, bool) else False


def load_column_count() -> int:
    """Return the number of columns used by the short form."""
    return _load_int("columns", DEFAULT_COLUMN_COUNT, 1)


def load_padding() -> int:
    """Return the number of spaces appended after the widest name in a column."""
    return _load_int("padding", DEFAULT_PADDING, 0)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_hidden")


def load_color() -> bool:
    """Return whether names should be colored when writing to a terminal."""
    return _load_bool("color")


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_COLUMN_COUNT",
    "DEFAULT_PADDING",
    "load_config",
    "load_column_count",
    "load_padding",
    "load_show_hidden",
    "load_color",
]
