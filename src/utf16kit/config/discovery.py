"""Locate utf16kit.toml for the settings TOML source.

The nearest ``utf16kit.toml`` in the working directory or one of its
ancestors wins; ``UTF16KIT_CONFIG`` names a file explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "utf16kit.toml"
CONFIG_ENV_VAR = "UTF16KIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    A set ``UTF16KIT_CONFIG`` disables the walk-up, even when the file it
    names does not exist.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
