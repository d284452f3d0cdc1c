"""Locating ``roverctl.toml``.

``ROVERCTL_CONFIG`` names the file outright. Otherwise the nearest
``roverctl.toml`` in the working directory or any parent is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "roverctl.toml"
CONFIG_ENV_VAR = "ROVERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

