"""Locate and parse ``launchkit.toml``.

Lookup order: an explicit ``--config`` path, then the LAUNCHKIT_CONFIG env
var, then a walk up from the working directory (the way git finds .git/).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from launchkit.exceptions import LaunchkitError

CONFIG_FILENAME = "launchkit.toml"
CONFIG_ENV_VAR = "LAUNCHKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies at *start* (default: cwd), if any.

    A set LAUNCHKIT_CONFIG wins even when it names a missing file, in which
    case no config applies.
    """
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


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for a CLI run.

    An explicit *config_path* is used only if it exists; without one the
    file is discovered with :func:`find_config`.
    """
    if config_path:
        path = Path(config_path)
        return path if path.is_file() else None
    return find_config(start)


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse the TOML file at *path* into plain tables.

    A missing *path* reads as an empty config. Malformed TOML raises
    :class:`LaunchkitError` naming the file.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise LaunchkitError(msg) from exc
