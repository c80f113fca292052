"""Locating and parsing ``lendctl.toml``.

``LENDCTL_CONFIG`` pins a file explicitly; otherwise the nearest
``lendctl.toml`` in the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "lendctl.toml"
CONFIG_ENV_VAR = "LENDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """The config file in effect for *start* (default: cwd), or None.

    A ``LENDCTL_CONFIG`` naming a missing file means no config at all,
    not a fallback to the walk-up search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* into the raw section mapping.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
