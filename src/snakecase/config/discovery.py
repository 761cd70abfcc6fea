"""Locating and reading snakecase.toml.

An explicit path (``--config``, then ``SNAKECASE_CONFIG``) wins and must
exist. Otherwise the nearest snakecase.toml above the working directory is
used, the way git finds .git/.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "snakecase.toml"
CONFIG_ENV_VAR = "SNAKECASE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest snakecase.toml at or above *start* (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one CLI invocation.

    Raises:
        click.ClickException: An explicitly named file does not exist.
    """
    explicit = explicit or os.environ.get(CONFIG_ENV_VAR)
    if not explicit:
        return find_config(start)
    path = Path(explicit)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: The file is not valid UTF-8 TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
