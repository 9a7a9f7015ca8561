"""Locate and read the ``goalctl.toml`` that governs one invocation.

Lookup order:

1. ``--config PATH`` on the command line
2. ``GOALCTL_CONFIG`` environment variable
3. ``goalctl.toml`` in the start directory or any parent

A path named explicitly (1 or 2) must exist. A walk-up miss just means
the tracker runs on code defaults.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "goalctl.toml"
CONFIG_ENV_VAR = "GOALCTL_CONFIG"


class ConfigNotFoundError(click.ClickException):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: Path, origin: str) -> None:
        super().__init__(f"Config file not found: {path} (from {origin})")
        self.path = path
        self.origin = origin


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) to the nearest goalctl.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(
    explicit: str | Path | None = None, start: Path | None = None
) -> Path | None:
    """Pick the config file for this run, or None to use defaults.

    Raises:
        ConfigNotFoundError: *explicit* or ``GOALCTL_CONFIG`` names a
            file that does not exist.
    """
    if explicit:
        return _require_file(Path(explicit), "--config")

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _require_file(Path(env_path), CONFIG_ENV_VAR)

    return find_config(start)


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML; sections are validated later by the settings models."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def _require_file(path: Path, origin: str) -> Path:
    if not path.is_file():
        raise ConfigNotFoundError(path, origin)
    return path
