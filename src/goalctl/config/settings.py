"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GOALCTL_*`` prefix
  3. TOML file    — ``goalctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from goalctl.config.discovery import read_config, resolve_config_path
from goalctl.config.models import GoalsConfig, LogsConfig, TrackerConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of an already-located ``goalctl.toml`` to pydantic."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Pydantic builds sources from a classmethod, so the TOML path rides along here.
_tls = threading.local()


class GoalSettings(BaseSettings):
    """Resolved settings for one goalctl invocation.

    Attributes:
        tracker_root: Directory holding ``.goalctl/`` (parent of
            ``goalctl.toml``, or CWD if no config found).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GOALCTL_",
        "env_nested_delimiter": "__",
    }

    tracker_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    goals: GoalsConfig = Field(default_factory=GoalsConfig)
    logs: LogsConfig = Field(default_factory=LogsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        tracker_root: Path | None = None,
        **cli_flags: Any,
    ) -> GoalSettings:
        """Construct settings from a CLI invocation.

        Locates ``goalctl.toml`` (see :func:`resolve_config_path`),
        resolves *tracker_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path = resolve_config_path(config_path, tracker_root)

        resolved_root = tracker_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(tracker_root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
