"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, goalctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from goalctl.domain.types import CADENCE_VALUES


class TrackerConfig(BaseModel):
    """[tracker] section."""

    model_config = {"frozen": True}

    name: str = "my-goals"
    db_filename: str = "goalctl.db"


class GoalsConfig(BaseModel):
    """[goals] section."""

    model_config = {"frozen": True}

    default_cadence: str = "daily"
    default_target: int = 1

    @field_validator("default_cadence")
    @classmethod
    def _known_cadence(cls, value: str) -> str:
        if value not in CADENCE_VALUES:
            msg = f"default_cadence must be one of {', '.join(CADENCE_VALUES)}"
            raise ValueError(msg)
        return value


class LogsConfig(BaseModel):
    """[logs] section."""

    model_config = {"frozen": True}

    recent_limit: int = Field(default=50, ge=1)

