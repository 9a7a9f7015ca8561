"""Goal cadence enum."""

from __future__ import annotations

from enum import StrEnum


class Cadence(StrEnum):
    """Recurrence unit of a goal."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


CADENCE_VALUES: tuple[str, ...] = tuple(c.value for c in Cadence)
