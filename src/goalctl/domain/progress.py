"""Progress aggregation for a single goal against "now".

The log store is injected as a plain callable so the aggregator never
touches storage directly::

    stats = compute_stats(goal, repo.sum_in_range, datetime.now())
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Protocol

from goalctl.domain.periods import resolve_period

LogSumProvider = Callable[[Any, str, str], "int | None"]


class GoalLike(Protocol):
    """Minimum goal shape the aggregator reads."""

    @property
    def id(self) -> Any: ...

    @property
    def cadence(self) -> str: ...

    @property
    def target_value(self) -> int | None: ...


@dataclass(frozen=True)
class GoalRecord:
    """Concrete goal carrying just what aggregation needs."""

    id: Any
    cadence: str
    target_value: int | None = 1

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> GoalRecord:
        return cls(id=row["id"], cadence=row["cadence"], target_value=row.get("target_value"))


@dataclass(frozen=True)
class StatsResult:
    """Progress of one goal in its current period."""

    period_start: date
    period_end: date
    progress_percent: int
    total: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "progress_percent": self.progress_percent,
        }


def progress_percent(total: int, target_value: int | None) -> int:
    """Percentage of *target_value* reached by *total*, clamped to [0, 100].

    Targets of zero, negative, or missing count as 1. Halves round up
    (12.5 -> 13). Integer arithmetic keeps arbitrarily large totals exact.
    """
    denominator = max(target_value or 1, 1)
    percent = (200 * total + denominator) // (2 * denominator)
    return min(100, max(0, percent))


def compute_stats(
    goal: GoalLike,
    log_sum_provider: LogSumProvider,
    now: date | datetime,
) -> StatsResult:
    """Resolve the current period for *goal* and measure progress within it.

    Args:
        goal: Anything with ``id``, ``cadence`` and ``target_value``.
        log_sum_provider: ``(goal_id, start, end) -> int`` summing logged
            values with ``start <= entry_date <= end``. Bounds are passed
            as ``YYYY-MM-DD`` strings. Errors it raises reach the caller
            untouched.
        now: Reference instant; its date fields are used as-is.
    """
    window = resolve_period(goal.cadence, now)
    total = log_sum_provider(goal.id, window.start_iso, window.end_iso) or 0
    return StatsResult(
        period_start=window.start,
        period_end=window.end,
        progress_percent=progress_percent(total, goal.target_value),
        total=int(total),
    )
