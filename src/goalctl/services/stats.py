"""StatsService — current-period progress per goal.

Each call is a fresh aggregation: resolve the window, sum the logs in it,
derive the percentage. Storage errors from the sum query propagate.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from goalctl.services._helpers import local_now
from goalctl.services.base import BaseService
from goalctl.services.result import ServiceResult
from goalctl.services.telemetry import traced


class StatsService(BaseService):
    """Progress reporting for one goal or all goals."""

    @traced
    def goal_stats(self, goal_id: int, *, now: date | datetime | None = None) -> ServiceResult:
        row = self._tracker.goals.get_goal(goal_id)
        if row is None:
            return ServiceResult.fail(
                "goal_stats", "NOT_FOUND", f"No goal with id {goal_id}", goal_id=goal_id
            )
        return ServiceResult(ok=True, op="goal_stats", data=self._entry(row, now or local_now()))

    @traced
    def all_stats(self, *, now: date | datetime | None = None) -> ServiceResult:
        reference = now or local_now()
        items = [self._entry(row, reference) for row in self._tracker.goals.list_goals()]
        return ServiceResult(ok=True, op="all_stats", data={"items": items, "count": len(items)})

    def _entry(self, row: dict[str, Any], now: date | datetime) -> dict[str, Any]:
        stats = self._stats_for(row, now)
        return {
            "goal_id": row["id"],
            "title": row["title"],
            "cadence": row["cadence"],
            "target_value": row["target_value"],
            "total": stats.total,
            **stats.to_dict(),
        }
