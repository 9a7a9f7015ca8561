"""GoalService — create, read, list, and delete goals.

Every goal payload carries a fresh ``stats`` block for the period that
contains ``now``; nothing about progress is stored.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import delete, insert

from goalctl.domain.types import CADENCE_VALUES
from goalctl.infrastructure.database.schema import goals
from goalctl.services._helpers import local_now, now_iso
from goalctl.services.base import BaseService
from goalctl.services.result import ServiceResult
from goalctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class GoalService(BaseService):
    """Handles goal lifecycle operations."""

    @traced
    def create_goal(
        self,
        title: str,
        *,
        description: str = "",
        cadence: str | None = None,
        target_value: int | None = None,
        now: date | datetime | None = None,
    ) -> ServiceResult:
        """Persist a new goal and return it with current-period stats.

        *cadence* and *target_value* fall back to the ``[goals]`` config
        defaults. The target is stored as given; the stats math treats
        anything below 1 as 1.
        """
        op = "create_goal"
        title = (title or "").strip()
        if not title:
            return ServiceResult.fail(op, "TITLE_REQUIRED", "title required")

        defaults = self._tracker.settings.goals
        cadence = cadence or defaults.default_cadence
        if cadence not in CADENCE_VALUES:
            return ServiceResult.fail(
                op,
                "INVALID_CADENCE",
                f"Unknown cadence {cadence!r}; expected one of {', '.join(CADENCE_VALUES)}",
                cadence=cadence,
            )
        if target_value is None:
            target_value = defaults.default_target

        with self._tracker.transaction() as conn:
            goal_id = conn.execute(
                insert(goals).values(
                    title=title,
                    description=description or "",
                    cadence=cadence,
                    target_value=target_value,
                    created_at=now_iso(),
                )
            ).inserted_primary_key[0]

        logger.info("Created goal %s (%s, target=%s)", goal_id, cadence, target_value)
        row = self._tracker.goals.get_goal(goal_id)
        assert row is not None
        return ServiceResult(ok=True, op=op, data=self._with_stats(row, now or local_now()))

    @traced
    def get_goal(self, goal_id: int, *, now: date | datetime | None = None) -> ServiceResult:
        """Fetch one goal with current-period stats."""
        row = self._tracker.goals.get_goal(goal_id)
        if row is None:
            return _not_found("get_goal", goal_id)
        return ServiceResult(ok=True, op="get_goal", data=self._with_stats(row, now or local_now()))

    @traced
    def list_goals(self, *, now: date | datetime | None = None) -> ServiceResult:
        """All goals, newest first, each with current-period stats."""
        reference = now or local_now()
        items = [self._with_stats(row, reference) for row in self._tracker.goals.list_goals()]
        return ServiceResult(ok=True, op="list_goals", data={"items": items, "count": len(items)})

    @traced
    def delete_goal(self, goal_id: int) -> ServiceResult:
        """Delete a goal; its log entries go with it via ``ON DELETE CASCADE``."""
        row = self._tracker.goals.get_goal(goal_id)
        if row is None:
            return _not_found("delete_goal", goal_id)

        with self._tracker.transaction() as conn:
            logs_deleted = self._tracker.logs.count_for_goal(goal_id, conn=conn)
            conn.execute(delete(goals).where(goals.c.id == goal_id))

        logger.info("Deleted goal %s and %d log entries", goal_id, logs_deleted)
        return ServiceResult(
            ok=True,
            op="delete_goal",
            data={"id": goal_id, "title": row["title"], "logs_deleted": logs_deleted},
        )

    def _with_stats(self, row: dict[str, Any], now: date | datetime) -> dict[str, Any]:
        stats = self._stats_for(row, now)
        return {**row, "stats": stats.to_dict()}


def _not_found(op: str, goal_id: int) -> ServiceResult:
    return ServiceResult.fail(op, "NOT_FOUND", f"No goal with id {goal_id}", goal_id=goal_id)
