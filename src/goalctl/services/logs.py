"""LogService — record progress events and list recent ones."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import insert

from goalctl.infrastructure.database.schema import logs
from goalctl.services._helpers import now_iso, parse_entry_date
from goalctl.services.base import BaseService
from goalctl.services.result import ServiceResult
from goalctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class LogService(BaseService):
    """Handles log entry creation and listing."""

    @traced
    def add_log(
        self,
        goal_id: int,
        *,
        entry_date: date | str | None = None,
        value: int = 1,
        note: str = "",
        today: date | None = None,
    ) -> ServiceResult:
        """Record *value* against *goal_id* on *entry_date* (default: today).

        *value* may be any integer, negative included.
        """
        op = "add_log"
        try:
            day = parse_entry_date(entry_date, today=today)
        except ValueError:
            return ServiceResult.fail(
                op,
                "INVALID_DATE",
                f"Invalid entry date {entry_date!r}; expected YYYY-MM-DD",
                entry_date=str(entry_date),
            )

        if self._tracker.goals.get_goal(goal_id) is None:
            return ServiceResult.fail(
                op, "NOT_FOUND", f"No goal with id {goal_id}", goal_id=goal_id
            )

        with self._tracker.transaction() as conn:
            log_id = conn.execute(
                insert(logs).values(
                    goal_id=goal_id,
                    entry_date=day.isoformat(),
                    value=value,
                    note=note or "",
                    created_at=now_iso(),
                )
            ).inserted_primary_key[0]

        logger.info("Logged %+d for goal %s on %s", value, goal_id, day)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": log_id,
                "goal_id": goal_id,
                "entry_date": day.isoformat(),
                "value": value,
                "note": note or "",
            },
        )

    @traced
    def list_logs(self, *, goal_id: int | None = None, limit: int | None = None) -> ServiceResult:
        """Most recent entries first, capped at ``[logs] recent_limit`` by default."""
        if limit is None:
            limit = self._tracker.settings.logs.recent_limit
        items = self._tracker.logs.list_logs(goal_id=goal_id, limit=limit)
        return ServiceResult(ok=True, op="list_logs", data={"items": items, "count": len(items)})
