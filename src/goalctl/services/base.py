"""BaseService — shared foundation for goalctl services.

Every service receives a :class:`Tracker` at construction time. Reads go
through the tracker's repositories; writes own their transaction via
``self._tracker.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from goalctl.domain.progress import GoalRecord, StatsResult, compute_stats
from goalctl.services.telemetry import trace_span

if TYPE_CHECKING:
    from datetime import date, datetime

    from goalctl.infrastructure.tracker import Tracker

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GoalService(BaseService):
            def create_goal(self, title: str, ...) -> ServiceResult:
                with self._tracker.transaction() as conn:
                    ...
    """

    def __init__(self, tracker: Tracker) -> None:
        self._tracker = tracker

    def _stats_for(self, row: dict[str, Any], now: date | datetime) -> StatsResult:
        """Aggregate current-period progress for a stored goal row."""
        with trace_span("compute_stats") as span:
            stats = compute_stats(GoalRecord.from_row(row), self._tracker.logs.sum_in_range, now)
            if span:
                span.annotate("goal_id", row["id"])
                span.annotate("total", stats.total)
        logger.debug(
            "Goal %s: %s..%s total=%s progress=%s%%",
            row["id"],
            stats.period_start,
            stats.period_end,
            stats.total,
            stats.progress_percent,
        )
        return stats
