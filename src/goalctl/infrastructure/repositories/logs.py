"""Read-side SQL for log entries, including the period sum used for stats."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.engine import Connection, Engine

from goalctl.infrastructure.database.schema import logs


class LogRepository:
    """Encapsulates SQL for reading log rows."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def sum_in_range(self, goal_id: int, start: str, end: str) -> int:
        """Sum ``value`` for *goal_id* with ``start <= entry_date <= end``.

        Bounds are ``YYYY-MM-DD`` strings. Returns 0 when nothing matches.
        """
        stmt = select(func.coalesce(func.sum(logs.c.value), 0)).where(
            logs.c.goal_id == goal_id,
            logs.c.entry_date.between(start, end),
        )
        with self._engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())

    def count_for_goal(self, goal_id: int, *, conn: Connection | None = None) -> int:
        """Number of log rows for *goal_id*.

        Pass *conn* to count inside an open transaction.
        """
        stmt = select(func.count(logs.c.id)).where(logs.c.goal_id == goal_id)
        if conn is not None:
            return int(conn.execute(stmt).scalar_one())
        with self._engine.connect() as own:
            return int(own.execute(stmt).scalar_one())

    def list_logs(self, *, goal_id: int | None = None, limit: int = 50) -> list[dict[str, Any]]:
        """Most recent log entries first."""
        stmt = select(logs)
        if goal_id is not None:
            stmt = stmt.where(logs.c.goal_id == goal_id)
        stmt = stmt.order_by(logs.c.entry_date.desc(), logs.c.id.desc()).limit(limit)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]
