"""Read-side SQL for goals."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from goalctl.infrastructure.database.schema import goals


class GoalRepository:
    """Encapsulates SQL for reading goal rows."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_goal(self, goal_id: int) -> dict[str, Any] | None:
        """Fetch one goal row by id."""
        stmt = select(goals).where(goals.c.id == goal_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def list_goals(self) -> list[dict[str, Any]]:
        """All goals, newest first."""
        stmt = select(goals).order_by(goals.c.created_at.desc(), goals.c.id.desc())
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]
