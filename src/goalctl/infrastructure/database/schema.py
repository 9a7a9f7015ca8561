"""SQLAlchemy Core table definitions for the goalctl database.

Dates are stored as ``YYYY-MM-DD`` text so range filters compare exactly.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)

metadata = MetaData()

goals = Table(
    "goals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("cadence", Text, nullable=False),
    Column("target_value", Integer, default=1, server_default="1"),
    Column("created_at", Text, nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    CheckConstraint("cadence IN ('daily', 'weekly', 'monthly')", name="ck_goals_cadence"),
)

logs = Table(
    "logs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("goal_id", Integer, ForeignKey("goals.id", ondelete="CASCADE"), nullable=False),
    Column("entry_date", Text, nullable=False),
    Column("value", Integer, default=1, server_default="1"),
    Column("note", Text),
    Column("created_at", Text, nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    Index("ix_logs_goal_date", "goal_id", "entry_date"),
)
