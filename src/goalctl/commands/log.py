"""Command group: record and list progress log entries."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from goalctl.commands._base import ISO_DATE, GoalGroup
from goalctl.services.logs import LogService

if TYPE_CHECKING:
    from goalctl.commands._context import AppContext

_LOG_EXAMPLES = """\
  goalctl log add 1
  goalctl log add 2 --value 5 --note "tempo run"
  goalctl log add 2 --date 2024-03-09
  goalctl log list --goal 2"""


@click.group(cls=GoalGroup, examples=_LOG_EXAMPLES)
@click.pass_obj
def log(app: AppContext) -> None:
    """Record progress against goals."""


@log.command(
    examples="""\
  goalctl log add 1
  goalctl log add 1 --value 3
  goalctl log add 1 --value -1 --note "correction"
  goalctl log add 1 --date 2024-03-09"""
)
@click.argument("goal_id", type=int)
@click.option(
    "--date", "entry_date", type=ISO_DATE, default=None, help="Entry date (default: today)."
)
@click.option("--value", type=int, default=1, show_default=True, help="Amount of progress.")
@click.option("--note", default="", help="Optional note.")
@click.pass_obj
def add(
    app: AppContext,
    goal_id: int,
    entry_date: datetime | None,
    value: int,
    note: str,
) -> None:
    """Log progress for a goal."""
    result = LogService(app.tracker).add_log(
        goal_id,
        entry_date=entry_date.date() if entry_date else None,
        value=value,
        note=note,
    )
    app.emit(result)


@log.command(
    "list",
    examples="""\
  goalctl log list
  goalctl log list --goal 2 --limit 10""",
)
@click.option("--goal", "goal_id", type=int, default=None, help="Only entries for this goal.")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Max entries.")
@click.pass_obj
def list_cmd(app: AppContext, goal_id: int | None, limit: int | None) -> None:
    """List recent log entries, newest first."""
    app.emit(LogService(app.tracker).list_logs(goal_id=goal_id, limit=limit))
