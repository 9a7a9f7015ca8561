"""Standalone command: current-period progress for one or all goals."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from goalctl.commands._base import GoalCommand, as_of_option
from goalctl.services.stats import StatsService

if TYPE_CHECKING:
    from goalctl.commands._context import AppContext


@click.command(
    cls=GoalCommand,
    examples="""\
  goalctl stats
  goalctl stats 2
  goalctl stats 2 --as-of 2024-03-10
  goalctl --json stats""",
)
@click.argument("goal_id", type=int, required=False)
@as_of_option
@click.pass_obj
def stats(app: AppContext, goal_id: int | None, as_of: datetime | None) -> None:
    """Show progress in the current period."""
    svc = StatsService(app.tracker)
    if goal_id is None:
        app.emit(svc.all_stats(now=as_of))
    else:
        app.emit(svc.goal_stats(goal_id, now=as_of))
