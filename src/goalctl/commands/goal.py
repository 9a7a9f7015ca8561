"""Command group: create, list, inspect, and delete goals."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from goalctl.commands._base import GoalGroup, as_of_option
from goalctl.domain.types import CADENCE_VALUES
from goalctl.services.goals import GoalService

if TYPE_CHECKING:
    from goalctl.commands._context import AppContext

_GOAL_EXAMPLES = """\
  goalctl goal create "Read 20 pages" --cadence daily
  goalctl goal create "Run" --cadence weekly --target 3
  goalctl goal list
  goalctl goal get 1 --as-of 2024-03-10
  goalctl goal delete 1"""


@click.group(cls=GoalGroup, examples=_GOAL_EXAMPLES)
@click.pass_obj
def goal(app: AppContext) -> None:
    """Create and manage recurring goals."""


@goal.command(
    examples="""\
  goalctl goal create "Meditate"
  goalctl goal create "Gym" --cadence weekly --target 3
  goalctl goal create "Books" --cadence monthly --target 2"""
)
@click.argument("title")
@click.option("--description", default="", help="Free-form description.")
@click.option(
    "--cadence",
    type=click.Choice(CADENCE_VALUES),
    default=None,
    help="Recurrence period (default from config, normally daily).",
)
@click.option("--target", "target_value", type=int, default=None, help="Target per period.")
@click.pass_obj
def create(
    app: AppContext,
    title: str,
    description: str,
    cadence: str | None,
    target_value: int | None,
) -> None:
    """Create a new goal."""
    result = GoalService(app.tracker).create_goal(
        title,
        description=description,
        cadence=cadence,
        target_value=target_value,
    )
    app.emit(result)


@goal.command(
    "list",
    examples="""\
  goalctl goal list
  goalctl --json goal list
  goalctl goal list --as-of 2024-03-10""",
)
@as_of_option
@click.pass_obj
def list_cmd(app: AppContext, as_of: datetime | None) -> None:
    """List goals with progress for the current period."""
    app.emit(GoalService(app.tracker).list_goals(now=as_of))


@goal.command(
    examples="""\
  goalctl goal get 3
  goalctl goal get 3 --as-of 2024-02-15"""
)
@click.argument("goal_id", type=int)
@as_of_option
@click.pass_obj
def get(app: AppContext, goal_id: int, as_of: datetime | None) -> None:
    """Show one goal and its current-period progress."""
    app.emit(GoalService(app.tracker).get_goal(goal_id, now=as_of))


@goal.command(examples="  goalctl goal delete 3")
@click.argument("goal_id", type=int)
@click.pass_obj
def delete(app: AppContext, goal_id: int) -> None:
    """Delete a goal and all of its log entries."""
    app.emit(GoalService(app.tracker).delete_goal(goal_id))
