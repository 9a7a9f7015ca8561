"""Subcommand modules for goalctl.

Provides register_commands() which uses deferred imports to keep
``goalctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``goal`` and ``log`` groups and the ``stats`` command."""
    from goalctl.commands.goal import goal
    from goalctl.commands.log import log
    from goalctl.commands.stats import stats

    cli.add_command(goal)
    cli.add_command(log)
    cli.add_command(stats)
