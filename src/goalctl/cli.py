"""Root CLI group for goalctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from goalctl import __version__
from goalctl.commands import register_commands
from goalctl.commands._base import GoalGroup
from goalctl.commands._context import AppContext
from goalctl.config.settings import GoalSettings


@click.group(
    cls=GoalGroup,
    invoke_without_command=True,
    examples="""\
  goalctl goal create "Run" --cadence weekly --target 3
  goalctl log add 1 --value 2
  goalctl --root ~/habits stats --as-of 2024-03-10
  goalctl --json -c ./work.toml goal list""",
)
@click.version_option(version=__version__, prog_name="goalctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print ids only (or a status line).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and a timing tree per command.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file to use instead of GOALCTL_CONFIG or the nearest goalctl.toml.",
)
@click.option(
    "--root",
    "tracker_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Tracker directory holding .goalctl/ (default: config file's directory or CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    tracker_root: Path | None,
) -> None:
    """goalctl — track recurring goals and their progress."""
    settings = GoalSettings.from_cli(
        config_path=config_path,
        tracker_root=tracker_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
