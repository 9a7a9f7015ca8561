"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the tracker lazily and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goalctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from goalctl.config.settings import GoalSettings
    from goalctl.infrastructure.tracker import Tracker
    from goalctl.services.result import ServiceResult


class AppContext:
    """Context object flowing through Click's command hierarchy.

    The tracker is created on first access so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: GoalSettings) -> None:
        self.settings = settings
        self._tracker: Tracker | None = None

        from goalctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            tracker_name=settings.tracker.name,
        )

        if settings.verbose:
            from goalctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def tracker(self) -> Tracker:
        if self._tracker is None:
            from goalctl.infrastructure.tracker import Tracker

            self._tracker = Tracker(self.settings)
        return self._tracker

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success: stdout, normal return. Warnings go to stderr outside
          JSON mode so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
