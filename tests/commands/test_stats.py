"""Tests for the stats command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from goalctl.cli import cli


def _seed(runner: CliRunner) -> str:
    created = runner.invoke(
        cli, ["--json", "goal", "create", "Run", "--cadence", "weekly", "--target", "5"]
    )
    goal_id = str(json.loads(created.output)["data"]["id"])
    for day in ("2024-03-03", "2024-03-04", "2024-03-10"):
        runner.invoke(cli, ["log", "add", goal_id, "--date", day])
    return goal_id


@pytest.mark.usefixtures("_isolated_tracker")
class TestStatsCommand:
    def test_single_goal_sunday_window(self, cli_runner: CliRunner) -> None:
        goal_id = _seed(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "stats", goal_id, "--as-of", "2024-03-10"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["period_start"] == "2024-03-04"
        assert data["period_end"] == "2024-03-10"
        assert data["total"] == 2
        assert data["progress_percent"] == 40

    def test_all_goals(self, cli_runner: CliRunner) -> None:
        _seed(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "stats", "--as-of", "2024-03-03"])
        payload = json.loads(result.output)
        assert payload["op"] == "all_stats"
        assert payload["data"]["items"][0]["progress_percent"] == 20

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stats", "99"])
        assert result.exit_code == 1
        assert "NOT_FOUND" not in result.output
        assert "No goal with id 99" in result.output
