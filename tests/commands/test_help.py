"""Help and --examples output for every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from goalctl import __version__
from goalctl.cli import cli

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    ([], ["goal", "log", "stats", "--json", "--root", "--config"]),
    (["goal", "--help"], ["create", "list", "get", "delete"]),
    (["goal", "create", "--help"], ["--cadence", "--target", "--description"]),
    (["goal", "list", "--help"], ["--as-of"]),
    (["goal", "get", "--help"], ["GOAL_ID", "--as-of"]),
    (["log", "--help"], ["add", "list"]),
    (["log", "add", "--help"], ["--date", "--value", "--note"]),
    (["log", "list", "--help"], ["--goal", "--limit"]),
    (["stats", "--help"], ["GOAL_ID", "--as-of"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(
    "args",
    [[], ["goal"], ["goal", "create"], ["log", "add"], ["stats"]],
)
def test_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "goalctl" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert __version__ in result.output
