"""Shared pytest fixtures and test helpers for goalctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from goalctl.config.settings import GoalSettings
from goalctl.infrastructure.database.engine import init_database
from goalctl.infrastructure.tracker import Tracker
from goalctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` CLI runs enable telemetry on the test thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def tracker_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty tracker directory with no config env leaking in."""
    monkeypatch.delenv("GOALCTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def tracker(tracker_root: Path) -> Generator[Tracker]:
    """Tracker with an initialized database on a temp directory."""
    t = Tracker(GoalSettings.from_cli(tracker_root=tracker_root))
    try:
        yield t
    finally:
        t.close()


@pytest.fixture
def _isolated_tracker(tracker_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated tracker.

    Use via ``@pytest.mark.usefixtures("_isolated_tracker")`` on command test
    classes.
    """
    monkeypatch.chdir(tracker_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_goal(tracker: Tracker, title: str, **kwargs: Any) -> dict[str, Any]:
    """Create a goal via GoalService, asserting success."""
    from goalctl.services.goals import GoalService

    result = GoalService(tracker).create_goal(title, **kwargs)
    assert result.ok, result.error
    return result.data


def add_log(tracker: Tracker, goal_id: int, **kwargs: Any) -> dict[str, Any]:
    """Record a log entry via LogService, asserting success."""
    from goalctl.services.logs import LogService

    result = LogService(tracker).add_log(goal_id, **kwargs)
    assert result.ok, result.error
    return result.data
