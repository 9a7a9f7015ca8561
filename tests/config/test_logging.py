"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from goalctl.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    goal_level = logging.getLogger("goalctl").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("goalctl").setLevel(goal_level)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("goalctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("goalctl").level == logging.WARNING

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("goalctl.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"

    def test_stdlib_loggers_share_renderer(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("goalctl.services.goals").info("Created goal %s", 7)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Created goal 7"

    def test_tracker_name_on_every_record(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, tracker_name="home")
        logging.getLogger("goalctl.services.logs").warning("Logged %d", 3)
        structlog.get_logger("goalctl.telemetry").warning("span.complete")
        lines = capfd.readouterr().err.strip().splitlines()
        assert [json.loads(line)["tracker"] for line in lines] == ["home", "home"]

    def test_reconfigure_drops_previous_tracker(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, tracker_name="home")
        configure_logging(log_json=True)
        logging.getLogger("goalctl.x").warning("plain")
        assert "tracker" not in json.loads(capfd.readouterr().err.strip())

    def test_sqlalchemy_stays_quiet_when_verbose(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("sqlalchemy").level == logging.WARNING
