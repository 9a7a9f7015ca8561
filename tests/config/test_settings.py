"""Tests for GoalSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from goalctl.config.settings import GoalSettings


class TestDefaults:
    def test_all_defaults(self, tracker_root: Path) -> None:
        settings = GoalSettings.from_cli(tracker_root=tracker_root)
        assert settings.tracker_root == tracker_root
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.tracker.name == "my-goals"
        assert settings.goals.default_cadence == "daily"
        assert settings.goals.default_target == 1
        assert settings.logs.recent_limit == 50

    def test_frozen(self, tracker_root: Path) -> None:
        settings = GoalSettings.from_cli(tracker_root=tracker_root)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_sparse_override(self, tracker_root: Path) -> None:
        (tracker_root / "goalctl.toml").write_text('[goals]\ndefault_cadence = "weekly"\n')
        settings = GoalSettings.from_cli(tracker_root=tracker_root)
        assert settings.goals.default_cadence == "weekly"
        assert settings.goals.default_target == 1

    def test_root_from_discovered_config(
        self, tracker_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tracker_root / "goalctl.toml").write_text('[tracker]\nname = "home"\n')
        nested = tracker_root / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = GoalSettings.from_cli()
        assert settings.tracker_root == tracker_root.resolve()
        assert settings.tracker.name == "home"

    def test_explicit_config_path(self, tracker_root: Path) -> None:
        custom = tracker_root / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[logs]\nrecent_limit = 5\n")
        settings = GoalSettings.from_cli(config_path=str(custom), tracker_root=tracker_root)
        assert settings.logs.recent_limit == 5
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tracker_root: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            GoalSettings.from_cli(config_path=str(tracker_root / "absent.toml"))

    def test_invalid_toml(self, tracker_root: Path) -> None:
        (tracker_root / "goalctl.toml").write_text("[goals\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GoalSettings.from_cli(tracker_root=tracker_root)

    def test_invalid_default_cadence(self, tracker_root: Path) -> None:
        (tracker_root / "goalctl.toml").write_text('[goals]\ndefault_cadence = "yearly"\n')
        with pytest.raises(ValueError, match="default_cadence"):
            GoalSettings.from_cli(tracker_root=tracker_root)


class TestPriority:
    def test_env_beats_toml(self, tracker_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tracker_root / "goalctl.toml").write_text("[logs]\nrecent_limit = 5\n")
        monkeypatch.setenv("GOALCTL_LOGS__RECENT_LIMIT", "7")
        settings = GoalSettings.from_cli(tracker_root=tracker_root)
        assert settings.logs.recent_limit == 7

    def test_cli_flags_beat_env(self, tracker_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOALCTL_QUIET", "true")
        settings = GoalSettings.from_cli(tracker_root=tracker_root, quiet=False)
        assert settings.quiet is False
