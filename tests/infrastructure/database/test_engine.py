"""Tests for database engine setup and initialization."""

from pathlib import Path

import pytest
from sqlalchemy import delete, func, insert, inspect, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from goalctl.infrastructure.database.engine import create_db_engine, init_database
from goalctl.infrastructure.database.schema import goals, logs


class TestCreateDbEngine:
    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"

    def test_foreign_keys_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


class TestInitDatabase:
    def test_creates_data_directory_and_file(self, tmp_path: Path) -> None:
        init_database(tmp_path)
        assert (tmp_path / ".goalctl").is_dir()
        assert (tmp_path / ".goalctl" / "goalctl.db").exists()

    def test_custom_filename(self, tmp_path: Path) -> None:
        init_database(tmp_path, db_filename="other.db")
        assert (tmp_path / ".goalctl" / "other.db").exists()

    def test_creates_tables(self, db_engine: Engine) -> None:
        assert {"goals", "logs"} <= set(inspect(db_engine).get_table_names())

    def test_idempotent(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        with engine.begin() as conn:
            conn.execute(insert(goals).values(title="Keep", cadence="daily"))
        engine2 = init_database(tmp_path)
        with engine2.connect() as conn:
            assert conn.execute(select(func.count()).select_from(goals)).scalar_one() == 1


class TestSchemaConstraints:
    def test_goal_defaults(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            conn.execute(insert(goals).values(title="Walk", cadence="weekly"))
            row = conn.execute(select(goals)).mappings().one()
        assert row["target_value"] == 1
        assert row["created_at"]

    def test_cadence_check_constraint(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(insert(goals).values(title="Bad", cadence="yearly"))

    def test_log_requires_existing_goal(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(insert(logs).values(goal_id=999, entry_date="2024-03-10"))

    def test_deleting_goal_cascades_logs(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            goal_id = conn.execute(
                insert(goals).values(title="Run", cadence="daily")
            ).inserted_primary_key[0]
            conn.execute(insert(logs).values(goal_id=goal_id, entry_date="2024-03-10"))
            conn.execute(insert(logs).values(goal_id=goal_id, entry_date="2024-03-11"))
            conn.execute(delete(goals).where(goals.c.id == goal_id))
            remaining = conn.execute(select(func.count()).select_from(logs)).scalar_one()
        assert remaining == 0
