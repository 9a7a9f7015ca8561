"""Database engine setup for SQLite.

The DB is stored at ``{tracker_root}/.goalctl/goalctl.db``.

SQLAlchemy Core (not ORM) is used because goalctl is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from goalctl.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)

DATA_DIRNAME = ".goalctl"
DEFAULT_DB_FILENAME = "goalctl.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled.

    Foreign keys must be on per connection for log cascade on goal delete.
    """
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(tracker_root: Path, *, db_filename: str = DEFAULT_DB_FILENAME) -> Engine:
    """Initialize the goalctl database under ``{tracker_root}/.goalctl/``.

    Idempotent — safe to call on an existing tracker.
    """
    data_dir = tracker_root / DATA_DIRNAME
    data_dir.mkdir(parents=True, exist_ok=True)

    db_path = data_dir / db_filename
    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    logger.debug("Database ready at %s", db_path)
    return engine
