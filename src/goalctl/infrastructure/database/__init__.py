"""SQLite database engine and schema via SQLAlchemy Core."""

from goalctl.infrastructure.database.engine import create_db_engine, init_database
from goalctl.infrastructure.database.schema import goals, logs, metadata

__all__ = [
    "create_db_engine",
    "goals",
    "init_database",
    "logs",
    "metadata",
]
