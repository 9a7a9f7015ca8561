"""Tracker — the single storage dependency injected into every service.

Owns the SQLAlchemy engine and read repositories. Writes go through
:meth:`Tracker.transaction`, which commits on success and rolls back
on any exception.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from goalctl.infrastructure.database.engine import init_database
from goalctl.infrastructure.repositories import GoalRepository, LogRepository

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from goalctl.config.settings import GoalSettings

logger = logging.getLogger(__name__)


class Tracker:
    """Goal/log store rooted at ``settings.tracker_root``.

    Created lazily by the CLI context so ``--help`` never opens the DB.
    """

    def __init__(self, settings: GoalSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            settings.tracker_root, db_filename=settings.tracker.db_filename
        )
        self._goals = GoalRepository(self._engine)
        self._logs = LogRepository(self._engine)

    @property
    def root(self) -> Path:
        return self._settings.tracker_root

    @property
    def settings(self) -> GoalSettings:
        return self._settings

    @property
    def goals(self) -> GoalRepository:
        return self._goals

    @property
    def logs(self) -> LogRepository:
        return self._logs

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside ``engine.begin()``.

        Usage::

            with tracker.transaction() as conn:
                conn.execute(insert(goals).values(...))
        """
        with self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
