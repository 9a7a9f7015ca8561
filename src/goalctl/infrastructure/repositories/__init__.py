"""Read-oriented repositories over the goalctl database."""

from goalctl.infrastructure.repositories.goals import GoalRepository
from goalctl.infrastructure.repositories.logs import LogRepository

__all__ = ["GoalRepository", "LogRepository"]
