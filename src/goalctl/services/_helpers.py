"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, date, datetime


def now_iso() -> str:
    """Current UTC time as ISO 8601 (row ``created_at`` stamps)."""
    return datetime.now(UTC).isoformat()


def local_now() -> datetime:
    """The single implicit clock used for periods and default log dates."""
    return datetime.now()


def parse_entry_date(raw: date | str | None, *, today: date | None = None) -> date:
    """Coerce *raw* to a calendar date, defaulting to *today*.

    Raises:
        ValueError: If *raw* is a string that is not ``YYYY-MM-DD``.
    """
    if raw is None or raw == "":
        return today or local_now().date()
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(raw.strip())
