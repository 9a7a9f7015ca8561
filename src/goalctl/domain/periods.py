"""Period resolution — which calendar window is "current" for a cadence.

Windows are inclusive on both ends and computed from the reference
instant's own date fields; no timezone conversion happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from goalctl.domain.types import Cadence


@dataclass(frozen=True)
class PeriodWindow:
    """Inclusive ``[start, end]`` calendar-date range."""

    start: date
    end: date

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.start <= _date_of(day) <= self.end


def _date_of(reference: date | datetime) -> date:
    # datetime is a date subclass, so check it first
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def resolve_period(cadence: Cadence | str, reference: date | datetime) -> PeriodWindow:
    """Return the window of *cadence* that contains *reference*.

    - ``daily``: the reference day itself.
    - ``weekly``: Monday through Sunday. A Sunday closes the week that
      started the previous Monday.
    - ``monthly`` (and any unrecognised cadence): first through last day
      of the reference month.
    """
    day = _date_of(reference)

    if cadence == Cadence.DAILY:
        return PeriodWindow(start=day, end=day)

    if cadence == Cadence.WEEKLY:
        start = day - timedelta(days=day.weekday())
        return PeriodWindow(start=start, end=start + timedelta(days=6))

    start = day.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return PeriodWindow(start=start, end=next_month - timedelta(days=1))
