"""Rich Console factory and theme for goalctl output.

Consoles render to a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` step. In non-TTY environments (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GOAL_THEME = Theme(
    {
        "goal.ok": "bold green",
        "goal.error": "bold red",
        "goal.warning": "bold yellow",
        "goal.op": "bold cyan",
        "goal.key": "dim",
        "goal.id": "bold blue",
        "goal.title": "bold",
        "goal.date": "cyan",
        "goal.cadence.daily": "green",
        "goal.cadence.weekly": "blue",
        "goal.cadence.monthly": "magenta",
        "goal.done": "bold green",
        "goal.partial": "yellow",
        "goal.none": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GOAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_cadence(cadence: str) -> str:
    """Theme style for a cadence; unknown cadences get no style."""
    if cadence in ("daily", "weekly", "monthly"):
        return f"goal.cadence.{cadence}"
    return ""


def style_for_progress(percent: int) -> str:
    if percent >= 100:
        return "goal.done"
    if percent > 0:
        return "goal.partial"
    return "goal.none"
