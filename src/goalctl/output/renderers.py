"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from goalctl.output.console import (
    create_console,
    get_output,
    style_for_cadence,
    style_for_progress,
)

if TYPE_CHECKING:
    from rich.console import Console

    from goalctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: ids for lists, status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("id", "goal_id"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="goal.ok"), Text(f"  {result.op}", style="goal.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="goal.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="goal.id")
    elif key == "title":
        v = Text(str(value), style="goal.title")
    elif key == "cadence":
        v = Text(str(value), style=style_for_cadence(str(value)))
    elif key.endswith("date") or key.startswith("period_"):
        v = Text(str(value), style="goal.date")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _percent_text(percent: int) -> Text:
    return Text(f"{percent:>3}%", style=style_for_progress(percent))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="goal.error"), Text(f"  {result.op}", style="goal.op"), " — " + msg
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Goal renderers ────────────────────────────────────────────────────

_STATS_KEYS = ("goal_id", "title", "cadence", "target_value", "total", "period_start", "period_end")


def _render_goal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create_goal / get_goal as a panel with a progress bar."""
    d = result.data
    stats = d.get("stats", {})
    percent = int(stats.get("progress_percent", 0))

    _status_line(console, result)
    lines = Text()
    lines.append(f"cadence: {d.get('cadence')}  target: {d.get('target_value')}\n")
    if d.get("description"):
        lines.append(f"{d['description']}\n")
    lines.append(f"period: {stats.get('period_start')} .. {stats.get('period_end')}  ")
    lines.append_text(_percent_text(percent))

    title = f"#{d.get('id', '?')} — {d.get('title', 'Untitled')}"
    border = style_for_cadence(str(d.get("cadence"))) or "dim"
    console.print(Panel(lines, title=title, border_style=border, expand=False))
    console.print(ProgressBar(total=100, completed=percent, width=40))
    if verbose:
        _field(console, "created_at", d.get("created_at"))
        _render_meta(console, result)


def _render_goal_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_goals / all_stats as a progress table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="goal.id", no_wrap=True)
    table.add_column("Title", style="goal.title")
    table.add_column("Cadence")
    table.add_column("Target", justify="right")
    table.add_column("Period", style="goal.date")
    table.add_column("Progress", justify="right")
    show_total = verbose and any("total" in item for item in items)
    if show_total:
        table.add_column("Total", justify="right")

    for item in items:
        stats = item.get("stats", item)
        cadence = str(item.get("cadence", ""))
        percent = int(stats.get("progress_percent", 0))
        row: list[Any] = [
            str(item.get("id", item.get("goal_id", ""))),
            str(item.get("title", "")),
            Text(cadence, style=style_for_cadence(cadence)),
            str(item.get("target_value", "")),
            f"{stats.get('period_start')}..{stats.get('period_end')}",
            _percent_text(percent),
        ]
        if show_total:
            row.append(str(item.get("total", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} goals")
    if verbose:
        _render_meta(console, result)


def _render_goal_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in _STATS_KEYS:
        if key in d:
            _field(console, key, d[key])
    percent = int(d.get("progress_percent", 0))
    console.print(Text("  progress_percent: ", style="goal.key"), _percent_text(percent))
    console.print(ProgressBar(total=100, completed=percent, width=40))
    if verbose:
        _render_meta(console, result)


# ── Log renderers ─────────────────────────────────────────────────────


def _render_log_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="goal.date", no_wrap=True)
    table.add_column("Goal", style="goal.id", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Note")
    if verbose:
        table.add_column("ID", style="dim", justify="right")

    for item in items:
        row = [
            str(item.get("entry_date", "")),
            f"#{item.get('goal_id', '')}",
            f"{int(item.get('value') or 0):+d}",
            str(item.get("note") or ""),
        ]
        if verbose:
            row.append(str(item.get("id", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} entries")


# ── Generic renderer ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus one field per data key (add_log, delete_goal, unknown ops)."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), default=str)
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "create_goal": _render_goal,
    "get_goal": _render_goal,
    "list_goals": _render_goal_table,
    "delete_goal": _render_generic,
    "add_log": _render_generic,
    "list_logs": _render_log_table,
    "goal_stats": _render_goal_stats,
    "all_stats": _render_goal_table,
}
