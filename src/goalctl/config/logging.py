"""structlog configuration for goalctl.

Everything goes to stderr so stdout stays reserved for command output.
Two renderers: console lines by default, JSON lines with ``--log-json``.
Records from plain ``logging`` loggers and from structlog loggers share
the same processor chain, so both carry the ``tracker`` name bound here.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers that stay at WARNING even under --verbose.
_QUIET_LOGGERS = ("sqlalchemy",)


def configure_logging(
    *, verbose: bool = False, log_json: bool = False, tracker_name: str | None = None
) -> None:
    """Route goalctl and structlog output through one stderr handler.

    Args:
        verbose: ``goalctl.*`` at DEBUG, including telemetry span records.
        log_json: JSON lines instead of console lines.
        tracker_name: ``[tracker] name``; bound as ``tracker`` on every record.
    """
    structlog.contextvars.clear_contextvars()
    if tracker_name:
        structlog.contextvars.bind_contextvars(tracker=tracker_name)

    chain = _shared_processors()
    structlog.configure(
        processors=[*chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(chain, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("goalctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(chain: list[structlog.types.Processor], *, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler
