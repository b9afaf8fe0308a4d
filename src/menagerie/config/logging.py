"""structlog setup for menagerie.

stdout belongs to prompts and the report, so every log record goes to
stderr (or the stream passed in).  The collector binds ``record`` (the
1-based record number) and ``field`` through :mod:`structlog.contextvars`;
both structlog and stdlib records pick them up from the shared chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

LOGGER_NAME = "menagerie"

# Loop context keys, rendered right after the event name.
CONTEXT_KEYS = ("record", "field")


def _context_first(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Reorder so ``event`` is followed by the loop context keys."""
    ordered = {"event": event_dict.pop("event", "")}
    for key in CONTEXT_KEYS:
        if key in event_dict:
            ordered[key] = event_dict.pop(key)
    ordered.update(event_dict)
    return ordered


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _context_first,
    ]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty(), sort_keys=False)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging through one formatter.

    Args:
        verbose: DEBUG for ``menagerie`` loggers; otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
        stream: Destination, ``sys.stderr`` by default.
    """
    stream = stream or sys.stderr
    shared = _shared_processors()

    structlog.contextvars.clear_contextvars()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
