"""Structured JSON logger for blocktree.

Each record is written as one JSON object per line::

    {"ts": "2026-10-19T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "blocktree.converter", "message": "reference expanded",
     "op": "convert_blocks", "ref": 42, "nodes": 3}

Usage::

    from blocktree.observability import fields, get_logger

    log = get_logger("blocktree.converter")
    log.debug("reference skipped", extra=fields(op="convert_blocks", ref=42))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Structured fields passed through
    ``extra={"extra_fields": {...}}`` (see :func:`fields`) are merged into
    the top-level object; ``exception`` and ``stack_info`` are added when
    the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def fields(**values: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for a structured log call."""
    return {"extra_fields": values}


# One handler per logger name so repeated ``get_logger`` calls stay idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "blocktree",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"blocktree"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive name such as
        ``"INFO"``.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler attached.
        Repeated calls with the same *name* do not add duplicate handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
