"""Structured JSON logging for adfify.

Each record is a single-line JSON object so conversion diagnostics can be
shipped to a log pipeline without extra parsing::

    {"ts": "2026-10-17T12:00:00.123456+00:00", "level": "WARNING",
     "logger": "adfify.converter", "message": "malformed token tree",
     "error_type": "KeyError", "detail": "'items'"}

Usage::

    from adfify.observability import get_logger

    log = get_logger("adfify.converter", level=logging.WARNING)
    log.debug("token dropped", extra={"extra_fields": {"token_type": "html"}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

DEFAULT_MAX_FIELD_LENGTH = 500


class StructuredFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Fields passed as ``extra={"extra_fields": {...}}`` are
    merged into the top level; ``exception`` and ``stack_info`` are added
    when present on the record.

    Malformed-token diagnostics embed ``str()`` of arbitrary token
    subtrees, so string field values longer than *max_field_length*
    characters are cut and suffixed with ``"..."``.
    """

    def __init__(self, max_field_length: int = DEFAULT_MAX_FIELD_LENGTH) -> None:
        super().__init__()
        self.max_field_length = max_field_length

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            entry.update(
                (key, self._clip(value)) for key, value in extra_fields.items()
            )

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)

    def _clip(self, value: Any) -> Any:
        if isinstance(value, str) and len(value) > self.max_field_length:
            return value[: self.max_field_length] + "..."
        return value


# One handler per logger name, so repeated ``get_logger`` calls from
# different modules never stack handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "adfify",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name, e.g. ``"adfify.converter"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name such as
        ``"warning"``.  Only applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The named logger with a :class:`StructuredFormatter` handler
        attached exactly once.
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
