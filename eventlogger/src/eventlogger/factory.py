"""
Helpers for choosing an event logger backend.

``create_event_logger`` builds a backend by name from explicit
arguments.  ``get_default_event_logger`` reads the same settings from
the environment, which suits deployments that configure the host
through variables:

``EVENT_LOGGER_BACKEND``
    One of ``null`` (default), ``stdout``, ``textfile`` or ``db``.

``EVENT_LOGGER_PATH``
    Event file for the ``textfile`` and ``db`` backends.

``EVENT_LOGGER_STDERR``
    Set to ``true``/``1``/``yes`` to echo textfile runtime failures to
    standard error.

``EVENT_LOGGER_DB_MESSAGE_LEVEL``
    Integer diagnostic level for the ``db`` backend (default ``0``).

If the selected backend cannot be brought up, the default logger falls
back to :class:`NullEventLogger` and logs a warning.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .base import BaseEventLogger
from .errors import EventLoggerError
from .loggers import DBEventLogger, NullEventLogger, StdoutEventLogger, TextfileEventLogger

logger = logging.getLogger(__name__)

BACKENDS = ("null", "stdout", "textfile", "db")


def create_event_logger(
    backend: str,
    path: Optional[Union[str, Path]] = None,
    exceptions_to_stderr: bool = False,
    db_message_level: int = 0,
) -> BaseEventLogger:
    """Construct the backend named ``backend``.

    Raises:
        ValueError: If ``backend`` is not one of :data:`BACKENDS`.
        EventLoggerError: If a file backend has no ``path`` or cannot
            open it.
    """
    name = backend.lower()
    if name == "null":
        return NullEventLogger()
    if name == "stdout":
        return StdoutEventLogger()
    if name not in BACKENDS:
        raise ValueError(f"Unknown event logger backend: {backend!r}")
    if not path:
        raise EventLoggerError(None, f"backend {name!r} requires a path")
    if name == "textfile":
        return TextfileEventLogger(path, exceptions_to_stderr=exceptions_to_stderr)
    return DBEventLogger(path, db_message_level=db_message_level)


def get_default_event_logger() -> BaseEventLogger:
    """Return the event logger configured by ``EVENT_LOGGER_*`` variables."""
    backend = os.getenv("EVENT_LOGGER_BACKEND", "null")
    path = os.getenv("EVENT_LOGGER_PATH")
    to_stderr = str(os.getenv("EVENT_LOGGER_STDERR") or "false").lower() in {"true", "1", "yes"}
    try:
        level = int(os.getenv("EVENT_LOGGER_DB_MESSAGE_LEVEL") or "0")
    except ValueError:
        level = 0
    try:
        return create_event_logger(
            backend, path, exceptions_to_stderr=to_stderr, db_message_level=level
        )
    except (EventLoggerError, ValueError) as exc:
        logger.warning("Event logger backend %r unavailable, using null logger: %s", backend, exc)
        return NullEventLogger()
