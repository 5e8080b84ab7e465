"""Logger that prints one formatted line per event to standard output."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Tuple

from ..base import BaseEventLogger
from ..event import format_line

logger = logging.getLogger(__name__)

STDOUT_LASTN_RESPONSE: Tuple[str, ...] = ("StdoutEventLogger cannot return LastN events",)


class StdoutEventLogger(BaseEventLogger):
    """Write events to ``sys.stdout``.

    Writes are serialised per instance so concurrent callers produce
    whole lines.  ``sys.stdout`` is looked up on every write, so a
    redirected stream is honoured.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self.add("Logger started")

    def add_event(self, address: str, message: str) -> str:
        if not self._active:
            return ""
        line = format_line(address, message)
        with self._lock:
            try:
                sys.stdout.write(line + "\n")
                sys.stdout.flush()
            except (OSError, ValueError) as exc:
                logger.debug("Failed to write event to stdout: %s", exc)
        return line

    def tail_last_n(self, n: int) -> Tuple[str, ...]:
        return STDOUT_LASTN_RESPONSE

    def shutdown(self) -> None:
        self.add("Logger shutting down")
