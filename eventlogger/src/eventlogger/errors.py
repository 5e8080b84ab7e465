"""
Exception types for the event logger.

Only backend constructors raise.  Once a logger has been brought up,
``add`` and ``tail_last_n`` swallow their own failures so that calling
code never has to wrap a log call in ``try``/``except``.
"""

from __future__ import annotations

from typing import Optional


class EventLoggerError(Exception):
    """Raised when a backend cannot acquire its file or store."""

    def __init__(self, path: Optional[str], reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Event logger could not be opened at {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
