"""Event record and line formatting helpers.

An :class:`Event` is the unit every backend records: a wall-clock
timestamp in milliseconds, the originator address and a free-text
message.  Events are immutable once built.

The human readable line used by the stdout and textfile backends is
produced by :func:`format_line` and looks like::

    Sun Oct 18 12:00:00 UTC 2026 (127.0.0.1) user logged in
"""

from __future__ import annotations

import time as _time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

#: strftime layout for the leading timestamp of a formatted line.
DEFAULT_DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def current_millis() -> int:
    """Return the wall-clock time in milliseconds since the UNIX epoch."""
    return _time.time_ns() // 1_000_000


def paren_address(address: str) -> str:
    """Strip any parentheses from ``address`` and wrap it in one pair."""
    return "(" + address.replace("(", "").replace(")", "") + ")"


def format_line(address: str, message: str, when: Optional[datetime] = None) -> str:
    """Build the ``<date> (<address>) <message>`` line for one event.

    Args:
        address: Originator address.  May be empty, which yields ``()``.
        message: Free-text message.  Carriage returns and newlines are
            replaced by a space so the result is always a single line.
        when: Timestamp to render.  Defaults to now, in local time.

    Returns:
        The formatted line with surrounding whitespace trimmed.
    """
    if when is None:
        when = datetime.now().astimezone()
    text = message.replace("\r", " ").replace("\n", " ")
    return f"{when.strftime(DEFAULT_DATE_FORMAT)} {paren_address(address)} {text}".strip()


@dataclass(frozen=True)
class Event:
    """A single logged event.

    ``address`` and ``message`` are positional in that order; ``time`` is
    assigned at construction unless given explicitly (used when importing
    events recorded elsewhere).
    """

    address: str
    message: str
    time: int = field(default_factory=current_millis)

    @classmethod
    def from_message(cls, message: str) -> "Event":
        """Build an event with an empty address."""
        return cls("", message)

    def format(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        """Render the event with its time formatted through ``date_format``."""
        when = datetime.fromtimestamp(self.time / 1000).astimezone()
        return f"{when.strftime(date_format)} {self.address} {self.message}"

    def __str__(self) -> str:
        return f"{self.time} {self.address} {self.message}"
