"""
Base class and interface for event loggers.  An application builds
exactly one backend and talks to it only through this contract, so
the backend can be swapped (for instance for :class:`NullEventLogger`)
without touching calling code.

``tail_last_n`` takes a backend-defined recency parameter: the
textfile backend reads it as a number of lines, the store backend as a
number of seconds.  Every backend returns formatted strings.
"""

from __future__ import annotations

import abc
from typing import Any, Optional, Sequence


class BaseEventLogger(abc.ABC):
    """Abstract base class for event logger backends."""

    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        """Whether ``add`` currently records events."""
        return self._active

    def enable(self) -> None:
        """Resume recording after :meth:`disable` or a write failure."""
        self._active = True

    def disable(self) -> None:
        """Silently ignore ``add`` calls until :meth:`enable` is called."""
        self._active = False

    def add(self, address_or_message: str, message: Optional[str] = None) -> str:
        """Record an event.

        ``add(message)`` records with an empty address; ``add(address,
        message)`` records with both.  Returns the recorded line, or an
        empty string if nothing was written.
        """
        if message is None:
            return self.add_event("", address_or_message)
        return self.add_event(address_or_message, message)

    def add_request(self, request: Any, message: str) -> str:
        """Record an event attributed to ``request.remote_addr``."""
        return self.add_event(request.remote_addr, message)

    @abc.abstractmethod
    def add_event(self, address: str, message: str) -> str:
        """Record one event and return its formatted form, or ``""``."""
        raise NotImplementedError

    @abc.abstractmethod
    def tail_last_n(self, n: int) -> Sequence[str]:
        """Return the most recent events.  Never raises."""
        raise NotImplementedError

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Release the backend's resources.  Call at most once."""
        raise NotImplementedError
