"""Logger that discards everything written to it.

Hand this to code that expects an event logger when nothing should be
recorded; it saves guarding every log call with ``if logger``.
"""

from __future__ import annotations

from typing import Tuple

from ..base import BaseEventLogger

NULL_LASTN_RESPONSE: Tuple[str, ...] = ("NullEventLogger cannot return LastN events",)


class NullEventLogger(BaseEventLogger):
    def enable(self) -> None:
        pass

    def disable(self) -> None:
        pass

    def add_event(self, address: str, message: str) -> str:
        return ""

    def tail_last_n(self, n: int) -> Tuple[str, ...]:
        return NULL_LASTN_RESPONSE

    def shutdown(self) -> None:
        pass
