"""
db_logger
=========

Event logger that persists events in an embedded SQLite file through
SQLAlchemy.  Each event is one row of the ``events`` table, indexed on
``time`` so that "everything in the last N seconds" is a range scan.

Tables:
  - events(id INTEGER PRIMARY KEY, time BIGINT INDEXED, address TEXT, message TEXT)

Opening the store runs ``metadata.create_all``, which creates the table
and its index in a fresh file and adds whichever of them is missing
from an older one.  Rows are never updated or deleted.

Unlike the textfile backend, ``tail_last_n(n)`` reads ``n`` as a window
in seconds and returns events newest first.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import List, Union

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..base import BaseEventLogger
from ..errors import EventLoggerError
from ..event import Event, current_millis

logger = logging.getLogger(__name__)

#: Smallest value SQLite can bind as an INTEGER.
SQLITE_MIN_INTEGER = -(2**63)

metadata = MetaData()

events_table = Table(
    "events",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("time", BigInteger, nullable=False, index=True),
    Column("address", Text, nullable=False, default=""),
    Column("message", Text, nullable=False, default=""),
)


def _echo_for_level(db_message_level: int) -> Union[bool, str]:
    """Map a numeric diagnostic level to SQLAlchemy's ``echo`` setting."""
    if db_message_level <= 0:
        return False
    if db_message_level == 1:
        return True
    return "debug"


class DBEventLogger(BaseEventLogger):
    """Event logger backed by an indexed embedded store.

    Args:
        path: Store file.  Created if absent; its directory must exist.
        db_message_level: 0 is silent, 1 logs SQL statements, 2 and
            above also log result rows (through the ``sqlalchemy.engine``
            logger).
    """

    def __init__(self, path: Union[str, Path], db_message_level: int = 0) -> None:
        super().__init__()
        self.path = os.fspath(path)
        self._lock = threading.Lock()
        try:
            self.engine: Engine = create_engine(
                f"sqlite:///{self.path}", echo=_echo_for_level(db_message_level)
            )
            with self.engine.begin() as conn:
                metadata.create_all(conn)
        except SQLAlchemyError as exc:
            self._active = False
            raise EventLoggerError(self.path, f"exception opening event store: {exc}") from exc
        logger.debug("Opened event store %s", self.path)

    def store(self, event: Event) -> None:
        """Persist ``event`` as is, keeping its own timestamp."""
        with self._lock:
            with self.engine.begin() as conn:
                conn.execute(
                    insert(events_table).values(
                        time=event.time, address=event.address, message=event.message
                    )
                )

    def add_event(self, address: str, message: str) -> str:
        if not self._active:
            return ""
        event = Event(address, message)
        try:
            self.store(event)
        except (SQLAlchemyError, ValueError) as exc:
            logger.debug("Failed to store event in %s: %s", self.path, exc)
            return ""
        return str(event)

    def events_since(self, seconds: int) -> List[Event]:
        """Return events newer than ``seconds`` ago, most recent first.

        Events sharing a timestamp come back in reverse insertion order.
        """
        cutoff = max(current_millis() - seconds * 1000, SQLITE_MIN_INTEGER)
        query = (
            select(events_table.c.address, events_table.c.message, events_table.c.time)
            .where(events_table.c.time > cutoff)
            .order_by(events_table.c.time.desc(), events_table.c.id.desc())
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(query).all()
        except (SQLAlchemyError, OverflowError, ValueError) as exc:
            logger.debug("Failed to query event store %s: %s", self.path, exc)
            return []
        return [Event(row.address, row.message, row.time) for row in rows]

    def tail_last_n(self, n: int) -> List[str]:
        """Return the events of the last ``n`` seconds, newest first."""
        return [str(event) for event in self.events_since(n)]

    def shutdown(self) -> None:
        self.engine.dispose()
