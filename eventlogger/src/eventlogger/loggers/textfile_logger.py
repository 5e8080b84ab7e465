"""
textfile_logger
===============

Append events to a plain text file, one ``<date> (<address>) <message>``
line per event, and read the most recent lines back without loading
the whole file.

The constructor raises :class:`~eventlogger.errors.EventLoggerError` if
the file cannot be created or opened.  After that no method raises: a
failed write deactivates the logger, a failed tail returns what was
gathered so far.  With ``exceptions_to_stderr`` set, those failures are
also echoed to ``sys.stderr``; otherwise they only reach the module
logger at debug level.

Tailing scans the file backwards in ``BLOCK_SIZE`` chunks through a
read handle of its own.  Appends that land after the scan started are
not returned.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import BinaryIO, Iterator, List, Union

from ..base import BaseEventLogger
from ..errors import EventLoggerError
from ..event import format_line

logger = logging.getLogger(__name__)

#: Bytes read per step when scanning the file backwards.
BLOCK_SIZE = 1000
NEWLINE = b"\n"


def iter_lines_reversed(
    handle: BinaryIO, block_size: int = BLOCK_SIZE, encoding: str = "utf-8"
) -> Iterator[str]:
    """Yield the non-empty lines of ``handle``, newest first.

    The file length is sampled once; bytes appended afterwards are
    ignored.  Bytes left over at the end of each block belong to a line
    that continues in a later block and are carried into the next
    iteration, so lines longer than ``block_size`` come back whole.  The
    first line of the file has no preceding newline and is yielded once
    the scan reaches offset zero.
    """
    end = handle.seek(0, os.SEEK_END)
    carry = b""
    while end > 0:
        start = max(0, end - block_size)
        handle.seek(start)
        parts = (handle.read(end - start) + carry).split(NEWLINE)
        carry = parts[0]
        for part in reversed(parts[1:]):
            if part:
                yield part.decode(encoding, errors="replace")
        end = start
    if carry:
        yield carry.decode(encoding, errors="replace")


class TextfileEventLogger(BaseEventLogger):
    """Event logger backed by an append-only text file.

    Parameters
    ----------
    path : str or Path
        Event file.  Created if absent; its directory must exist.
    exceptions_to_stderr : bool
        Echo runtime failures to ``sys.stderr``.
    encoding : str
        Encoding used both to write lines and to decode them when
        tailing.  ``"latin-1"`` gives a strict single-byte file.
        Characters the encoding cannot represent are written as
        backslash escapes.
    """

    def __init__(
        self,
        path: Union[str, Path],
        exceptions_to_stderr: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self.path = os.fspath(path)
        self.exceptions_to_stderr = exceptions_to_stderr
        self.encoding = encoding
        self.block_size = BLOCK_SIZE
        self._lock = threading.Lock()
        self._read_lock = threading.Lock()
        try:
            Path(self.path).touch(exist_ok=True)
            if not os.access(self.path, os.W_OK):
                raise PermissionError(f"Event file cannot be written to: {self.path}")
            self._writer = open(
                self.path, "a", encoding=encoding, errors="backslashreplace", newline=""
            )
            try:
                self._reader = open(self.path, "rb")
            except OSError:
                self._writer.close()
                raise
        except OSError as exc:
            self._active = False
            self._report("Logger deactivated; cannot create or open event file %s: %s", self.path, exc)
            raise EventLoggerError(self.path, str(exc)) from exc
        logger.debug("Opened event file %s", self.path)
        self.add("Logger started")

    def _report(self, msg: str, *args: object) -> None:
        logger.debug(msg, *args)
        if self.exceptions_to_stderr:
            print(msg % args, file=sys.stderr)

    def add_event(self, address: str, message: str) -> str:
        if not self._active:
            return ""
        line = format_line(address, message)
        with self._lock:
            try:
                self._writer.write(line + "\n")
                self._writer.flush()
            except (OSError, ValueError) as exc:
                # Stays off until enable(); the writer may fail again.
                self._active = False
                self._report("Logger deactivated due to exception adding event to file: %s", exc)
        return line

    def tail_last_n(self, n: int) -> List[str]:
        """Return up to ``n`` most recent non-empty lines, oldest first."""
        collected: List[str] = []
        if n <= 0:
            return collected
        with self._read_lock:
            try:
                for line in iter_lines_reversed(self._reader, self.block_size, self.encoding):
                    collected.append(line)
                    if len(collected) >= n:
                        break
            except (OSError, ValueError) as exc:
                self._report("Exception reading event file for tail: %s", exc)
        collected.reverse()
        return collected

    def shutdown(self) -> None:
        self.add("Logger shutting down")
        for handle in (self._writer, self._reader):
            try:
                handle.close()
            except OSError as exc:
                self._report("Exception closing event file: %s", exc)
