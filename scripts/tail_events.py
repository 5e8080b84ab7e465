"""Print the most recent entries of an event log.

Usage::

    python scripts/tail_events.py --backend textfile --path logs/events.log -n 20
    python scripts/tail_events.py --backend db --path logs/events.db -n 3600

For the ``textfile`` backend ``-n`` is a number of lines; for ``db`` it
is a window in seconds.  The text file is read directly rather than
through ``TextfileEventLogger`` so that tailing does not append
start/stop events to the log.  Defaults come from
``EVENT_LOGGER_BACKEND`` and ``EVENT_LOGGER_PATH``.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from eventlogger.loggers.db_logger import DBEventLogger
from eventlogger.loggers.textfile_logger import iter_lines_reversed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the most recent events of an event log")
    parser.add_argument(
        "--backend",
        "-b",
        choices=("textfile", "db"),
        default=os.environ.get("EVENT_LOGGER_BACKEND", "textfile"),
        help="Log format. Defaults to ENV EVENT_LOGGER_BACKEND, else textfile.",
    )
    parser.add_argument(
        "--path",
        "-p",
        default=os.environ.get("EVENT_LOGGER_PATH"),
        help="Event file. Defaults to ENV EVENT_LOGGER_PATH.",
    )
    parser.add_argument(
        "-n",
        type=int,
        default=10,
        help="Lines (textfile) or seconds (db) to show.",
    )
    return parser.parse_args(argv)


def tail_textfile(path: str, n: int) -> List[str]:
    lines: List[str] = []
    with open(path, "rb") as handle:
        for line in iter_lines_reversed(handle):
            if len(lines) >= n:
                break
            lines.append(line)
    lines.reverse()
    return lines


def tail_db(path: str, seconds: int) -> List[str]:
    store = DBEventLogger(path)
    try:
        return [event.format() for event in store.events_since(seconds)]
    finally:
        store.shutdown()


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING"))
    args = parse_args(argv)
    if not args.path:
        raise SystemExit("Event file must be specified via --path or EVENT_LOGGER_PATH")
    if not os.path.exists(args.path):
        raise SystemExit(f"No event log at {args.path}")
    if args.backend == "db":
        entries = tail_db(args.path, args.n)
    else:
        entries = tail_textfile(args.path, args.n)
    for entry in entries:
        print(entry)


if __name__ == "__main__":
    main()
