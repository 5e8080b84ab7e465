"""Tests for ``scripts/tail_events.py``."""

from __future__ import annotations

import pytest

from eventlogger.event import Event, current_millis
from eventlogger.loggers.db_logger import DBEventLogger
from eventlogger.loggers.textfile_logger import TextfileEventLogger
from scripts import tail_events


def test_tail_textfile_prints_last_lines(tmp_path, capsys):
    path = tmp_path / "events.log"
    el = TextfileEventLogger(path)
    el.add("127.0.0.1", "request served")
    el.shutdown()
    size = path.stat().st_size

    tail_events.main(["--backend", "textfile", "--path", str(path), "-n", "2"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].endswith("(127.0.0.1) request served")
    assert out[1].endswith("() Logger shutting down")
    # Reading must not append start/stop events.
    assert path.stat().st_size == size


def test_tail_db_prints_window(tmp_path, capsys):
    path = tmp_path / "events.db"
    store = DBEventLogger(path)
    now = current_millis()
    store.store(Event("10.0.0.1", "recent", now - 1_000))
    store.store(Event("10.0.0.1", "ancient", now - 3_600_000))
    store.shutdown()

    tail_events.main(["-b", "db", "-p", str(path), "-n", "60"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0].endswith("10.0.0.1 recent")


def test_defaults_come_from_environment(tmp_path, capsys, monkeypatch):
    path = tmp_path / "events.log"
    path.write_text("one\ntwo\n")
    monkeypatch.setenv("EVENT_LOGGER_BACKEND", "textfile")
    monkeypatch.setenv("EVENT_LOGGER_PATH", str(path))
    tail_events.main([])
    assert capsys.readouterr().out.splitlines() == ["one", "two"]


def test_missing_path_exits(tmp_path, monkeypatch):
    monkeypatch.delenv("EVENT_LOGGER_PATH", raising=False)
    with pytest.raises(SystemExit):
        tail_events.main(["--backend", "textfile"])
    with pytest.raises(SystemExit):
        tail_events.main(["--path", str(tmp_path / "nope.log")])
