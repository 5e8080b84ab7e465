"""Unit tests for the Event record and line formatting."""

from __future__ import annotations

import dataclasses
import re
from datetime import datetime, timezone

import pytest

from eventlogger.event import Event, current_millis, format_line, paren_address


def test_event_is_positional_address_then_message():
    before = current_millis()
    event = Event("10.0.0.1", "hello")
    after = current_millis()
    assert event.address == "10.0.0.1"
    assert event.message == "hello"
    assert before <= event.time <= after


def test_event_is_immutable():
    event = Event("10.0.0.1", "hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "changed"  # type: ignore[misc]


def test_from_message_uses_empty_address():
    event = Event.from_message("only a message")
    assert event.address == ""
    assert event.message == "only a message"


def test_default_string_form():
    event = Event("1.2.3.4", "boot", time=1700000000000)
    assert str(event) == "1700000000000 1.2.3.4 boot"


def test_format_with_date_layout():
    event = Event("1.2.3.4", "boot")
    year = datetime.now().strftime("%Y")
    assert event.format("%Y").startswith(year + " 1.2.3.4 boot")


def test_format_line_layout():
    when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert format_line("1.2.3.4", "hello", when) == "Tue Jan 02 03:04:05 UTC 2024 (1.2.3.4) hello"


def test_format_line_empty_address_gives_empty_parens():
    assert re.fullmatch(r".* \(\) Test event 1", format_line("", "Test event 1"))


@pytest.mark.parametrize("address", ["(10.0.0.1)", "a(b)c", "((x", "))", "(()"])
def test_format_line_strips_parentheses_from_address(address):
    line = format_line(address, "msg")
    assert line.count("(") == 1
    assert line.count(")") == 1
    stripped = address.replace("(", "").replace(")", "")
    assert f"({stripped}) msg" in line


def test_paren_address():
    assert paren_address("") == "()"
    assert paren_address("(host)") == "(host)"


def test_format_line_replaces_newlines():
    line = format_line("h", "first\nsecond\r\nthird")
    assert "\n" not in line
    assert "\r" not in line
    assert line.endswith("(h) first second  third")
