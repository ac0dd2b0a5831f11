import io

import pytest

from teavet.core.formatter import (
    BRIGHT_BLUE, BRIGHT_CYAN, BRIGHT_GREEN, BRIGHT_MAGENTA, BRIGHT_RED,
    BRIGHT_YELLOW, RESET, ConsoleFormatter, color_for_status, format_for_console
)
from teavet.models import LogRecord


def make_record(**fields) -> LogRecord:
    base = dict(filename="/srv/app/main.py", line="12", timestamp="2024-05-01T10:00:00Z")
    base.update(fields)
    return LogRecord(**base)


def test_status_masks_message_and_fault():
    record = make_record(status="success", message="hidden", fault="also hidden")

    text = format_for_console(record, BRIGHT_GREEN)

    assert "| Status: success" in text
    assert "Message" not in text
    assert "Fault" not in text


def test_message_shown_when_no_status():
    text = format_for_console(make_record(message="hello", fault="masked"), BRIGHT_CYAN)
    assert "| Message: hello" in text
    assert "Fault" not in text


def test_fault_shown_alone():
    text = format_for_console(make_record(fault="boom"), BRIGHT_YELLOW)
    assert "| Fault: boom" in text


def test_minimal_record_shows_location_only():
    text = format_for_console(make_record(), BRIGHT_CYAN)
    assert text == (
        f"{BRIGHT_CYAN}\n"
        "| Filename: /srv/app/main.py\n"
        "| Line: 12\n"
        "| Timestamp: 2024-05-01T10:00:00Z\n"
        f"{RESET}"
    )


@pytest.mark.parametrize("status, color", [
    ("success", BRIGHT_GREEN),
    ("Success", BRIGHT_GREEN),
    ("info", BRIGHT_BLUE),
    ("error", BRIGHT_YELLOW),
    ("warning", BRIGHT_YELLOW),
    ("fatal", BRIGHT_MAGENTA),
    ("panic", BRIGHT_RED),
    ("trace", BRIGHT_CYAN),
    (None, BRIGHT_CYAN),
])
def test_color_for_status(status, color):
    assert color_for_status(status) == color


def test_console_emits_without_timestamp_prefix():
    stream = io.StringIO()
    console = ConsoleFormatter(stream=stream)

    text = console.emit(make_record(status="info"))

    assert stream.getvalue() == text + "\n"
    assert stream.getvalue().startswith(BRIGHT_BLUE)


def test_console_explicit_color_overrides_status():
    stream = io.StringIO()
    console = ConsoleFormatter(stream=stream)

    console.emit(make_record(status="info"), BRIGHT_RED)

    assert stream.getvalue().startswith(BRIGHT_RED)


def test_console_without_color():
    stream = io.StringIO()
    console = ConsoleFormatter(stream=stream, use_color=False)

    console.emit(make_record(status="panic"))

    assert "\x1b[" not in stream.getvalue()
    assert "| Status: panic" in stream.getvalue()


def test_each_console_writes_only_to_its_own_stream():
    first, second = io.StringIO(), io.StringIO()
    one = ConsoleFormatter(stream=first)
    two = ConsoleFormatter(stream=second)

    one.emit(make_record(message="for first"))
    two.emit(make_record(message="for second"))

    assert "for first" in first.getvalue()
    assert "for second" not in first.getvalue()
    assert "for second" in second.getvalue()
    assert "for first" not in second.getvalue()
    assert len(one.channel.handlers) == 1
