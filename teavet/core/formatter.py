"""
Console rendering of log records.
"""

import logging
from typing import Dict, List, Optional, TextIO, Tuple

from colorama import Fore, Style, just_fix_windows_console

from ..models import LogRecord, Status


RESET = Style.RESET_ALL

BRIGHT_GREEN = Style.BRIGHT + Fore.GREEN
BRIGHT_BLUE = Style.BRIGHT + Fore.BLUE
BRIGHT_YELLOW = Style.BRIGHT + Fore.YELLOW
BRIGHT_MAGENTA = Style.BRIGHT + Fore.MAGENTA
BRIGHT_RED = Style.BRIGHT + Fore.RED
BRIGHT_CYAN = Style.BRIGHT + Fore.CYAN

DEFAULT_COLOR = BRIGHT_CYAN

STATUS_COLORS: Dict[Status, str] = {
    Status.SUCCESS: BRIGHT_GREEN,
    Status.INFO: BRIGHT_BLUE,
    Status.ERROR: BRIGHT_YELLOW,
    Status.WARNING: BRIGHT_YELLOW,
    Status.FATAL: BRIGHT_MAGENTA,
    Status.PANIC: BRIGHT_RED,
}

CONSOLE_LOGGER_NAME = "teavet.console"


def color_for_status(status: Optional[str]) -> str:
    """Pick the console color for a status label (case-insensitive)."""

    parsed = Status.parse(status)
    if parsed is None:
        return DEFAULT_COLOR
    return STATUS_COLORS[parsed]


def _visible_fields(record: LogRecord) -> List[Tuple[str, str]]:
    fields = [
        ("Filename", record.filename),
        ("Line", record.line),
        ("Timestamp", record.timestamp),
    ]

    # First populated field wins; a status hides message and fault
    if record.status is not None:
        fields.append(("Status", record.status))
    elif record.message is not None:
        fields.append(("Message", record.message))
    elif record.fault is not None:
        fields.append(("Fault", record.fault))

    return fields


def format_for_console(record: LogRecord, color: str, reset: str = RESET) -> str:
    """Render `record` as a bordered block wrapped in `color` ... `reset`."""

    body = "\n".join(f"| {label}: {value}" for label, value in _visible_fields(record))
    return f"{color}\n{body}\n{reset}"


####
##      CONSOLE
#####
class ConsoleFormatter:
    """
    Prints records on a dedicated logging channel.

    Each instance owns its channel, a logger kept out of the logging
    registry, configured once here: a single stream handler whose format
    is the bare message, so no timestamp prefix gets added.
    """

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self.use_color = use_color
        if use_color:
            just_fix_windows_console()

        self.channel = logging.Logger(CONSOLE_LOGGER_NAME, logging.INFO)
        self.channel.propagate = False

        self.handler = logging.StreamHandler(stream)
        self.handler.setFormatter(logging.Formatter("%(message)s"))
        self.channel.addHandler(self.handler)

    def render(self, record: LogRecord, color: Optional[str] = None) -> str:
        if not self.use_color:
            return format_for_console(record, "", "")
        if color is None:
            color = color_for_status(record.status)
        return format_for_console(record, color)

    def emit(self, record: LogRecord, color: Optional[str] = None) -> str:
        """Render and print a record, returning the rendered text."""

        text = self.render(record, color)
        self.channel.info(text)
        return text

    def emit_text(self, text: str) -> None:
        self.channel.info(text)


__all__ = [
    "RESET",
    "BRIGHT_GREEN",
    "BRIGHT_BLUE",
    "BRIGHT_YELLOW",
    "BRIGHT_MAGENTA",
    "BRIGHT_RED",
    "BRIGHT_CYAN",
    "DEFAULT_COLOR",
    "STATUS_COLORS",
    "color_for_status",
    "format_for_console",
    "ConsoleFormatter",
]
