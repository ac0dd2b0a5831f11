"""
Public logging API for Teavet.

Every entry point runs the same one-shot pipeline: capture the caller's
file and line, build a LogRecord, append it to the log file, then print it
on the console. Fatal and panic severities raise after printing.
"""

import inspect
import logging
import os
from dataclasses import replace
from datetime import datetime
from typing import Optional, Tuple, Union

from ..models import LoggerConfig, LogRecord, Status
from ..core.locator import ensure_log_file
from ..core.persister import append_record
from ..core.formatter import (
    BRIGHT_MAGENTA, BRIGHT_RED, BRIGHT_YELLOW, DEFAULT_COLOR, RESET, ConsoleFormatter
)
from ..infrastructure.error_handler import TeavetError, FatalLogged, LogPanic
from ..infrastructure.logger import logger


Fault = Union[BaseException, str, None]


def _timestamp() -> str:
    """Current local time in RFC3339, second precision."""

    return datetime.now().astimezone().isoformat(timespec="seconds")


def _fault_text(fault: Fault) -> Optional[str]:
    if fault is None:
        return None
    return str(fault)


class Teavet:
    """
    Structured logger writing JSON records to a file and colored text
    to the console.

    Example:
        >>> log = Teavet()
        >>> log.status("success")
        >>> log.complete("info", "cache warmed", None)
    """

    def __init__(self, config: Optional[LoggerConfig] = None, verbose: Optional[bool] = None):
        self.config = replace(config or LoggerConfig())
        if verbose is not None:
            self.config.verbose = verbose
        self.verbose = self.config.verbose

        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

        self.console = ConsoleFormatter(
            stream=self.config.stream,
            use_color=self.config.use_color
        )

        if self.config.create_on_start:
            self.start()

    def set_verbose(self, verbose: bool) -> None:
        """Toggle DEBUG diagnostics for the library's internal logger."""

        self.verbose = verbose
        self.config.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def start(self):
        """Create the log file if it does not exist yet."""

        return ensure_log_file(self.config.directory, self.config.log_filename)

    ####
    ##      ENTRY POINTS
    #####
    def simple(self, *, stacklevel: int = 1) -> LogRecord:
        """Log only the call site and time."""

        record = self._build(stacklevel)
        return self._dispatch(record, DEFAULT_COLOR)

    def status(self, status: str, *, stacklevel: int = 1) -> LogRecord:
        """Log a status label; `fatal` and `panic` escalate."""

        record = self._build(stacklevel, status=status)
        return self._dispatch(record, escalate=record.severity)

    def message(self, message: str, *, stacklevel: int = 1) -> LogRecord:
        record = self._build(stacklevel, message=message)
        return self._dispatch(record, DEFAULT_COLOR)

    def error(self, fault: Fault, *, stacklevel: int = 1) -> LogRecord:
        record = self._build(stacklevel, fault=_fault_text(fault))
        return self._dispatch(record, BRIGHT_YELLOW)

    def fatal(self, fault: Fault, *, stacklevel: int = 1) -> LogRecord:
        """Log a fault, then raise FatalLogged."""

        record = self._build(stacklevel, fault=_fault_text(fault))
        return self._dispatch(record, BRIGHT_MAGENTA, escalate=Status.FATAL)

    def panic(self, fault: Fault, *, stacklevel: int = 1) -> LogRecord:
        """Log a fault, then raise LogPanic."""

        record = self._build(stacklevel, fault=_fault_text(fault))
        return self._dispatch(record, BRIGHT_RED, escalate=Status.PANIC)

    def complete(
        self,
        status: Optional[str],
        message: Optional[str],
        fault: Fault,
        *,
        stacklevel: int = 1
    ) -> LogRecord:
        """Log status, message and fault together."""

        record = self._build(
            stacklevel,
            status=status,
            message=message,
            fault=_fault_text(fault)
        )
        return self._dispatch(record, escalate=record.severity)

    ####
    ##      PIPELINE
    #####
    def _caller(self, stacklevel: int) -> Tuple[str, str]:
        frame = inspect.currentframe()
        try:
            for _ in range(stacklevel + 1):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                return "<unknown>", "0"
            return os.path.abspath(frame.f_code.co_filename), str(frame.f_lineno)
        finally:
            del frame

    def _build(self, stacklevel: int, **fields) -> LogRecord:
        filename, line = self._caller(stacklevel + 1)
        return LogRecord(
            filename=filename,
            line=line,
            timestamp=_timestamp(),
            **fields
        )

    def _persist(self, record: LogRecord) -> None:
        try:
            append_record(
                record,
                directory=self.config.directory,
                filename=self.config.log_filename,
                indent=self.config.indent,
                create_missing=self.config.create_missing
            )
        except TeavetError as e:
            logger.error(f"Unable to save logger to log file: {e}")
            self.console.emit_text(
                self._paint(f"Unable to save logger to log file: {e}", BRIGHT_MAGENTA)
            )
            raise

    def _paint(self, text: str, color: str) -> str:
        if not self.console.use_color:
            return text
        return f"{color}{text}{RESET}"

    def _dispatch(
        self,
        record: LogRecord,
        color: Optional[str] = None,
        escalate: Optional[Status] = None
    ) -> LogRecord:
        self._persist(record)
        self.console.emit(record, color)

        if escalate is Status.FATAL:
            raise FatalLogged(record)
        if escalate is Status.PANIC:
            raise LogPanic(record)
        return record


####
##      MODULE-LEVEL SHORTCUTS
#####
_default: Optional[Teavet] = None


def get_default() -> Teavet:
    """Return the shared logger, building it on first use."""

    global _default
    if _default is None:
        _default = Teavet(LoggerConfig(create_missing=True))
    return _default


def configure(config: Optional[LoggerConfig] = None, verbose: Optional[bool] = None) -> Teavet:
    """Replace the shared logger used by the module-level functions."""

    global _default
    _default = Teavet(config, verbose=verbose)
    return _default


def reset_default() -> None:
    global _default
    _default = None


def start_logger(directory=None):
    """Create the log file in `directory` (default: working directory)."""

    return ensure_log_file(directory)


def simple() -> LogRecord:
    return get_default().simple(stacklevel=2)


def status(status: str) -> LogRecord:
    return get_default().status(status, stacklevel=2)


def message(message: str) -> LogRecord:
    return get_default().message(message, stacklevel=2)


def error(fault: Fault) -> LogRecord:
    return get_default().error(fault, stacklevel=2)


def fatal(fault: Fault) -> LogRecord:
    return get_default().fatal(fault, stacklevel=2)


def panic(fault: Fault) -> LogRecord:
    return get_default().panic(fault, stacklevel=2)


def complete(status: Optional[str], message: Optional[str], fault: Fault) -> LogRecord:
    return get_default().complete(status, message, fault, stacklevel=2)


__all__ = [
    "Teavet",
    "get_default",
    "configure",
    "reset_default",
    "start_logger",
    "simple",
    "status",
    "message",
    "error",
    "fatal",
    "panic",
    "complete",
]
