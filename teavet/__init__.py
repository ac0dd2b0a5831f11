"""
Teavet: JSON log records in a file, colored copies on the console.
"""

from .models import Status, LogRecord, LoggerConfig
from .core.locator import ensure_log_file, locate_log_file, remove_log_file
from .core.persister import append_record, read_records
from .core.formatter import ConsoleFormatter, color_for_status, format_for_console
from .infrastructure.error_handler import (
    TeavetError,
    WorkingDirectoryError,
    FileOpenError,
    SerializationError,
    WriteError,
    LogFileNotFoundError,
    FatalLogged,
    LogPanic,
)
from .interfaces.api import (
    Teavet,
    configure,
    start_logger,
    simple,
    status,
    message,
    error,
    fatal,
    panic,
    complete,
)

__version__ = "0.1.0"

__all__ = [
    "Status",
    "LogRecord",
    "LoggerConfig",
    "ensure_log_file",
    "locate_log_file",
    "remove_log_file",
    "append_record",
    "read_records",
    "ConsoleFormatter",
    "color_for_status",
    "format_for_console",
    "TeavetError",
    "WorkingDirectoryError",
    "FileOpenError",
    "SerializationError",
    "WriteError",
    "LogFileNotFoundError",
    "FatalLogged",
    "LogPanic",
    "Teavet",
    "configure",
    "start_logger",
    "simple",
    "status",
    "message",
    "error",
    "fatal",
    "panic",
    "complete",
]
