"""
Appending records to the log file and reading them back.

The file is a plain concatenation of indented JSON objects with no
separator between them. Nothing here locks the file: two processes
appending at the same time can interleave their bytes, after which
`read_records` reports the damaged tail as a SerializationError.
"""

import json
from pathlib import Path
from typing import List, Optional

from ..models import DEFAULT_LOG_FILENAME, LogRecord
from ..infrastructure.error_handler import (
    FileOpenError, SerializationError, WriteError, LogFileNotFoundError,
    handle_io_error
)
from ..infrastructure.logger import logger
from .locator import PathLike, ensure_log_file, locate_log_file


@handle_io_error(SerializationError, "Unable to marshal log", catch=(TypeError, ValueError))
def serialize_record(record: LogRecord, indent: int = 1) -> str:
    return record.to_json(indent=indent)


def append_record(
    record: LogRecord,
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME,
    indent: int = 1,
    create_missing: bool = False
) -> str:
    """
    Serialize `record` and append it to the log file.

    Args:
        record: Record to persist
        directory: Directory holding the log file (default: working directory)
        filename: Log file name
        indent: JSON indent width
        create_missing: Recreate the log file instead of failing when absent

    Returns:
        The exact text that was appended
    """
    try:
        path = locate_log_file(directory, filename)
    except LogFileNotFoundError:
        if not create_missing:
            raise
        path = ensure_log_file(directory, filename)

    payload = serialize_record(record, indent=indent)

    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as e:
        logger.error(f"Unable to create/append/open file {path}: {e}")
        raise FileOpenError("Unable to create/append/open file", e) from e

    # close() flushes the buffer, so it sits inside the guard too
    try:
        with handle:
            handle.write(payload)
    except OSError as e:
        logger.error(f"Unable to write to file {path}: {e}")
        raise WriteError("Unable to write to file", e) from e

    logger.debug(f"Appended {len(payload)} characters to {path}")
    return payload


@handle_io_error(SerializationError, "Unable to decode log file", catch=(UnicodeDecodeError,))
@handle_io_error(FileOpenError, "Unable to read log file")
def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def parse_records(text: str) -> List[LogRecord]:
    """Split a concatenation of JSON objects into records."""

    decoder = json.JSONDecoder()
    records: List[LogRecord] = []
    position = 0
    length = len(text)

    while True:
        while position < length and text[position].isspace():
            position += 1
        if position >= length:
            break
        try:
            data, position = decoder.raw_decode(text, position)
            records.append(LogRecord.from_dict(data))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise SerializationError(
                f"Unable to unmarshal log record at offset {position}", e
            ) from e

    return records


def read_records(
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME
) -> List[LogRecord]:
    """Read every record from the log file, oldest first."""

    path = locate_log_file(directory, filename)
    return parse_records(_read_text(path))


__all__ = [
    "serialize_record",
    "append_record",
    "parse_records",
    "read_records",
]
