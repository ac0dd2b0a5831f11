"""
Discovery and creation of the log file.
"""

import os
from pathlib import Path
from typing import Optional, Union

from ..models import DEFAULT_LOG_FILENAME
from ..infrastructure.error_handler import (
    WorkingDirectoryError, FileOpenError, LogFileNotFoundError, handle_io_error
)
from ..infrastructure.logger import logger


PathLike = Union[str, os.PathLike]


@handle_io_error(WorkingDirectoryError, "Unable to get working directory")
def resolve_directory(directory: Optional[PathLike] = None) -> Path:
    """Return `directory` as an absolute path, or the working directory."""

    if directory is not None:
        return Path(directory).resolve()
    return Path(os.getcwd())


def log_file_path(
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME
) -> Path:
    return resolve_directory(directory) / filename


@handle_io_error(FileOpenError, "Unable to create/append/open file")
def ensure_log_file(
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME
) -> Path:
    """
    Create the log file if it is missing and return its path.

    The file is opened in append mode, so existing content is never
    truncated.
    """
    path = log_file_path(directory, filename)
    existed = path.exists()

    with open(path, "a", encoding="utf-8"):
        pass

    if not existed:
        logger.debug(f"Created log file {path}")
    return path


def locate_log_file(
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME
) -> Path:
    """
    Return the path of an existing log file.

    Raises:
        LogFileNotFoundError: if the file has not been created yet
    """
    path = log_file_path(directory, filename)
    if not path.is_file():
        raise LogFileNotFoundError(f"Unable to find the log file: {path}")
    return path


@handle_io_error(FileOpenError, "Unable to remove log file")
def remove_log_file(
    directory: Optional[PathLike] = None,
    filename: str = DEFAULT_LOG_FILENAME
) -> bool:
    """Delete the log file. Returns False when there was nothing to delete."""

    path = log_file_path(directory, filename)
    if not path.exists():
        return False
    path.unlink()
    logger.debug(f"Removed log file {path}")
    return True


__all__ = [
    "resolve_directory",
    "log_file_path",
    "ensure_log_file",
    "locate_log_file",
    "remove_log_file",
]
