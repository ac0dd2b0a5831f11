"""
Error types and error conversion helpers for Teavet.
"""

import functools
from typing import Callable, Optional, Tuple, Type

from .logger import logger


####
##      EXCEPTION HIERARCHY
#####
class TeavetError(Exception):
    """Base error for everything that can go wrong while persisting a record."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class WorkingDirectoryError(TeavetError):
    """The working directory could not be resolved."""


class FileOpenError(TeavetError):
    """The log file could not be created or opened."""


class SerializationError(TeavetError):
    """A record could not be converted to or from JSON."""


class WriteError(TeavetError):
    """The serialized record could not be written to the log file."""


class LogFileNotFoundError(TeavetError):
    """The log file does not exist and was not supposed to be created."""


####
##      SEVERITY ESCALATION
#####
class FatalLogged(SystemExit):
    """
    Raised after a fatal record has been persisted and printed.

    Being a SystemExit it ends the process with status 1 when left uncaught.
    """

    def __init__(self, record):
        super().__init__(1)
        self.record = record


class LogPanic(RuntimeError):
    """Raised after a panic record has been persisted and printed."""

    def __init__(self, record):
        super().__init__(record.fault or record.message or record.status or "panic")
        self.record = record


####
##      DECORATORS
#####
def handle_io_error(
    error_cls: Type[TeavetError],
    message: str,
    catch: Tuple[Type[BaseException], ...] = (OSError,),
) -> Callable:
    """
    Convert low-level errors raised by the wrapped call into `error_cls`.

    Errors that already are TeavetError pass through untouched.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except TeavetError:
                raise
            except catch as e:
                logger.error(f"{message}: {e}")
                raise error_cls(message, e) from e
        return wrapper

    return decorator


__all__ = [
    "TeavetError",
    "WorkingDirectoryError",
    "FileOpenError",
    "SerializationError",
    "WriteError",
    "LogFileNotFoundError",
    "FatalLogged",
    "LogPanic",
    "handle_io_error",
]
