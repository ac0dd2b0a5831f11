"""
Core data models API surface for Teavet.

This file re-exports model classes from domain-specific modules so imports
like `from teavet.models import X` keep working.
"""

from .record import (
    Status,
    LogRecord,
)
from .config import DEFAULT_LOG_FILENAME, LoggerConfig

__all__ = [
    # Record models
    "Status",
    "LogRecord",
    # Config models
    "DEFAULT_LOG_FILENAME",
    "LoggerConfig",
]
