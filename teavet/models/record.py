"""
Log record models for Teavet.

This module contains the immutable record written to the log file and the
enumeration of the status labels the console formatter knows about.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Status(Enum):
    """Known status labels. Anything else renders with the default color."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"
    WARNING = "warning"
    FATAL = "fatal"
    PANIC = "panic"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Status"]:
        """Case-insensitive lookup, returns None for unknown labels."""

        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class LogRecord:
    """Immutable representation of a single log entry."""

    filename: str
    line: str
    timestamp: str
    status: Optional[str] = None
    message: Optional[str] = None
    fault: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Record filename is required")

        # Empty strings mean "absent"
        for name in ('status', 'message', 'fault'):
            if getattr(self, name) == "":
                object.__setattr__(self, name, None)

        if not isinstance(self.line, str):
            object.__setattr__(self, 'line', str(self.line))

    @property
    def is_minimal(self) -> bool:
        return self.status is None and self.message is None and self.fault is None

    @property
    def severity(self) -> Optional[Status]:
        return Status.parse(self.status)

    def to_dict(self) -> Dict[str, Any]:
        """Build the persisted JSON shape, omitting absent optional objects."""

        data: Dict[str, Any] = {
            "filename": self.filename,
            "line": self.line,
            "timestamp": self.timestamp,
        }
        if self.status is not None:
            data["logger_status"] = {"status": self.status}
        if self.message is not None:
            data["logger_message"] = {"message": self.message}
        if self.fault is not None:
            data["logger_fault"] = {"fault": self.fault}
        return data

    def to_json(self, indent: int = 1) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogRecord":
        """Rebuild a record from its persisted shape."""

        def _nested(key: str, field_name: str) -> Optional[str]:
            value = data.get(key) or {}
            return value.get(field_name)

        return cls(
            filename=data["filename"],
            line=str(data["line"]),
            timestamp=data["timestamp"],
            status=_nested("logger_status", "status"),
            message=_nested("logger_message", "message"),
            fault=_nested("logger_fault", "fault"),
        )


__all__ = [
    "Status",
    "LogRecord",
]
