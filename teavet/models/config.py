"""
Configuration models for Teavet.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO


DEFAULT_LOG_FILENAME = "teavet.log"


@dataclass
class LoggerConfig:
    """
    Settings shared by the locator, persister and console.

    Everything defaults to the classic behavior: ``teavet.log`` in the
    process working directory, one-space JSON indent, colored stderr.
    """

    # File settings
    log_filename: str = DEFAULT_LOG_FILENAME
    directory: Optional[Path] = None  # None means os.getcwd() at call time
    indent: int = 1

    # File lifecycle
    create_on_start: bool = True
    create_missing: bool = False

    # Console settings
    use_color: bool = True
    stream: Optional[TextIO] = None  # Defaults to sys.stderr
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.log_filename:
            raise ValueError("log_filename is required")
        if self.indent < 0:
            raise ValueError("indent cannot be negative")
        if self.directory is not None:
            self.directory = Path(self.directory)


__all__ = [
    "DEFAULT_LOG_FILENAME",
    "LoggerConfig",
]
