"""
Internal diagnostics logger for Teavet.

This is the library's own logger, not the console channel records are
printed on. It stays quiet (INFO) unless verbose mode is switched on.
"""

import logging


logger = logging.getLogger("teavet")
logger.setLevel(logging.INFO)
logger.addHandler(logging.NullHandler())


__all__ = [
    "logger",
]
