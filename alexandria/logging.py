"""Logging utilities with elapsed-time stamps."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO

import alexandria.config as cfg


class Logger:
    """Library logger with timestamps relative to its creation."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._stream = stream
        self._count: int = 0

    @property
    def count(self) -> int:
        """Number of lines written so far."""
        return self._count

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp."""
        if not cfg.LOG_ENABLED:
            return
        line = f"[{self.elapsed:7.3f}s] {msg}\n"
        out = self._stream or sys.stdout
        try:
            out.write(line)
            out.flush()
        except Exception:
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except Exception:
                pass
        self._count += 1

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_logger(logger: Optional[Logger]) -> None:
    """Replace the global logger (None recreates a default one on next use)."""
    global _logger
    _logger = logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)

