"""Adapters - I/O implementations of ports."""

from .console_sink import ConsoleConflictSink
from .log_sink import LoggingConflictSink

__all__ = [
    "ConsoleConflictSink",
    "LoggingConflictSink",
]
