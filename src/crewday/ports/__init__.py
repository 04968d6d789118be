"""Ports - interfaces for things the schedule talks to."""

from .conflict_sink import ConflictSink

__all__ = [
    "ConflictSink",
]
