"""Conflict notification interface."""

from typing import Protocol


class ConflictSink(Protocol):
    """Receives one message per rejected insertion, synchronously."""

    def notify_conflict(self, message: str) -> None:
        ...
