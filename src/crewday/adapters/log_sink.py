"""Logging conflict sink."""

import logging


class LoggingConflictSink:
    """
    Writes conflict messages to the schedule log.

    Implements ConflictSink protocol.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger("crewday.conflicts")
        self.level = level

    def notify_conflict(self, message: str) -> None:
        self.logger.log(self.level, message)
