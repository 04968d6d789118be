"""Tests for conflict sink adapters."""

import logging

from crewday.adapters.console_sink import ConsoleConflictSink
from crewday.adapters.log_sink import LoggingConflictSink


class TestConsoleConflictSink:
    def test_prints_message(self, capsys):
        ConsoleConflictSink().notify_conflict('Task conflicts with existing task "Exercise".')
        out = capsys.readouterr().out
        assert out == 'Error: Task conflicts with existing task "Exercise".\n'

    def test_stderr(self, capsys):
        ConsoleConflictSink(err=True).notify_conflict("clash")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: clash" in captured.err


class TestLoggingConflictSink:
    def test_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="crewday.conflicts"):
            LoggingConflictSink().notify_conflict("clash")
        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "clash"

    def test_custom_logger_and_level(self, caplog):
        logger = logging.getLogger("test.sink")
        with caplog.at_level(logging.INFO, logger="test.sink"):
            LoggingConflictSink(logger=logger, level=logging.INFO).notify_conflict("clash")
        assert [(r.name, r.levelno) for r in caplog.records] == [("test.sink", logging.INFO)]
