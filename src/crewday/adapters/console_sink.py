"""Console conflict sink."""

import click


class ConsoleConflictSink:
    """
    Prints conflict messages to the terminal.

    Implements ConflictSink protocol.
    """

    def __init__(self, err: bool = False):
        self.err = err

    def notify_conflict(self, message: str) -> None:
        click.echo(f"Error: {message}", err=self.err)
