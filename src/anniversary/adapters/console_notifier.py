"""Console notifier adapter."""

import click


class ConsoleNotifier:
    """
    Prints notifications to the terminal.

    Implements Notifier protocol.
    """

    def __init__(self, err: bool = False):
        self.err = err

    def notify(self, title: str, body: str) -> None:
        click.echo(f"{title}: {body}", err=self.err)
