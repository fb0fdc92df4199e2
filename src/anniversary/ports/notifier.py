"""Notification interface."""

from typing import Protocol


class Notifier(Protocol):
    """Interface for showing a reminder to the user."""

    def notify(self, title: str, body: str) -> None:
        """Show a notification. Delivery failures are logged, not raised."""
        ...
