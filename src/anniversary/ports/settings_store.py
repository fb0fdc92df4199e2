"""Settings storage interface."""

from dataclasses import dataclass
from typing import Protocol

from anniversary.core.events import DEFAULT_TYPE


@dataclass(frozen=True)
class StoredSettings:
    """The user-entered fields that survive between sessions."""

    start_date: str = ""
    type: str = DEFAULT_TYPE


class SettingsStore(Protocol):
    """Interface for loading and saving user-entered settings."""

    def load(self) -> StoredSettings:
        """Load settings. Falls back to defaults, never raises."""
        ...

    def save(self, settings: StoredSettings) -> None:
        """Persist settings."""
        ...
