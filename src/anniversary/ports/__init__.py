"""Ports - interfaces/protocols for external dependencies."""

from .settings_store import SettingsStore, StoredSettings
from .notifier import Notifier

__all__ = [
    "SettingsStore",
    "StoredSettings",
    "Notifier",
]
