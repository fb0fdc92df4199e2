"""Adapters - I/O implementations of ports."""

from .json_settings import JsonSettingsStore
from .console_notifier import ConsoleNotifier
from .desktop_notifier import DesktopNotifier

__all__ = [
    "JsonSettingsStore",
    "ConsoleNotifier",
    "DesktopNotifier",
]
