"""JSON file settings storage adapter."""

import json
import logging
from pathlib import Path

from anniversary.ports.settings_store import StoredSettings

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class JsonSettingsStore:
    """
    JSON file settings storage.

    Implements SettingsStore protocol. Writes a versioned envelope:
    {"v": 1, "settings": {"startDate": "...", "type": "..."}}
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> StoredSettings:
        """Load settings, falling back to defaults on any problem."""
        if not self.path.exists():
            return StoredSettings()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return StoredSettings()

        # bool is an int subclass and 1.0 == 1, so compare the exact type
        if not isinstance(data, dict) or type(data.get("v")) is not int or data["v"] != SCHEMA_VERSION:
            logger.warning(f"Ignoring settings file {self.path} with unsupported version")
            return StoredSettings()

        payload = data.get("settings")
        if not isinstance(payload, dict):
            logger.warning(f"Ignoring settings file {self.path} without settings")
            return StoredSettings()

        defaults = StoredSettings()
        start_date = payload.get("startDate")
        label = payload.get("type")
        return StoredSettings(
            start_date=start_date if isinstance(start_date, str) else defaults.start_date,
            type=label if isinstance(label, str) and label else defaults.type,
        )

    def save(self, settings: StoredSettings) -> None:
        """Write settings to file."""
        payload = {
            "startDate": settings.start_date or "",
            "type": settings.type or StoredSettings().type,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"v": SCHEMA_VERSION, "settings": payload}, ensure_ascii=False),
            encoding="utf-8",
        )
