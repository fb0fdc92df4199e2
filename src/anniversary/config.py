"""Configuration management for Anniversary Mate."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.events import DEFAULT_COUNTS, DEFAULT_YEARS, DEFAULT_YEARS_AHEAD, HOLIDAY_CATALOG

logger = logging.getLogger(__name__)

ANNIVERSARY_HOME = Path(os.environ.get("ANNIVERSARY_HOME", Path.home() / ".anniversary"))
CONFIG_FILE = ANNIVERSARY_HOME / "anniversary.conf"
SETTINGS_FILE = ANNIVERSARY_HOME / "settings.json"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


@dataclass
class Config:
    """Anniversary Mate configuration."""

    inclusive: bool = True
    counts: list[int] = field(default_factory=lambda: list(DEFAULT_COUNTS))
    years: list[int] = field(default_factory=lambda: list(DEFAULT_YEARS))
    holidays: list[str] = field(default_factory=lambda: list(HOLIDAY_CATALOG))
    years_ahead: int = DEFAULT_YEARS_AHEAD
    notify_time: str = "09:00"
    notifier: str = "console"
    export_file: str = "anniversary-reminders.ics"
    settings_file: str = ""


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_int_list(key: str, value: str) -> list[int] | None:
    try:
        return [int(v.strip()) for v in value.split(",") if v.strip()]
    except ValueError:
        logger.warning(f"Invalid {key.upper()} value: {value!r}")
        return None


def _parse_bool(key: str, value: str) -> bool | None:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid {key.upper()} value: {value!r}")
    return None


def _parse_time(key: str, value: str) -> str | None:
    hour, _, minute = value.partition(":")
    try:
        if 0 <= int(hour) < 24 and 0 <= int(minute) < 60:
            return f"{int(hour):02d}:{int(minute):02d}"
    except ValueError:
        pass
    logger.warning(f"Invalid {key.upper()} value: {value!r}")
    return None


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from anniversary.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "inclusive":
                parsed = _parse_bool(key, value)
                if parsed is not None:
                    config.inclusive = parsed
            case "counts":
                counts = _parse_int_list(key, value)
                if counts is not None:
                    config.counts = counts
            case "years":
                years = _parse_int_list(key, value)
                if years is not None:
                    config.years = years
            case "holidays":
                config.holidays = [h.strip().lower() for h in value.split(",") if h.strip()]
                unknown = [h for h in config.holidays if h not in HOLIDAY_CATALOG]
                if unknown:
                    logger.warning(f"Unknown holidays will be ignored: {', '.join(unknown)}")
            case "years_ahead":
                try:
                    years_ahead = int(value)
                except ValueError:
                    years_ahead = 0
                if years_ahead >= 1:
                    config.years_ahead = years_ahead
                else:
                    logger.warning(f"Invalid YEARS_AHEAD value: {value!r}")
            case "notify_time":
                notify_time = _parse_time(key, value)
                if notify_time is not None:
                    config.notify_time = notify_time
            case "notifier":
                if value.lower() in ("console", "desktop"):
                    config.notifier = value.lower()
                else:
                    logger.warning(f"Unknown NOTIFIER {value!r}, using {config.notifier}")
            case "export_file":
                config.export_file = value
            case "settings_file":
                config.settings_file = value

    return config
