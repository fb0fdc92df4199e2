"""Shared workflow layer between the CLI commands and the scheduler.

Each function loads what it needs through the adapters, runs the pure core
and hands the result back. The reference date is always passed in.
"""

import logging
from datetime import datetime
from pathlib import Path

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from .adapters.console_notifier import ConsoleNotifier
from .adapters.desktop_notifier import DesktopNotifier
from .adapters.json_settings import JsonSettingsStore
from .config import SETTINGS_FILE, Config
from .core.dates import start_of_today
from .core.events import Event, Settings, generate_events
from .core.ics import build_ics
from .core.reminders import Notification, expired_notification_keys, pending_notifications
from .ports.notifier import Notifier
from .ports.settings_store import SettingsStore, StoredSettings

logger = logging.getLogger(__name__)


def get_settings_store(config: Config) -> JsonSettingsStore:
    """Resolve the settings file from config."""
    if config.settings_file:
        return JsonSettingsStore(Path(config.settings_file).expanduser())
    return JsonSettingsStore(SETTINGS_FILE)


def get_notifier(config: Config) -> Notifier:
    """Resolve the notifier from config."""
    if config.notifier == "desktop":
        return DesktopNotifier()
    return ConsoleNotifier()


def build_settings(config: Config, stored: StoredSettings) -> Settings:
    """Combine configured milestones with the user-entered fields."""
    return Settings(
        start_date=stored.start_date,
        type=stored.type,
        inclusive=config.inclusive,
        counts=tuple(config.counts),
        years=tuple(config.years),
        holidays=tuple(config.holidays),
        years_ahead=config.years_ahead,
    )


def compute_events(
    config: Config,
    today: datetime,
    store: SettingsStore | None = None,
) -> list[Event]:
    """Load stored settings and generate a fresh event list."""
    store = store or get_settings_store(config)
    settings = build_settings(config, store.load())
    events = generate_events(settings, today)
    logger.debug(f"Generated {len(events)} events for {today:%Y-%m-%d}")
    return events


def update_settings(
    store: SettingsStore,
    start_date: str | None = None,
    label: str | None = None,
) -> StoredSettings:
    """Apply changed fields, persist, and return the new settings."""
    current = store.load()
    updated = StoredSettings(
        start_date=current.start_date if start_date is None else start_date,
        type=current.type if not label else label,
    )
    store.save(updated)
    return updated


def export_calendar(
    config: Config,
    today: datetime,
    path: Path | None = None,
    store: SettingsStore | None = None,
    now: datetime | None = None,
) -> tuple[int, Path]:
    """
    Write the .ics export for the current event list.

    Returns (events written, path). Nothing is written when there are no
    events.
    """
    path = path or Path(config.export_file).expanduser()
    events = compute_events(config, today, store)
    if not events:
        logger.info("No events to export")
        return 0, path

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(build_ics(events, now=now))
    logger.info(f"Exported {len(events)} events to {path}")
    return len(events), path


def dispatch_reminders(
    events: list[Event],
    today: datetime,
    notifier: Notifier,
    seen: set[str],
) -> list[Notification]:
    """Send today's reminders once each; records sent keys in seen."""
    sent = []
    for notification in pending_notifications(events, today, seen):
        notifier.notify(notification.title, notification.body)
        seen.add(notification.key)
        sent.append(notification)
    return sent


def run_reminder_cycle(
    config: Config,
    notifier: Notifier,
    seen: set[str],
    today: datetime | None = None,
    store: SettingsStore | None = None,
) -> list[Notification]:
    """Recompute events for today and dispatch what is due."""
    today = today or start_of_today()
    seen.difference_update(expired_notification_keys(seen, today))
    events = compute_events(config, today, store)
    sent = dispatch_reminders(events, today, notifier, seen)
    logger.info(f"Sent {len(sent)} reminder(s) for {today:%Y-%m-%d}")
    return sent


def create_scheduler(config: Config, notifier: Notifier, seen: set[str] | None = None) -> BlockingScheduler:
    """Schedule a daily reminder cycle at the configured time."""
    seen = set() if seen is None else seen
    scheduler = BlockingScheduler()

    hour, minute = map(int, config.notify_time.split(":"))
    scheduler.add_job(
        run_reminder_cycle,
        CronTrigger(hour=hour, minute=minute),
        args=[config, notifier, seen],
        id="daily_reminders",
    )
    logger.info(f"Scheduled daily reminders at {hour:02d}:{minute:02d}")
    return scheduler
