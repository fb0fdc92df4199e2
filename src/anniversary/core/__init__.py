"""Functional core - pure business logic with no I/O."""

from .dates import add_days, add_years, diff_in_days, make_date, parse_date_input
from .events import HOLIDAY_CATALOG, Event, EventCategory, Holiday, Settings, generate_events
from .reminders import (
    Notification,
    due_this_week,
    due_today,
    expired_notification_keys,
    pending_notifications,
    upcoming,
)
from .ics import build_ics

__all__ = [
    # Dates
    "make_date",
    "add_days",
    "add_years",
    "diff_in_days",
    "parse_date_input",
    # Events
    "HOLIDAY_CATALOG",
    "Holiday",
    "Event",
    "EventCategory",
    "Settings",
    "generate_events",
    # Reminders
    "Notification",
    "due_today",
    "due_this_week",
    "upcoming",
    "pending_notifications",
    "expired_notification_keys",
    # Export
    "build_ics",
]
