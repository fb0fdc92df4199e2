"""Pure reminder views over generated events - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

from .dates import diff_in_days, format_date, format_ics_date, pin_to_noon
from .events import Event

UPCOMING_PREVIEW_COUNT = 6
WEEK_DAYS = 7
NOTIFICATION_TITLE = "오늘 알림"


@dataclass(frozen=True)
class Notification:
    """A reminder ready to hand to a notifier."""

    key: str
    title: str
    body: str


def is_within_days(value: datetime, base: datetime, start: int, end: int) -> bool:
    """Check if value falls within [start, end] days after base."""
    return start <= diff_in_days(value, base) <= end


def due_today(events: list[Event], today: datetime) -> list[Event]:
    """Events whose reminder date is today."""
    today = pin_to_noon(today)
    return [e for e in events if diff_in_days(e.reminder_date, today) == 0]


def due_this_week(events: list[Event], today: datetime) -> list[Event]:
    """Events whose reminder arrives today or within the next 7 days."""
    today = pin_to_noon(today)
    return [e for e in events if is_within_days(e.reminder_date, today, 0, WEEK_DAYS)]


def upcoming(events: list[Event], limit: int | None = UPCOMING_PREVIEW_COUNT) -> tuple[list[Event], int]:
    """
    Preview of the upcoming list.

    Returns the first `limit` events and how many were left out.
    A limit of None shows everything.
    """
    if limit is None or len(events) <= limit:
        return list(events), 0
    return events[:limit], len(events) - limit


def reminder_status(event: Event, today: datetime) -> str:
    """Whether the reminder has already passed."""
    if diff_in_days(event.reminder_date, pin_to_noon(today)) < 0:
        return "알림 지남"
    return "알림 예정"


def notification_key(event: Event) -> str:
    """Identifies one reminder occurrence for de-duplication."""
    return f"{event.id}-{format_ics_date(event.reminder_date)}"


def pending_notifications(
    events: list[Event],
    today: datetime,
    seen: set[str] | frozenset[str] = frozenset(),
) -> list[Notification]:
    """Notifications for today's reminders that have not been sent yet."""
    pending = []
    for event in due_today(events, today):
        key = notification_key(event)
        if key in seen:
            continue
        pending.append(
            Notification(
                key=key,
                title=NOTIFICATION_TITLE,
                body=f"{event.title} ({format_date(event.date)})",
            )
        )
    return pending


def expired_notification_keys(seen: set[str] | frozenset[str], today: datetime) -> set[str]:
    """Keys whose reminder date is before today; they can never be pending again."""
    cutoff = format_ics_date(today)
    return {key for key in seen if key.rpartition("-")[2] < cutoff}
