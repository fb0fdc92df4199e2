"""iCalendar export - pure serialization, no I/O."""

from datetime import datetime, timezone

from .dates import add_days, format_date, format_ics_date
from .events import REMINDER_DAYS, Event

CALENDAR_NAME = "기념일 알림"
PRODID = "-//Anniversary Buddy//KR//"
UID_DOMAIN = "anniversary-buddy"


def escape_text(value: str) -> str:
    """Escape commas, semicolons and line breaks for a TEXT property."""
    value = str(value).replace("\r\n", "\n").replace("\r", "\n")
    return value.replace(",", "\\,").replace(";", "\\;").replace("\n", "\\n")


def format_timestamp(now: datetime) -> str:
    """
    UTC timestamp in iCalendar form, e.g. 20240101T120000Z.

    Naive values are taken as local time.
    """
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y%m%dT%H%M%SZ")


def _event_lines(event: Event, index: int, stamp: str) -> list[str]:
    return [
        "BEGIN:VEVENT",
        f"UID:{stamp}-{index}@{UID_DOMAIN}",
        f"DTSTAMP:{stamp}",
        f"SUMMARY:{escape_text(event.title)}",
        f"DTSTART;VALUE=DATE:{format_ics_date(event.date)}",
        # All-day events end exclusively on the following day
        f"DTEND;VALUE=DATE:{format_ics_date(add_days(event.date, 1))}",
        f"DESCRIPTION:{escape_text('알림 날짜 ' + format_date(event.reminder_date))}",
        "BEGIN:VALARM",
        f"TRIGGER:-P{REMINDER_DAYS}D",
        "ACTION:DISPLAY",
        f"DESCRIPTION:{escape_text(event.title + ' 알림')}",
        "END:VALARM",
        "END:VEVENT",
    ]


def build_ics(events: list[Event], now: datetime | None = None) -> str:
    """
    Serialize events into a VCALENDAR document.

    One all-day VEVENT per event, in list order, each with a display alarm
    a week ahead. UIDs combine the generation timestamp with the event's
    position, so they are only unique within one export.
    """
    stamp = format_timestamp(now or datetime.now(timezone.utc))
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{CALENDAR_NAME}",
    ]
    for index, event in enumerate(events):
        lines.extend(_event_lines(event, index, stamp))
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines)
