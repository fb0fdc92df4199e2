"""Pure anniversary event generation - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import MAXYEAR, date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Iterable

from .dates import add_days, add_years, make_date, parse_date_input, pin_to_noon

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "연애 시작"
DEFAULT_COUNTS = (100, 200, 300, 500, 1000)
DEFAULT_YEARS = (1, 2, 3, 5, 10)
DEFAULT_YEARS_AHEAD = 5
REMINDER_DAYS = 7

# Last day whose all-day entry can still end on the following day.
LAST_EVENT_DATE = make_date(MAXYEAR, 12, 30)


@dataclass(frozen=True)
class Holiday:
    """A fixed annual date."""

    key: str
    label: str
    month: int
    day: int


HOLIDAY_CATALOG = MappingProxyType(
    {
        h.key: h
        for h in (
            Holiday("valentine", "발렌타인데이", 2, 14),
            Holiday("white", "화이트데이", 3, 14),
            Holiday("pepero", "빼빼로데이", 11, 11),
            Holiday("christmas", "크리스마스", 12, 25),
        )
    }
)


class EventCategory(Enum):
    """What produced an event."""

    COUNT = "count"  # Nth day since the start date
    YEAR = "year"  # Nth anniversary
    HOLIDAY = "holiday"


@dataclass(frozen=True)
class Settings:
    """Inputs for one generation pass."""

    start_date: str | date | None = ""
    type: str = DEFAULT_TYPE
    inclusive: bool = True
    counts: tuple[int, ...] = DEFAULT_COUNTS
    years: tuple[int, ...] = DEFAULT_YEARS
    holidays: tuple[str, ...] = tuple(HOLIDAY_CATALOG)
    years_ahead: int = DEFAULT_YEARS_AHEAD

    def resolve_start_date(self) -> datetime | None:
        """The start date pinned to noon, or None if absent or invalid."""
        if isinstance(self.start_date, str):
            return parse_date_input(self.start_date)
        if isinstance(self.start_date, date):
            return pin_to_noon(self.start_date)
        return None


@dataclass(frozen=True)
class Event:
    """A generated anniversary occurrence."""

    id: str
    title: str
    category: EventCategory
    date: datetime
    reminder_date: datetime


def _milestones(values: Iterable[int]) -> list[int]:
    """Deduplicated positive milestones, ascending."""
    return sorted({v for v in values if v > 0})


def _count_events(settings: Settings, start: datetime) -> list[tuple[str, str, EventCategory, datetime]]:
    drafts = []
    for count in _milestones(settings.counts):
        offset = count - 1 if settings.inclusive else count
        try:
            event_date = add_days(start, offset)
        except (OverflowError, ValueError):
            logger.debug(f"Skipping count-{count}: past the last representable date")
            continue
        drafts.append((f"count-{count}", f"{settings.type} {count}일", EventCategory.COUNT, event_date))
    return drafts


def _year_events(settings: Settings, start: datetime) -> list[tuple[str, str, EventCategory, datetime]]:
    drafts = []
    for year in _milestones(settings.years):
        try:
            event_date = add_years(start, year)
        except (OverflowError, ValueError):
            logger.debug(f"Skipping year-{year}: past the last representable date")
            continue
        drafts.append((f"year-{year}", f"{settings.type} {year}주년", EventCategory.YEAR, event_date))
    return drafts


def _holiday_events(settings: Settings, today: datetime) -> list[tuple[str, str, EventCategory, datetime]]:
    holidays = []
    for key in dict.fromkeys(settings.holidays):
        holiday = HOLIDAY_CATALOG.get(key)
        if holiday is None:
            logger.debug(f"Skipping unknown holiday key: {key!r}")
            continue
        holidays.append(holiday)

    drafts = []
    last_year = min(today.year + settings.years_ahead, MAXYEAR)
    for year in range(today.year, last_year + 1):
        for holiday in holidays:
            drafts.append(
                (
                    f"{holiday.key}-{year}",
                    holiday.label,
                    EventCategory.HOLIDAY,
                    make_date(year, holiday.month, holiday.day),
                )
            )
    return drafts


def _window_end(today: datetime, years_ahead: int) -> datetime:
    try:
        return min(add_years(today, years_ahead), LAST_EVENT_DATE)
    except (OverflowError, ValueError):
        return LAST_EVENT_DATE


def generate_events(settings: Settings, today: date | datetime) -> list[Event]:
    """
    Generate the visible anniversary events for a reference date.

    Pure function - no I/O, no clock. Count and year milestones need a
    valid start date; holidays are generated regardless. Events outside
    [today, today + years_ahead years] are dropped and the rest are sorted
    by date, keeping emission order for ties. Milestones that fall past the
    last representable date are skipped.
    """
    if settings.years_ahead < 1:
        raise ValueError(f"years_ahead must be positive, got {settings.years_ahead}")

    today = pin_to_noon(today)
    end_range = _window_end(today, settings.years_ahead)

    drafts = []
    start = settings.resolve_start_date()
    if start is not None:
        drafts.extend(_count_events(settings, start))
        drafts.extend(_year_events(settings, start))
    drafts.extend(_holiday_events(settings, today))

    events = []
    for event_id, title, category, event_date in drafts:
        if not today <= event_date <= end_range:
            continue
        try:
            reminder_date = add_days(event_date, -REMINDER_DAYS)
        except (OverflowError, ValueError):
            logger.debug(f"Skipping {event_id}: reminder falls before the first representable date")
            continue
        events.append(
            Event(id=event_id, title=title, category=category, date=event_date, reminder_date=reminder_date)
        )
    return sort_events_by_date(events)


def sort_events_by_date(events: list[Event]) -> list[Event]:
    """Sort events by date, keeping the existing order for ties."""
    return sorted(events, key=lambda e: e.date)
