"""Pure date arithmetic - no I/O dependencies.

Every date handled by the core is a naive datetime pinned to local noon, so
day differences never drift across daylight-saving transitions.
"""

import re
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

NOON = time(12, 0)
SECONDS_PER_DAY = 24 * 60 * 60

_DATE_INPUT = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_WEEKDAYS_KO = ("월", "화", "수", "목", "금", "토", "일")


def make_date(year: int, month: int, day: int) -> datetime:
    """Build a date pinned to local noon."""
    return datetime(year, month, day, NOON.hour, NOON.minute)


def pin_to_noon(value: date | datetime) -> datetime:
    """Pin a date or datetime to noon on its calendar day."""
    return make_date(value.year, value.month, value.day)


def start_of_today(now: datetime | None = None) -> datetime:
    """Today's date at noon."""
    return pin_to_noon(now or datetime.now())


def add_days(value: datetime, days: int) -> datetime:
    """Shift by a number of calendar days (may be negative)."""
    return pin_to_noon(value) + timedelta(days=days)


def add_years(value: datetime, years: int) -> datetime:
    """
    Shift by a number of years, keeping month and day.

    When the day does not exist in the target year (Feb 29), clamp to the
    last day of the target month instead of rolling into the next one.
    """
    return pin_to_noon(value + relativedelta(years=years))


def diff_in_days(a: datetime, b: datetime) -> int:
    """Calendar days from b to a, rounded."""
    return round((a - b).total_seconds() / SECONDS_PER_DAY)


def parse_date_input(text: str | None) -> datetime | None:
    """
    Parse a strict YYYY-MM-DD string.

    Returns None for empty input, anything that is not exactly YYYY-MM-DD,
    zero components, or a day that does not exist.
    """
    if not text:
        return None
    match = _DATE_INPUT.match(text.strip())
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    if not year or not month or not day:
        return None
    try:
        return make_date(year, month, day)
    except ValueError:
        return None


def format_ics_date(value: date | datetime) -> str:
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def format_date(value: date | datetime) -> str:
    """Format for display, e.g. '2024. 04. 09. (화)'."""
    weekday = _WEEKDAYS_KO[value.weekday()]
    return f"{value.year:04d}. {value.month:02d}. {value.day:02d}. ({weekday})"


def format_dday(value: datetime, base: datetime) -> str:
    """D-day label of value relative to base."""
    diff = diff_in_days(value, base)
    if diff == 0:
        return "D-Day"
    if diff > 0:
        return f"D-{diff}"
    return f"D+{abs(diff)}"
