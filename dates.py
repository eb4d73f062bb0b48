"""Calendar-day helpers. Everything here works on naive local dates."""

import calendar
from datetime import date, datetime, timedelta
from typing import Union

DayLike = Union[date, datetime, str]


def normalize_to_day(timestamp: Union[date, datetime]) -> date:
    """Drop the time of day; plain dates pass through unchanged."""
    if isinstance(timestamp, datetime):
        return timestamp.date()
    return timestamp


def to_day_key(value: Union[date, datetime]) -> str:
    return normalize_to_day(value).isoformat()


def parse_day_key(key: str) -> date:
    """Inverse of to_day_key. Raises ValueError for anything not YYYY-MM-DD."""
    return datetime.strptime(key.strip(), "%Y-%m-%d").date()


def as_day(value: DayLike) -> date:
    if isinstance(value, str):
        return parse_day_key(value)
    return normalize_to_day(value)


def add_days(day: date, n: int) -> date:
    return day + timedelta(days=n)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(day: date, n: int) -> date:
    # day-of-month is clamped, e.g. Jan 31 + 1 -> Feb 28/29
    index = day.year * 12 + (day.month - 1) + n
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, days_in_month(year, month)))


def first_weekday_offset(year: int, month: int) -> int:
    """Blank cells before the 1st in a Sunday-first week (0..6)."""
    return (date(year, month, 1).weekday() + 1) % 7


def start_of_week(day: date) -> date:
    """The Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)
