"""Current and longest streak calculations over a habit's completed days."""

from datetime import date, timedelta
from typing import Iterable, Set

from dates import DayLike, as_day, parse_day_key


def _parse_days(day_keys: Iterable[str]) -> Set[date]:
    """Parse DayKeys into dates, skipping anything malformed."""
    parsed = set()
    for key in day_keys:
        try:
            parsed.add(parse_day_key(key))
        except (TypeError, ValueError, AttributeError):
            continue
    return parsed


def _count_backward_streak(days: Set[date], start: date) -> int:
    """Count consecutive days backward from ``start`` (inclusive)."""
    length = 0
    curr = start
    while curr in days:
        length += 1
        curr -= timedelta(days=1)
    return length


def _count_forward_streak(days: Set[date], start: date) -> int:
    length = 1
    curr = start
    while curr + timedelta(days=1) in days:
        curr += timedelta(days=1)
        length += 1
    return length


def compute_streak(completed_dates: Iterable[str], today: DayLike) -> int:
    """Length of the unbroken run ending today or yesterday.

    A run whose latest day is yesterday is still alive (grace day); anything
    older counts as broken and yields 0.
    """
    days = _parse_days(completed_dates)
    if not days:
        return 0
    today = as_day(today)
    latest = max(days)
    if latest not in (today, today - timedelta(days=1)):
        return 0
    return _count_backward_streak(days, latest)


def longest_streak(completed_dates: Iterable[str]) -> int:
    """Longest run of consecutive completed days anywhere in the history."""
    days = _parse_days(completed_dates)
    longest = 0
    for day in days:
        if day - timedelta(days=1) in days:
            continue  # not the start of a run
        longest = max(longest, _count_forward_streak(days, day))
    return longest
