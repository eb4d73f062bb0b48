"""Project habits onto monthly, weekly and daily calendar layouts.

The monthly grid only says whether *any* habit was done on a day; the weekly
and daily layouts keep one mark per habit.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, Union

import config
from dates import (
    add_days,
    add_months,
    days_in_month,
    first_weekday_offset,
    start_of_week,
    to_day_key,
)
from models import Habit, HabitId

WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


@dataclass
class DayCell:
    day: Optional[date] = None  # None for the leading blanks
    completed: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day is None

    @property
    def day_number(self) -> Optional[int]:
        return self.day.day if self.day else None


@dataclass
class HabitMark:
    habit_id: HabitId
    name: str
    completed: bool


@dataclass
class MonthView:
    year: int
    month: int
    title: str
    cells: List[DayCell] = field(default_factory=list)


@dataclass
class WeekDay:
    day: date
    weekday_name: str
    habits: List[HabitMark] = field(default_factory=list)


@dataclass
class WeekView:
    start: date
    title: str
    days: List[WeekDay] = field(default_factory=list)


@dataclass
class DayView:
    day: date
    title: str
    rows: List[HabitMark] = field(default_factory=list)


ViewModel = Union[MonthView, WeekView, DayView]


# ---------- Titles ----------
def _long_date(d: date) -> str:
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def _weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[(d.weekday() + 1) % 7]


# ---------- Projections ----------
def _marks_for(day: date, habits: Sequence[Habit]) -> List[HabitMark]:
    key = to_day_key(day)
    return [HabitMark(h.id, h.name, key in h.completed_dates) for h in habits]


def project_month(reference_date: date, habits: Sequence[Habit]) -> MonthView:
    year, month = reference_date.year, reference_date.month
    cells = [DayCell() for _ in range(first_weekday_offset(year, month))]
    for n in range(1, days_in_month(year, month) + 1):
        day = date(year, month, n)
        key = to_day_key(day)
        cells.append(DayCell(day, any(key in h.completed_dates for h in habits)))
    return MonthView(year, month, f"{MONTH_NAMES[month - 1]} {year}", cells)


def project_week(reference_date: date, habits: Sequence[Habit]) -> WeekView:
    start = start_of_week(reference_date)
    days = []
    for i in range(7):
        day = add_days(start, i)
        days.append(WeekDay(day, WEEKDAY_NAMES[i], _marks_for(day, habits)))
    return WeekView(start, f"Week of {_long_date(reference_date)}", days)


def project_day(reference_date: date, habits: Sequence[Habit]) -> DayView:
    title = f"{_weekday_name(reference_date)}, {_long_date(reference_date)}"
    return DayView(reference_date, title, _marks_for(reference_date, habits))


_PROJECTORS: Dict[str, Callable[[date, Sequence[Habit]], ViewModel]] = {
    "monthly": project_month,
    "weekly": project_week,
    "daily": project_day,
}


def project_view(view: str, reference_date: date, habits: Sequence[Habit]) -> ViewModel:
    if view not in _PROJECTORS:
        raise ValueError(f"Unknown view {view!r}; expected one of {config.VIEWS}")
    return _PROJECTORS[view](reference_date, habits)


def navigate(view: str, reference_date: date, direction: int) -> date:
    """Move the reference date one month, week or day forward (+1) or back (-1)."""
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or 1, got {direction!r}")
    if view == "monthly":
        return add_months(reference_date, direction)
    if view == "weekly":
        return add_days(reference_date, 7 * direction)
    if view == "daily":
        return add_days(reference_date, direction)
    raise ValueError(f"Unknown view {view!r}; expected one of {config.VIEWS}")
