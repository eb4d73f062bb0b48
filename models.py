import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Set, Union

import config
from dates import parse_day_key, to_day_key

logger = logging.getLogger(__name__)

HabitId = Union[int, str]


@dataclass
class Habit:
    id: HabitId
    name: str
    completed_dates: Set[str] = field(default_factory=set)


@dataclass
class AppState:
    habits: List[Habit] = field(default_factory=list)
    current_view: str = config.DEFAULT_VIEW
    current_date: date = field(default_factory=date.today)


def _sort_key(day_key: str):
    try:
        return (0, parse_day_key(day_key), day_key)
    except (TypeError, ValueError, AttributeError):
        return (1, date.min, str(day_key))


def sorted_day_keys(day_keys) -> List[str]:
    """Chronological order; malformed keys go last."""
    return sorted(day_keys, key=_sort_key)


def next_habit_id(habits: List[Habit]) -> int:
    ids = [h.id for h in habits if isinstance(h.id, int) and not isinstance(h.id, bool)]
    return max(ids, default=0) + 1


# -------- Serialization --------
def habit_to_dict(habit: Habit) -> Dict[str, Any]:
    return {
        "id": habit.id,
        "name": habit.name,
        "completedDates": sorted_day_keys(habit.completed_dates),
    }


def habit_from_dict(raw: Dict[str, Any]) -> Habit:
    return Habit(
        id=raw["id"],
        name=str(raw.get("name", "")),
        completed_dates=set(raw.get("completedDates") or []),
    )


def state_to_dict(state: AppState) -> Dict[str, Any]:
    return {
        "habits": [habit_to_dict(h) for h in state.habits],
        "currentView": state.current_view,
        "currentDate": to_day_key(state.current_date),
    }


def state_from_dict(raw: Dict[str, Any], today: date) -> AppState:
    """Build an AppState from the persisted shape.

    ``currentDate`` is never restored; the view always reopens on ``today``.
    """
    view = raw.get("currentView", config.DEFAULT_VIEW)
    if view not in config.VIEWS:
        logger.warning("Unknown view %r in stored data, using %s", view, config.DEFAULT_VIEW)
        view = config.DEFAULT_VIEW
    habits = [habit_from_dict(h) for h in raw.get("habits") or []]
    return AppState(habits=habits, current_view=view, current_date=today)
