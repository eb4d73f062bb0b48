"""HabitTracker owns the AppState and performs every mutation on it."""

import logging
from datetime import date
from typing import Callable, List, Optional

import config
from dates import DayLike, as_day, to_day_key
from export import snapshot_bytes
from models import AppState, Habit, HabitId, next_habit_id
from repo_json import JSONRepo
from streaks import compute_streak, longest_streak
from views import ViewModel, navigate, project_view

logger = logging.getLogger(__name__)

Listener = Callable[["HabitTracker"], None]


class HabitTracker:
    def __init__(self, repo: JSONRepo, today: Callable[[], date] = date.today):
        self.repo = repo
        self.today = today
        self.state: AppState = repo.load(today())
        self._listeners: List[Listener] = []

    # -------- Listeners --------
    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def _changed(self, persist: bool = True):
        if persist:
            self.repo.save(self.state)
        for listener in list(self._listeners):
            listener(self)

    # -------- Habits --------
    @property
    def habits(self) -> List[Habit]:
        return self.state.habits

    def get_habit(self, habit_id: HabitId) -> Habit:
        for habit in self.state.habits:
            if habit.id == habit_id:
                return habit
        raise KeyError(f"No habit with id {habit_id!r}")

    def add_habit(self, name: str) -> Optional[Habit]:
        """Append a new habit; blank names are ignored and return None."""
        name = (name or "").strip()
        if not name:
            return None
        habit = Habit(id=next_habit_id(self.state.habits), name=name)
        self.state.habits.append(habit)
        logger.info("Added habit %r (id=%s)", habit.name, habit.id)
        self._changed()
        return habit

    def set_completed(self, habit_id: HabitId, day: DayLike, done: bool) -> bool:
        habit = self.get_habit(habit_id)
        key = to_day_key(as_day(day))
        if done:
            habit.completed_dates.add(key)
        else:
            habit.completed_dates.discard(key)
        self._changed()
        return done

    def toggle_completion(self, habit_id: HabitId, day: DayLike) -> bool:
        """Flip one day for one habit and return the new completed flag."""
        habit = self.get_habit(habit_id)
        key = to_day_key(as_day(day))
        return self.set_completed(habit_id, key, key not in habit.completed_dates)

    # -------- Calendar --------
    def change_view(self, view: str):
        if view not in config.VIEWS:
            raise ValueError(f"Unknown view {view!r}; expected one of {config.VIEWS}")
        self.state.current_view = view
        self.state.current_date = self.today()
        self._changed()

    def navigate(self, direction: int):
        self.state.current_date = navigate(
            self.state.current_view, self.state.current_date, direction
        )
        # current_date is not restored on load, so there is nothing to save
        self._changed(persist=False)

    def projection(self) -> ViewModel:
        return project_view(self.state.current_view, self.state.current_date, self.state.habits)

    # -------- Derived values --------
    def streak(self, habit: Habit) -> int:
        return compute_streak(habit.completed_dates, self.today())

    def longest_streak(self, habit: Habit) -> int:
        return longest_streak(habit.completed_dates)

    def is_completed_today(self, habit: Habit) -> bool:
        return to_day_key(self.today()) in habit.completed_dates

    def export_snapshot(self) -> bytes:
        return snapshot_bytes(self.state)
