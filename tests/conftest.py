"""Shared fixtures: a fixed "today", a temp-dir repo and a tracker factory."""

from __future__ import annotations

from datetime import date

import pytest

from models import Habit
from repo_json import JSONRepo
from tracker import HabitTracker

TODAY = date(2024, 6, 10)  # a Monday


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def data_path(tmp_path):
    return str(tmp_path / "data" / "habitforge.json")


@pytest.fixture
def repo(data_path):
    return JSONRepo(data_path)


@pytest.fixture
def tracker_factory(repo):
    """Build a HabitTracker whose clock is pinned to the given day."""

    def _make(day: date = TODAY) -> HabitTracker:
        return HabitTracker(repo, today=lambda: day)

    return _make


@pytest.fixture
def tracker(tracker_factory):
    return tracker_factory()


@pytest.fixture
def habit_factory():
    def _make(habit_id=1, name="Read", dates=()):
        return Habit(id=habit_id, name=name, completed_dates=set(dates))

    return _make
