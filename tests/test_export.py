"""Tests for the pretty-printed JSON export."""

from __future__ import annotations

import json

from export import snapshot_bytes, write_export
from models import AppState, Habit


def make_state(today):
    return AppState(
        habits=[Habit(1, "Read", {"2024-06-10", "2024-06-09"}), Habit(2, "Méditer")],
        current_view="daily",
        current_date=today,
    )


def test_snapshot_is_indented_utf8_json(today):
    raw = snapshot_bytes(make_state(today))
    text = raw.decode("utf-8")
    assert text.startswith("{\n  \"habits\"")
    assert "Méditer" in text
    doc = json.loads(text)
    assert doc["habits"][0]["completedDates"] == ["2024-06-09", "2024-06-10"]
    assert doc["habits"][1]["completedDates"] == []
    assert doc["currentView"] == "daily"


def test_write_export(tmp_path, today):
    target = write_export(make_state(today), tmp_path / "habitforge_data.json")
    assert target.read_bytes() == snapshot_bytes(make_state(today))
