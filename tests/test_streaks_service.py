"""Tests for the streaks microservice request handling."""

from __future__ import annotations

from pathlib import Path

import microservices.streaks_service as service
from microservices.streaks_service import process_request


class TestProcessRequest:
    def test_current_and_longest(self):
        response = process_request(
            {"dates": ["2024-06-01", "2024-06-02", "2024-06-03", "2024-06-09"], "today": "2024-06-10"}
        )
        assert response == {"ok": True, "result": {"current_streak": 1, "longest_streak": 3}}

    def test_invalid_dates_are_ignored(self):
        response = process_request({"dates": ["2024-06-10", "nope", 5], "today": "2024-06-10"})
        assert response["result"]["current_streak"] == 1

    def test_missing_dates(self):
        assert process_request({}) == {"ok": False, "error": "Request must contain a 'dates' array."}

    def test_non_dict_payload(self):
        assert process_request(["2024-06-10"])["ok"] is False

    def test_no_valid_dates(self):
        assert process_request({"dates": ["nope"]}) == {"ok": False, "error": "No valid dates provided."}

    def test_bad_today(self):
        response = process_request({"dates": ["2024-06-10"], "today": "tomorrow"})
        assert response["ok"] is False
        assert "today" in response["error"]


def test_launch_instructions_match_entry_point():
    pyproject = (Path(__file__).resolve().parents[1] / "pyproject.toml").read_text(encoding="utf-8")
    assert 'habitforge-streaks = "microservices.streaks_service:main"' in pyproject
    assert callable(service.main)
    assert "python -m microservices.streaks_service" in service.__doc__
