"""Tests for the streaks client: failure handling and the per-habit snapshot."""

from __future__ import annotations

import threading

import pytest
import zmq

import config
import microservice_clients
from microservice_clients import NO_COMPLETIONS, gather_streak_snapshot, streaks_for_dates


@pytest.fixture
def reply_server():
    """Start a one-shot REP socket that answers with raw bytes (or never answers)."""
    context = zmq.Context.instance()
    sockets, threads = [], []

    def _start(raw_reply=None):
        socket = context.socket(zmq.REP)
        socket.setsockopt(zmq.LINGER, 0)
        socket.setsockopt(zmq.RCVTIMEO, 5000)
        port = socket.bind_to_random_port("tcp://127.0.0.1")

        def serve():
            try:
                socket.recv()
                if raw_reply is not None:
                    socket.send(raw_reply)
            except zmq.error.Again:
                pass

        thread = threading.Thread(target=serve, daemon=True)
        thread.start()
        sockets.append(socket)
        threads.append(thread)
        return port

    yield _start
    for thread in threads:
        thread.join(timeout=5)
    for socket in sockets:
        socket.close()


@pytest.fixture(autouse=True)
def short_timeout(monkeypatch):
    monkeypatch.setattr(config, "SERVICE_TIMEOUT_MS", 300)


class TestStreaksForDates:
    def test_skips_call_without_completions(self):
        assert streaks_for_dates([]) == (None, NO_COMPLETIONS)

    def test_successful_reply(self, reply_server):
        port = reply_server(b'{"ok": true, "result": {"current_streak": 2, "longest_streak": 5}}')
        result, error = streaks_for_dates(["2024-06-10"], port=port)
        assert error is None
        assert result == {"current_streak": 2, "longest_streak": 5}

    def test_service_rejection_is_returned(self, reply_server):
        port = reply_server(b'{"ok": false, "error": "No valid dates provided."}')
        assert streaks_for_dates(["2024-06-10"], port=port) == (None, "No valid dates provided.")

    def test_timeout_returns_error(self, reply_server):
        port = reply_server(None)
        result, error = streaks_for_dates(["2024-06-10"], port=port)
        assert result is None
        assert error.startswith("Timed out")

    def test_non_json_reply_returns_error(self, reply_server):
        port = reply_server(b"oops")
        result, error = streaks_for_dates(["2024-06-10"], port=port)
        assert result is None
        assert error.startswith("Malformed reply")

    def test_non_object_reply_returns_error(self, reply_server):
        port = reply_server(b"[1, 2]")
        result, error = streaks_for_dates(["2024-06-10"], port=port)
        assert result is None
        assert error.startswith("Malformed reply")

    def test_non_object_result_returns_error(self, reply_server):
        port = reply_server(b'{"ok": true, "result": 7}')
        result, error = streaks_for_dates(["2024-06-10"], port=port)
        assert result is None
        assert error.startswith("Malformed reply")


@pytest.fixture
def tracker_with_history(tracker):
    read = tracker.add_habit("Read")
    for key in ["2024-06-01", "2024-06-02", "2024-06-03", "2024-06-09", "2024-06-10"]:
        tracker.toggle_completion(read.id, key)
    run = tracker.add_habit("Run")
    tracker.toggle_completion(run.id, "2024-06-09")
    tracker.add_habit("Stretch")
    return tracker


class TestGatherStreakSnapshot:
    def test_uses_service_figures(self, tracker_with_history, monkeypatch):
        sent = []

        def fake_send(port, payload):
            sent.append(payload)
            return {"ok": True, "result": {"current_streak": 9, "longest_streak": 12}}, None

        monkeypatch.setattr(microservice_clients, "_send_json", fake_send)
        snapshot = gather_streak_snapshot(tracker_with_history)

        read, run, stretch = snapshot["entries"]
        assert snapshot["outage"] is None
        assert (read["source"], read["current"], read["longest"], read["total"]) == ("service", 9, 12, 5)
        assert run["source"] == "service"
        assert sent[0]["today"] == "2024-06-10"
        assert len(sent) == 2  # Stretch has no completions, so no request

        assert (stretch["source"], stretch["current"], stretch["note"]) == ("local", 0, NO_COMPLETIONS)

    def test_falls_back_locally_and_stops_after_outage(self, tracker_with_history, monkeypatch):
        calls = []

        def fake_send(port, payload):
            calls.append(payload)
            return None, f"Timed out contacting service on port {port}."

        monkeypatch.setattr(microservice_clients, "_send_json", fake_send)
        snapshot = gather_streak_snapshot(tracker_with_history)

        assert len(calls) == 1
        assert snapshot["outage"].startswith("Timed out")
        figures = [(e["habit"].name, e["source"], e["current"], e["longest"], e["total"])
                   for e in snapshot["entries"]]
        assert figures == [
            ("Read", "local", 2, 3, 5),
            ("Run", "local", 1, 1, 1),
            ("Stretch", "local", 0, 0, 0),
        ]

    def test_rejected_habit_falls_back_but_others_still_asked(self, tracker_with_history, monkeypatch):
        replies = iter([
            ({"ok": False, "error": "No valid dates provided."}, None),
            ({"ok": True, "result": {"current_streak": 1, "longest_streak": 1}}, None),
        ])
        monkeypatch.setattr(microservice_clients, "_send_json", lambda port, payload: next(replies))
        snapshot = gather_streak_snapshot(tracker_with_history)

        read, run, _ = snapshot["entries"]
        assert snapshot["outage"] is None
        assert (read["source"], read["note"], read["current"]) == ("local", "No valid dates provided.", 2)
        assert run["source"] == "service"

    def test_no_habits(self, tracker):
        assert gather_streak_snapshot(tracker) == {"entries": [], "outage": None}
