"""Helpers to call the streaks microservice from the Tk application.

Every helper returns ``(result, error)``; nothing here raises.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

import zmq

import config
from dates import to_day_key
from models import sorted_day_keys

logger = logging.getLogger(__name__)

_CONTEXT = zmq.Context.instance()

NO_COMPLETIONS = "No completions yet."


def _make_socket(port: int):
    socket = _CONTEXT.socket(zmq.REQ)
    socket.setsockopt(zmq.RCVTIMEO, config.SERVICE_TIMEOUT_MS)
    socket.setsockopt(zmq.SNDTIMEO, config.SERVICE_TIMEOUT_MS)
    socket.setsockopt(zmq.LINGER, 0)
    socket.connect(f"tcp://localhost:{port}")
    return socket


def _send_json(port: int, payload: dict):
    """Send one request; transport or decoding problems come back as an error string."""
    socket = _make_socket(port)
    try:
        socket.send_json(payload)
        return socket.recv_json(), None
    except zmq.error.Again:
        logger.warning("Timed out contacting service on port %s", port)
        return None, f"Timed out contacting service on port {port}."
    except zmq.ZMQError as exc:
        logger.warning("Service error on port %s: %s", port, exc)
        return None, f"Service error on port {port}: {exc}"
    except ValueError as exc:
        # covers JSONDecodeError and UnicodeDecodeError
        logger.warning("Malformed reply from port %s: %s", port, exc)
        return None, f"Malformed reply from service on port {port}."
    finally:
        socket.close()


def _call_streaks(date_strings: List[str], today: Optional[date], port: int):
    """Like streaks_for_dates, plus whether the service answered at all."""
    if not date_strings:
        return None, NO_COMPLETIONS, True

    payload = {"dates": sorted_day_keys(date_strings)}
    if today is not None:
        payload["today"] = to_day_key(today)
    response, error = _send_json(port, payload)
    if error:
        return None, error, False
    if not isinstance(response, dict):
        logger.warning("Streaks service on port %s replied with %s", port, type(response).__name__)
        return None, f"Malformed reply from service on port {port}.", False
    if not response.get("ok"):
        return None, response.get("error", "Unknown streaks error."), True
    result = response.get("result", {})
    if not isinstance(result, dict):
        return None, f"Malformed reply from service on port {port}.", False
    return result, None, True


def streaks_for_dates(
    date_strings: List[str],
    today: Optional[date] = None,
    port: int = config.STREAKS_PORT,
):
    """Ask the streaks microservice about one habit's completed days."""
    result, error, _reachable = _call_streaks(date_strings, today, port)
    return result, error


def _local_entry(tracker, habit, note):
    return {
        "habit": habit,
        "current": tracker.streak(habit),
        "longest": tracker.longest_streak(habit),
        "total": len(habit.completed_dates),
        "source": "local",
        "note": note,
    }


def gather_streak_snapshot(tracker, port: int = config.STREAKS_PORT):
    """Streak figures for every habit, preferring the microservice.

    Once the service fails to answer, the remaining habits are computed
    locally without another round trip.
    """
    today = tracker.today()
    entries = []
    outage = None
    for habit in tracker.habits:
        if outage:
            entries.append(_local_entry(tracker, habit, outage))
            continue
        result, error, reachable = _call_streaks(sorted(habit.completed_dates), today, port)
        if not reachable:
            outage = error
        if error:
            entries.append(_local_entry(tracker, habit, error))
            continue
        entries.append(
            {
                "habit": habit,
                "current": result.get("current_streak", 0),
                "longest": result.get("longest_streak", 0),
                "total": len(habit.completed_dates),
                "source": "service",
                "note": None,
            }
        )
    return {"entries": entries, "outage": outage}
