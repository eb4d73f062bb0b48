"""ZeroMQ service reporting the current and longest streak for a list of days.

The service imports the app's top-level modules (config, dates, streaks), so
start it from an installed checkout or the project root:

    habitforge-streaks [port]
    python -m microservices.streaks_service [port]

Running the file directly (python microservices/streaks_service.py) does not
put the project root on sys.path and fails with ModuleNotFoundError.
"""

import logging
import sys
import threading
from datetime import date

import zmq

import config
from dates import parse_day_key
from logging_config import setup_logging
from streaks import compute_streak, longest_streak

logger = logging.getLogger(__name__)


def _error(message):
    return {"ok": False, "error": message}


def _extract_date_strings(payload):
    """Pull out date strings or return an error message."""
    if "dates" not in payload or not isinstance(payload["dates"], list):
        return [], "Request must contain a 'dates' array."
    return [value for value in payload["dates"] if isinstance(value, str)], None


def _valid_keys(date_strings):
    valid = []
    for raw in date_strings:
        try:
            parse_day_key(raw)
        except ValueError:
            continue
        valid.append(raw.strip())
    return valid


def _resolve_today(payload):
    raw = payload.get("today")
    if raw is None:
        return date.today(), None
    try:
        return parse_day_key(str(raw)), None
    except ValueError:
        return None, f"Invalid 'today' value: {raw!r}"


def process_request(payload: dict) -> dict:
    """
    payload: {"dates": [YYYY-MM-DD, ...], "today": YYYY-MM-DD (optional)}
    returns {"ok": True, "result": {...}} or {"ok": False, "error": ...}
    """
    if not isinstance(payload, dict):
        return _error("Request must contain a 'dates' array.")
    date_strings, error = _extract_date_strings(payload)
    if error:
        return _error(error)
    keys = _valid_keys(date_strings)
    if not keys:
        return _error("No valid dates provided.")
    today, error = _resolve_today(payload)
    if error:
        return _error(error)
    return {
        "ok": True,
        "result": {
            "current_streak": compute_streak(keys, today),
            "longest_streak": longest_streak(keys),
        },
    }


def shutdown_listener(stop_flag):
    """Set stop_flag[0] once the user types 'q' and Enter."""
    print("Press 'q' then Enter to stop the microservice...")
    for line in sys.stdin:
        if line.strip().lower() == "q":
            stop_flag[0] = True
            logger.info("Shutdown requested")
            break


def start_shutdown_listener(stop_flag):
    listener_thread = threading.Thread(
        target=shutdown_listener,
        args=(stop_flag,),
        daemon=True,
    )
    listener_thread.start()
    return listener_thread


def serve_requests(socket, stop_flag):
    """Answer requests until stop_flag is set."""
    while not stop_flag[0]:
        if socket.poll(timeout=1000):
            payload = socket.recv_json()
            response = process_request(payload)
            socket.send_json(response)


def build_server_socket(port):
    context = zmq.Context()
    socket = context.socket(zmq.REP)
    address = f"tcp://*:{port}"
    socket.bind(address)
    return context, socket, address


def shutdown(context, socket):
    logger.info("Shutting down streaks microservice")
    socket.close()
    context.term()


def run_service(port):
    context, socket, address = build_server_socket(port)
    logger.info("Streaks microservice listening on %s", address)
    stop_flag = [False]
    start_shutdown_listener(stop_flag)
    try:
        serve_requests(socket, stop_flag)
    except Exception:
        logger.exception("Error in streaks microservice")
    finally:
        shutdown(context, socket)


def main(argv=None):
    setup_logging()
    argv = sys.argv[1:] if argv is None else argv
    port = config.STREAKS_PORT
    if argv:
        try:
            port = int(argv[0])
        except ValueError:
            logger.warning("Invalid port %r, using default %s instead.", argv[0], port)
    run_service(port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
