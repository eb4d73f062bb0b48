# repo_json.py
import json
import logging
import os
from datetime import date

from models import AppState, state_from_dict, state_to_dict

logger = logging.getLogger(__name__)


class JSONRepo:
    """Loads and saves the whole AppState as one JSON document.

    Failures never reach the caller: a bad read yields an empty state and a
    bad write is logged.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self):
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, obj):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(obj, f, indent=2)
            os.replace(tmp, self.path)
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)

    def load(self, today: date) -> AppState:
        if not os.path.exists(self.path):
            return AppState(current_date=today)
        try:
            raw = self._read()
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            return state_from_dict(raw, today)
        except (OSError, ValueError, KeyError, TypeError, AttributeError):
            logger.exception("Could not load %s, starting with empty data", self.path)
            return AppState(current_date=today)

    def save(self, state: AppState) -> bool:
        try:
            self._write(state_to_dict(state))
        except OSError:
            logger.exception("Could not save %s", self.path)
            return False
        return True
