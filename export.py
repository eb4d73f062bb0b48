"""Pretty-printed JSON export of the full app state."""

import json
import logging
from pathlib import Path
from typing import Union

import config
from models import AppState, state_to_dict

logger = logging.getLogger(__name__)


def snapshot_bytes(state: AppState) -> bytes:
    return json.dumps(state_to_dict(state), indent=2, ensure_ascii=False).encode("utf-8")


def write_export(state: AppState, path: Union[str, Path] = config.EXPORT_FILENAME) -> Path:
    """Write the snapshot to ``path``. OSError propagates to the caller."""
    target = Path(path)
    target.write_bytes(snapshot_bytes(state))
    logger.info("Exported %d habit(s) to %s", len(state.habits), target)
    return target
