"""Application-wide settings for HabitForge."""

import logging

APP_TITLE = "HabitForge"
WINDOW_GEOMETRY = "980x640"

# Persistence / export
DATA_PATH = "data/habitforge.json"
EXPORT_FILENAME = "habitforge_data.json"

# Calendar
VIEWS = ("monthly", "weekly", "daily")
DEFAULT_VIEW = "monthly"

# Streaks microservice
STREAKS_PORT = 5555
SERVICE_TIMEOUT_MS = 1500

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
