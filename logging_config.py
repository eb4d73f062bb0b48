"""Console logging setup shared by the app and the streaks microservice."""

import logging

import config

HANDLER_NAME = "habitforge-console"


def setup_logging(level: int = config.LOG_LEVEL) -> logging.Logger:
    """Attach a single console handler to the root logger.

    Calling this more than once only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    return root
