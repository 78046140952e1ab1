# garage/utils/logger.py
"""
Logging for the garage backend: console plus a rotating file under
settings.LOG_DIR. Modules call get_logger(__name__) at import time.

Lifecycle code logs through event_logger(), which stamps each line with the
event tag and plate so one vehicle's visit can be pulled out of the log file:

    2025-01-01 10:00:00 | INFO     | garage.services.event_processor | [PARKED] plate=ZUL0001 | spot=A001 ...
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from garage.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 10

# Handlers installed by configure_logging(), so a reconfigure replaces only ours
_handlers = []


def configure_logging(level: str = None, log_dir: str = None):
    """
    Attach the console and rotating file handlers to the root logger.
    Calling it again swaps out the handlers from the previous call and leaves
    any other handler (uvicorn's, pytest's) in place.
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir or settings.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        filename=os.path.join(log_dir, settings.LOG_FILE),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
        delay=True,
    )

    root = logging.getLogger()
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers[:] = [console, file_handler]

    for handler in _handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    if not _handlers:
        configure_logging()
    return logging.getLogger(name)


class EventLogAdapter(logging.LoggerAdapter):
    """Prefixes every message with the lifecycle tag and plate it concerns."""

    def process(self, msg, kwargs):
        return f"[{self.extra['event_type']}] plate={self.extra['plate']} | {msg}", kwargs


def event_logger(logger: logging.Logger, event_type: str = None, plate: str = None) -> EventLogAdapter:
    # Raw payloads may carry a lower-case or missing tag and a blank plate
    tag = (event_type or "").strip().upper() or "UNKNOWN"
    return EventLogAdapter(logger, {"event_type": tag, "plate": (plate or "").strip() or "-"})
