"""Tests for the logging setup and the per-event log prefix."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
import pytest
from logging.handlers import RotatingFileHandler

from garage.config import settings
from garage.utils import logger as logger_module
from garage.utils.logger import configure_logging, event_logger, get_logger


@pytest.fixture
def restore_logging():
    """Put back the handlers installed at import time once the test is done."""
    root = logging.getLogger()
    saved_handlers = logger_module._handlers[:]
    saved_level = root.level
    yield root
    for handler in logger_module._handlers:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    logger_module._handlers[:] = saved_handlers
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


class TestConfigureLogging:
    def test_writes_formatted_lines_to_log_dir(self, tmp_path, restore_logging):
        log_dir = tmp_path / "logs"
        configure_logging(level="debug", log_dir=str(log_dir))

        get_logger("garage.tests").info("hello")
        for handler in logger_module._handlers:
            handler.flush()

        content = (log_dir / settings.LOG_FILE).read_text(encoding="utf-8")
        assert "| INFO     | garage.tests | hello" in content

    def test_reconfigure_replaces_own_handlers_only(self, tmp_path, restore_logging):
        root = restore_logging
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        try:
            configure_logging(log_dir=str(tmp_path))
            count = len(root.handlers)
            configure_logging(log_dir=str(tmp_path))

            assert len(root.handlers) == count
            assert foreign in root.handlers
            assert sum(isinstance(h, RotatingFileHandler) for h in logger_module._handlers) == 1
        finally:
            root.removeHandler(foreign)

    def test_level_applied_to_root_and_handlers(self, tmp_path, restore_logging):
        configure_logging(level="warning", log_dir=str(tmp_path))
        assert restore_logging.level == logging.WARNING
        assert all(h.level == logging.WARNING for h in logger_module._handlers)


class TestEventLogger:
    def test_prefixes_tag_and_plate(self, caplog):
        log = event_logger(logging.getLogger("garage.tests.events"), "parked", "ZUL0001")
        with caplog.at_level(logging.INFO, logger="garage.tests.events"):
            log.info("spot=A001 sector=A")
        assert caplog.messages == ["[PARKED] plate=ZUL0001 | spot=A001 sector=A"]

    def test_missing_tag_and_plate(self, caplog):
        log = event_logger(logging.getLogger("garage.tests.events"), None, "  ")
        with caplog.at_level(logging.WARNING, logger="garage.tests.events"):
            log.warning("Invalid event: license_plate is required")
        assert caplog.messages == ["[UNKNOWN] plate=- | Invalid event: license_plate is required"]

    def test_level_and_logger_name_preserved(self, caplog):
        log = event_logger(logging.getLogger("garage.tests.events"), "EXIT", "ZUL0001")
        with caplog.at_level(logging.INFO, logger="garage.tests.events"):
            log.error("boom")
        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert record.name == "garage.tests.events"
