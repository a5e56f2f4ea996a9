"""Tests for the root logger configuration."""

import logging

from tests.conftest import build_test_settings
from track_api.app.core.logging_config import CONSOLE_HANDLER_NAME, setup_logging


def _console_handlers(root):
    return [handler for handler in root.handlers if handler.get_name() == CONSOLE_HANDLER_NAME]


def test_setup_logging_writes_to_configured_file(tmp_path):
    root = logging.getLogger()
    previous_level = root.level
    log_file = tmp_path / "track_api.log"
    settings = build_test_settings(log_level="info", log_file=str(log_file))

    setup_logging(settings)
    setup_logging(settings)
    file_handlers = [
        handler
        for handler in root.handlers
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file.resolve())
    ]
    try:
        assert root.level == logging.INFO
        assert len(file_handlers) == 1
        assert len(_console_handlers(root)) == 1

        logging.getLogger("track_api.tests").info("track %s created", "u1")
        file_handlers[0].flush()

        assert "[INFO] track_api.tests: track u1 created" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in file_handlers:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(previous_level)


def test_setup_logging_applies_level_on_every_call():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging(build_test_settings(log_level="DEBUG"))
        assert root.level == logging.DEBUG
        setup_logging(build_test_settings(log_level="ERROR"))
        assert root.level == logging.ERROR
        assert len(_console_handlers(root)) == 1
    finally:
        root.setLevel(previous_level)
