"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the root logger.  ``run.py`` starts Uvicorn
without its own logging config, so the server's ``uvicorn.*`` loggers
propagate to the same handlers and share the format below.
"""

import logging
from pathlib import Path

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER_NAME = "track_api.console"


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    Safe to call more than once (each ``create_app`` call does): the
    level is always reapplied, but the console handler and a file
    handler for a given path are only added the first time.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if settings.log_file:
        log_path = str(Path(settings.log_file).resolve())
        already_attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path
            for handler in root.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
