# src/config/logging_config.py

"""Logging for storefront runs.

A TUI session or CLI command writes everything the ``storefront`` loggers
emit (searches, cart transitions, catalog loads) to its own
``logs/run_<timestamp>.log``. Stderr gets only ``Settings.CONSOLE_LOG_LEVEL``
and above, leaving the dashboard and JSON output on stdout readable.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

PROJECT_LOGGER = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    """Level for the stderr handler; unknown names mean WARNING."""
    level = logging.getLevelName(Settings.CONSOLE_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _make_handler(
    handler: logging.Handler, level: int, fmt: str
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    return handler


def setup_logging() -> Path:
    """Route the ``storefront`` logger to this run's file and to stderr.

    Handlers are attached on the first call only.

    Returns:
        Path of the log file for this run.
    """
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    started = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file: Path = Settings.LOGS_DIR / f"run_{started}.log"

    project_logger = logging.getLogger(PROJECT_LOGGER)
    project_logger.setLevel(logging.DEBUG)
    if project_logger.handlers:
        return log_file

    project_logger.addHandler(
        _make_handler(
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.DEBUG,
            _FILE_FORMAT,
        )
    )
    project_logger.addHandler(
        _make_handler(
            logging.StreamHandler(sys.stderr),
            _console_level(),
            _CONSOLE_FORMAT,
        )
    )
    project_logger.info("storefront log file: %s", log_file)
    return log_file
