# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest
from unittest.mock import patch

from src.config.logging_config import setup_logging
from src.config.settings import Settings


def _console_handlers() -> list[logging.Handler]:
    """Stream handlers on the project logger that are not file handlers."""
    return [
        h
        for h in logging.getLogger("storefront").handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
    ]


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Detach and close handlers so each test starts clean."""
        root_logger = logging.getLogger("storefront")
        for handler in list(root_logger.handlers):
            handler.close()
        root_logger.handlers.clear()
        self.addCleanup(root_logger.handlers.clear)

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent, Settings.LOGS_DIR)

    def test_file_handler_level_debug(self) -> None:
        setup_logging()
        file_handlers = [
            h
            for h in logging.getLogger("storefront").handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_defaults_to_warning(self) -> None:
        with patch.object(Settings, "CONSOLE_LOG_LEVEL", "WARNING"):
            setup_logging()
        handlers = _console_handlers()
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].level, logging.WARNING)

    def test_console_level_follows_settings(self) -> None:
        """A configured level name is applied to the console handler."""
        with patch.object(Settings, "CONSOLE_LOG_LEVEL", "ERROR"):
            setup_logging()
        self.assertEqual(_console_handlers()[0].level, logging.ERROR)

    def test_unknown_console_level_falls_back(self) -> None:
        with patch.object(Settings, "CONSOLE_LOG_LEVEL", "LOUD"):
            setup_logging()
        self.assertEqual(_console_handlers()[0].level, logging.WARNING)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        count_before = len(logging.getLogger("storefront").handlers)
        setup_logging()
        self.assertEqual(
            len(logging.getLogger("storefront").handlers), count_before
        )

    def test_project_logger_level_is_debug(self) -> None:
        setup_logging()
        self.assertEqual(
            logging.getLogger("storefront").level, logging.DEBUG
        )


if __name__ == "__main__":
    unittest.main()
