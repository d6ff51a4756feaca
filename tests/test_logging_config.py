# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from src.config.logging_config import LOGGER_NAME, setup_logging


def _handlers() -> list[logging.Handler]:
    return list(logging.getLogger(LOGGER_NAME).handlers)


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start every test without project handlers."""
        self._drop_handlers()

    def tearDown(self) -> None:
        self._drop_handlers()

    @staticmethod
    def _drop_handlers() -> None:
        root_logger = logging.getLogger(LOGGER_NAME)
        for handler in list(root_logger.handlers):
            handler.close()
            root_logger.removeHandler(handler)

    def test_setup_creates_log_file_in_logs_dir(self) -> None:
        """The returned path exists and sits inside ``logs/``."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())
        self.assertEqual(log_path.parent.name, "logs")

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_file_debug_console_warning(self) -> None:
        """File handler records DEBUG; console only WARNING and up."""
        setup_logging()
        file_handlers = [
            h for h in _handlers() if isinstance(h, logging.FileHandler)
        ]
        console_handlers = [
            h
            for h in _handlers()
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(console_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(console_handlers[0].level, logging.WARNING)
        self.assertEqual(
            logging.getLogger(LOGGER_NAME).level, logging.DEBUG
        )

    def test_without_console_only_file_handler(self) -> None:
        """The TUI run attaches no stderr handler."""
        setup_logging(console=False)
        handlers = _handlers()
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.FileHandler)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        count_before = len(_handlers())
        setup_logging()
        self.assertEqual(count_before, len(_handlers()))

    def test_child_logger_messages_reach_file(self) -> None:
        """Module loggers under product_catalog.* land in the run log."""
        log_path = setup_logging()
        logging.getLogger(f"{LOGGER_NAME}.ui").debug(
            "Navigating to /products (visit 1)"
        )
        for handler in _handlers():
            handler.flush()
        content = log_path.read_text(encoding="utf-8")
        self.assertIn("Navigating to /products (visit 1)", content)
        self.assertIn("product_catalog.ui", content)


if __name__ == "__main__":
    unittest.main()
