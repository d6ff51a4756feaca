# tests/test_main.py

"""Tests for the command-line entry point."""

import unittest
from unittest.mock import MagicMock, patch

import main
from src.config.settings import Settings


class TestParser(unittest.TestCase):
    """Argument parsing."""

    def test_no_command_means_tui(self) -> None:
        args = main._build_parser().parse_args([])
        self.assertIsNone(args.command)
        self.assertEqual(args.path, Settings.INITIAL_PATH)
        self.assertIsNone(args.api_url)

    def test_list_command(self) -> None:
        args = main._build_parser().parse_args(["list", "-f", "table"])
        self.assertEqual(args.command, "list")
        self.assertEqual(args.output_format, "table")

    def test_add_command_price_optional(self) -> None:
        args = main._build_parser().parse_args(["add", "Lamp"])
        self.assertEqual(args.title, "Lamp")
        self.assertIsNone(args.price)

    def test_global_options(self) -> None:
        args = main._build_parser().parse_args(
            ["--api-url", "http://localhost:8000", "--path", "/", "list"]
        )
        self.assertEqual(args.api_url, "http://localhost:8000")
        self.assertEqual(args.path, "/")


class TestMain(unittest.TestCase):
    """Dispatch from main()."""

    @patch("main.setup_logging")
    @patch("main._run_tui")
    def test_launches_tui_by_default(
        self, mock_tui: MagicMock, mock_logging: MagicMock,
    ) -> None:
        with patch("sys.argv", ["product_catalog", "--path", "/"]):
            main.main()
        mock_tui.assert_called_once()
        self.assertEqual(mock_tui.call_args.args[0].path, "/")
        mock_logging.assert_called_once_with(console=False)

    @patch("main.setup_logging")
    @patch("main._run_add")
    def test_add_dispatch(
        self, mock_add: MagicMock, mock_logging: MagicMock,
    ) -> None:
        with patch("sys.argv", ["product_catalog", "add", "Lamp", "12"]):
            main.main()
        mock_add.assert_called_once()
        mock_logging.assert_called_once_with(console=True)
        self.assertEqual(mock_add.call_args.args[0].price, "12")


if __name__ == "__main__":
    unittest.main()
