# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_api_base_url_is_http_without_trailing_slash(self) -> None:
        self.assertTrue(Settings.API_BASE_URL.startswith("http"))
        self.assertFalse(Settings.API_BASE_URL.endswith("/"))

    def test_endpoint_paths(self) -> None:
        self.assertEqual(Settings.PRODUCTS_PATH, "/products")
        self.assertEqual(Settings.ADD_PRODUCT_PATH, "/products/add")

    def test_list_limit_is_ten(self) -> None:
        self.assertEqual(Settings.PRODUCT_LIST_LIMIT, 10)

    def test_request_timeout_is_positive_int(self) -> None:
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_initial_path_is_a_route(self) -> None:
        self.assertIn(
            Settings.INITIAL_PATH, ("/", "/products", "/add-product")
        )

    def test_impersonate_browser_is_string(self) -> None:
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(Settings.IMPERSONATE_BROWSER)

    def test_default_headers_accept_json(self) -> None:
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Accept"], "application/json"
        )

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)


if __name__ == "__main__":
    unittest.main()
