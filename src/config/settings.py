# src/config/settings.py

"""Central configuration for the product catalog viewer."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the product catalog viewer."""

    # --- Remote product service ---
    API_BASE_URL: str = os.getenv(
        "CATALOG_API_BASE_URL", "https://dummyjson.com"
    ).rstrip("/")
    PRODUCTS_PATH: str = "/products"
    ADD_PRODUCT_PATH: str = "/products/add"
    PRODUCT_LIST_LIMIT: int = 10        # Items requested per list visit
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out

    # --- HTTP client ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Routing ---
    INITIAL_PATH: str = "/products"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
