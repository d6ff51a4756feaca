# src/services/product_service.py

"""Client for the remote product catalog REST API."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import Product, ProductDraft
from src.services.errors import LoadFailed, SubmitFailed


class ProductService(ABC):
    """Single access point to the catalog; tests substitute a fake."""

    @abstractmethod
    def list_products(self, limit: int) -> list[Product]:
        """Return up to *limit* products in server order.

        Raises ``LoadFailed`` on any transport or HTTP failure.
        """
        ...

    @abstractmethod
    def add_product(self, draft: ProductDraft) -> Product:
        """Create a product and return the server's record.

        Raises ``SubmitFailed`` on any transport or HTTP failure.
        """
        ...


class HttpProductService(ProductService):
    """ProductService backed by a dummyjson-compatible HTTP API.

    One request per call: no retries, no caching.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.logger = logging.getLogger("product_catalog.service")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    @staticmethod
    def _is_success(resp: curl_requests.Response) -> bool:
        return 200 <= resp.status_code < 300

    def list_products(self, limit: int) -> list[Product]:
        """GET /products?limit=N and parse the ``products`` array."""
        url = f"{self.base_url}{self.settings.PRODUCTS_PATH}"
        self.logger.info("Loading products from %s (limit=%d)", url, limit)
        try:
            resp = self.session.get(
                url,
                params={"limit": limit},
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "Request error loading products: %s", exc, exc_info=True
            )
            raise LoadFailed("Failed to fetch products") from exc

        if not self._is_success(resp):
            self.logger.warning(
                "HTTP %d loading products", resp.status_code
            )
            raise LoadFailed(
                f"Failed to fetch products (HTTP {resp.status_code})"
            )

        try:
            data: dict[str, Any] = resp.json()
            items: list[dict[str, Any]] = data["products"]
            products = [Product.from_api(item) for item in items]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            self.logger.error(
                "Malformed product list response", exc_info=True
            )
            raise LoadFailed("Malformed product list response") from exc

        self.logger.info("Loaded %d products", len(products))
        return products

    def add_product(self, draft: ProductDraft) -> Product:
        """POST /products/add with a JSON body of ``{title, price}``."""
        url = f"{self.base_url}{self.settings.ADD_PRODUCT_PATH}"
        payload = draft.to_payload()
        headers: dict[str, str] = {
            **self.settings.DEFAULT_HEADERS,
            "Content-Type": "application/json",
        }
        self.logger.info("Submitting product %r to %s", payload, url)
        try:
            resp = self.session.post(
                url,
                headers=headers,
                json=payload,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "Request error adding product: %s", exc, exc_info=True
            )
            raise SubmitFailed("Failed to add product") from exc

        if not self._is_success(resp):
            self.logger.warning("HTTP %d adding product", resp.status_code)
            raise SubmitFailed(
                f"Failed to add product (HTTP {resp.status_code})"
            )

        try:
            created = Product.from_api(resp.json())
        except (ValueError, TypeError, AttributeError) as exc:
            self.logger.error(
                "Malformed create response", exc_info=True
            )
            raise SubmitFailed("Malformed create response") from exc

        if created.id is None:
            raise SubmitFailed("Created product has no id")

        self.logger.info(
            "Product created: %s (ID: %s)", created.title, created.id
        )
        return created
