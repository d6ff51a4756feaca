# tests/fake_service.py

"""In-memory ProductService used by the UI and CLI tests."""

import threading
from typing import Any

from src.models.product import Product, ProductDraft
from src.services.product_service import ProductService

MOCK_PRODUCTS = [
    Product(title="Product 1", id=1, thumbnail="thumb1.jpg"),
    Product(title="Product 2", id=2, thumbnail="thumb2.jpg"),
]


class FakeProductService(ProductService):
    """Records calls and returns canned data.

    When ``gate`` is set to an unset ``threading.Event`` every call
    blocks until the test releases it, which keeps a request pending.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        created: Product | None = None,
        list_error: Exception | None = None,
        add_error: Exception | None = None,
    ) -> None:
        self.products = (
            list(products) if products is not None else list(MOCK_PRODUCTS)
        )
        self.created = created
        self.list_error = list_error
        self.add_error = add_error
        self.gate: threading.Event | None = None
        self.list_calls: list[int] = []
        self.add_calls: list[dict[str, Any]] = []

    def hold(self) -> threading.Event:
        """Make subsequent calls block until the returned event is set."""
        self.gate = threading.Event()
        return self.gate

    def _wait(self) -> None:
        if self.gate is not None:
            self.gate.wait(timeout=5)

    def list_products(self, limit: int) -> list[Product]:
        self.list_calls.append(limit)
        self._wait()
        if self.list_error is not None:
            raise self.list_error
        return list(self.products)

    def add_product(self, draft: ProductDraft) -> Product:
        payload = draft.to_payload()
        self.add_calls.append(payload)
        self._wait()
        if self.add_error is not None:
            raise self.add_error
        if self.created is not None:
            return self.created
        return Product(title=draft.title, id=1, price=payload["price"])
