# src/services/loaders.py

"""Route loader and action for the catalog screens.

Both are plain blocking callables; the app runs them off the event loop.
"""

import logging
from collections.abc import Mapping
from typing import Any

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.models.product import Product, ProductDraft
from src.services.product_service import ProductService

logger = logging.getLogger("product_catalog.loaders")


def products_loader(
    service: ProductService,
    limit: int | None = None,
) -> list[Product]:
    """Read the first page of products for the list view."""
    products = service.list_products(
        limit or Settings.PRODUCT_LIST_LIMIT
    )
    valid, _dropped = ProductValidator.validate(products)
    return valid


def post_product_action(
    service: ProductService,
    form: Mapping[str, Any],
) -> Product:
    """Create a product from submitted form fields.

    A missing or blank price is sent as 0.
    """
    draft = ProductDraft.from_form(form)
    logger.debug("Submitting draft %r", draft)
    return service.add_product(draft)
