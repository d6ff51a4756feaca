# src/filters/product_validator.py

"""Product validation: drop list entries that cannot be displayed."""

import logging

from src.models.product import Product

logger = logging.getLogger("product_catalog.filters")


class ProductValidator:
    """Validate listed products and drop those missing display fields."""

    @staticmethod
    def validate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Drop products with empty/whitespace titles or no thumbnail.

        Order of the remaining products is preserved. Returns the valid
        products and the count of dropped items.
        """
        valid: list[Product] = []
        dropped = 0

        for product in products:
            if not product.title.strip():
                logger.debug(
                    "Dropped product with empty title (id=%s)",
                    product.id,
                )
                dropped += 1
                continue
            if not product.thumbnail.strip():
                logger.debug(
                    "Dropped product without thumbnail "
                    "(id=%s, title=%s)",
                    product.id,
                    product.title,
                )
                dropped += 1
                continue
            valid.append(product)

        if dropped:
            logger.info(
                "Validation dropped %d invalid products",
                dropped,
            )

        return valid, dropped
