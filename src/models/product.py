# src/models/product.py

"""Product records received from, and drafts submitted to, the catalog API."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.services.errors import SubmitFailed


@dataclass(frozen=True)
class Product:
    """A product as returned by the remote catalog service."""

    title: str
    id: int | None = None
    price: float = 0
    thumbnail: str = ""

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Product":
        """Build a Product from one JSON object of the API response.

        Raises ``TypeError`` for a non-object entry and ``ValueError`` for
        an id or price that is not numeric.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Product entry must be an object, got {type(data).__name__}"
            )
        raw_id = data.get("id")
        return cls(
            title=str(data.get("title") or ""),
            id=int(raw_id) if raw_id is not None else None,
            price=float(data.get("price") or 0),
            thumbnail=str(data.get("thumbnail") or ""),
        )


@dataclass
class ProductDraft:
    """Unsaved form input for a single creation request."""

    title: str
    price: str | float | None = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "ProductDraft":
        """Extract the draft from submitted form fields."""
        return cls(
            title=str(form.get("title") or ""),
            price=form.get("price"),
        )

    def numeric_price(self) -> int | float:
        """Return the price as a number; missing or blank means 0.

        Integral values come back as ``int`` so ``"10"`` is sent as ``10``.
        """
        raw = self.price
        if raw is None:
            return 0
        if isinstance(raw, str):
            raw = raw.strip()
            if not raw:
                return 0
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise SubmitFailed(
                f"Price must be a number, got {self.price!r}"
            ) from exc
        if not math.isfinite(value):
            raise SubmitFailed(
                f"Price must be a finite number, got {self.price!r}"
            )
        return int(value) if value.is_integer() else value

    def to_payload(self) -> dict[str, Any]:
        """Request body for the create endpoint."""
        return {"title": self.title, "price": self.numeric_price()}
