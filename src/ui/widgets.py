# src/ui/widgets.py

"""Reusable widgets for the catalog screens."""

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, ListItem, Static

from src.models.product import Product


class ProductThumbnail(Static):
    """Stand-in for an ``<img>``: keeps the URL and its alt text.

    The terminal cannot draw the image, so the alt text is rendered as a
    link to the thumbnail.
    """

    def __init__(
        self,
        src: str,
        alt: str,
        classes: str | None = None,
    ) -> None:
        self.src = src
        self.alt = alt
        super().__init__(
            Text(f"🖼 {alt}", style=Style(link=src) if src else ""),
            classes=classes,
        )


class ProductEntry(ListItem):
    """One row of the product list."""

    def __init__(self, product: Product) -> None:
        self.product = product
        super().__init__(classes="product-entry")

    def compose(self) -> ComposeResult:
        yield Horizontal(
            ProductThumbnail(
                self.product.thumbnail,
                self.product.title,
                classes="product-thumbnail",
            ),
            Label(
                self.product.title, markup=False, classes="product-title"
            ),
        )


class ErrorPanel(Vertical):
    """Error heading plus a fixed, human-readable message."""

    def __init__(self, message: str, id: str | None = None) -> None:
        self.message = message
        super().__init__(id=id, classes="error-panel")

    def compose(self) -> ComposeResult:
        yield Static("Error", classes="error-title")
        yield Static(self.message, markup=False, classes="error-message")


class ConfirmationPanel(Static):
    """Shows the id and title of a freshly created product."""

    def __init__(self, product: Product, id: str | None = None) -> None:
        self.product = product
        self.message = f"Product added: {product.title} (ID: {product.id})"
        super().__init__(
            Text.assemble(
                ("Product added:", "bold"),
                f" {product.title} (ID: {product.id})",
            ),
            id=id,
        )
