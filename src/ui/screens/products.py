# src/ui/screens/products.py

"""Product list view: loads the first page of products on every visit."""

import logging

from textual import work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    Footer,
    Header,
    ListView,
    LoadingIndicator,
    Static,
)

from src.models.load_result import LoadResult
from src.models.product import Product
from src.ui.screens.base import RoutedScreen
from src.ui.widgets import ErrorPanel, ProductEntry

logger = logging.getLogger("product_catalog.ui.products")


class ProductsScreen(RoutedScreen):
    """Navigation bar plus a content region that suspends while loading.

    Only ``#products_region`` swaps between the loading indicator, the
    list and the error panel; the buttons stay usable throughout.
    """

    def __init__(self) -> None:
        super().__init__()
        self.load_result: LoadResult = LoadResult.pending()
        self.products: list[Product] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("Products", classes="screen-title"),
            Horizontal(
                Button("Go to Home", id="go_home"),
                Button(
                    "Add Product", variant="success", id="go_add_product"
                ),
                classes="nav-bar",
            ),
            Vertical(
                LoadingIndicator(),
                Static("Loading products...", id="loading_text"),
                id="products_region",
            ),
            id="products_container",
            classes="card",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Kick off the route loader for this visit."""
        self.load_products()

    @work(exclusive=True, group="loader")
    async def load_products(self) -> None:
        """Run the loader and render its outcome unless the visit is stale."""
        if self.route is None:
            return
        result = await self.catalog_app.run_route_loader(self.route)
        if self.is_stale():
            logger.debug(
                "Discarding stale product list for visit %d", self.visit
            )
            return
        await self.show_result(result)

    async def show_result(self, result: LoadResult) -> None:
        """Replace the loading placeholder with the list or an error."""
        self.load_result = result.consume()
        region = self.query_one("#products_region", Vertical)
        await region.remove_children()

        if not result.ok:
            await region.mount(
                ErrorPanel(result.reason, id="products_error")
            )
            return

        self.products = list(result.value or [])
        if not self.products:
            await region.mount(
                Static("No products found", id="products_empty")
            )
            return

        await region.mount(
            ListView(
                *[ProductEntry(p) for p in self.products],
                id="product_list",
            )
        )
