# src/ui/screens/base.py

"""Shared behaviour for screens reached through the router."""

from typing import TYPE_CHECKING, Any, cast

from textual.screen import Screen
from textual.widgets import Button

if TYPE_CHECKING:
    from src.ui.app import CatalogApp
    from src.ui.router import Route


class RoutedScreen(Screen[Any]):
    """A screen that knows its route and the visit it was opened for.

    Buttons whose id appears in ``NAV_TARGETS`` change the path without
    touching the network.
    """

    NAV_TARGETS: dict[str, str] = {
        "go_home": "/",
        "go_products": "/products",
        "go_add_product": "/add-product",
    }

    def __init__(self) -> None:
        super().__init__()
        self.route: "Route | None" = None
        self.visit: int = 0

    @property
    def catalog_app(self) -> "CatalogApp":
        from src.ui.app import CatalogApp

        return cast(CatalogApp, self.app)

    def is_stale(self) -> bool:
        """True once the user has navigated away from this visit."""
        return (
            not self.is_attached
            or not self.catalog_app.navigation.is_current(self.visit)
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Follow navigation buttons."""
        target = self.NAV_TARGETS.get(event.button.id or "")
        if target is not None:
            event.stop()
            self.catalog_app.navigate(target)
