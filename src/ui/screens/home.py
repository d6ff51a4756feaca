# src/ui/screens/home.py

"""Landing screen with links to the list and the creation form."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, Static

from src.ui.screens.base import RoutedScreen


class HomeScreen(RoutedScreen):
    """Navigation shell: two buttons, no data."""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("Home", id="home_title", classes="screen-title"),
            Button("Go to Products", variant="primary", id="go_products"),
            Button("Add Product", variant="success", id="go_add_product"),
            id="home_container",
            classes="card",
        )
        yield Footer()
