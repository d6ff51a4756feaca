# src/ui/screens/not_found.py

"""Fallback screen for paths with no registered route."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, Static

from src.ui.screens.base import RoutedScreen


class NotFoundScreen(RoutedScreen):
    """Tells the user the path is unknown and offers a way home."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.missing_path = path

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("Not Found", classes="screen-title"),
            Static(
                f"No route matches {self.missing_path}",
                id="not_found_message",
            ),
            Button("Go to Home", id="go_home"),
            classes="card error-panel",
        )
        yield Footer()
