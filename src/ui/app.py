# src/ui/app.py

"""Textual front end for the product catalog: routing and data hooks."""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from src.config.settings import Settings
from src.models.load_result import LoadResult
from src.services.product_service import HttpProductService, ProductService
from src.ui.navigation import NavigationState
from src.ui.router import Route, RouteNotFound, Router, build_routes
from src.ui.screens.base import RoutedScreen
from src.ui.screens.not_found import NotFoundScreen

logger = logging.getLogger("product_catalog.ui")


class CatalogApp(App[None]):
    """Maps paths to screens and runs their loaders and actions.

    Loader and action failures are caught here and turned into failed
    :class:`LoadResult` values, so a broken request only ever affects the
    screen that asked for it.
    """

    CSS_PATH = "styles.tcss"
    TITLE = "Product Catalog"

    BINDINGS = [
        Binding("f1", "navigate('/')", "Home"),
        Binding("f2", "navigate('/products')", "Products"),
        Binding("f3", "navigate('/add-product')", "Add Product"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        service: ProductService | None = None,
        routes: Iterable[Route] | None = None,
        initial_path: str | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.service: ProductService = service or HttpProductService()
        self.router = Router(
            routes if routes is not None else build_routes()
        )
        self.navigation = NavigationState()
        self.initial_path = initial_path or self.settings.INITIAL_PATH

    def on_mount(self) -> None:
        """Open the initial route."""
        self.navigate(self.initial_path)

    # ── Navigation ───────────────────────────────────────

    def _build_screen(self, path: str) -> Screen[Any]:
        try:
            route = self.router.resolve(path)
        except RouteNotFound:
            logger.warning("No route for path %s", path)
            return NotFoundScreen(path)
        screen = route.screen()
        if isinstance(screen, RoutedScreen):
            screen.route = route
        return screen

    def navigate(self, path: str) -> None:
        """Switch to a fresh screen for *path*."""
        normalized = Router.normalize(path)
        token = self.navigation.go(normalized)
        screen = self._build_screen(normalized)
        if isinstance(screen, RoutedScreen):
            screen.visit = token
        logger.info("Navigating to %s (visit %d)", normalized, token)

        # The bottom of the stack is Textual's default screen
        if len(self.screen_stack) > 1:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    def action_navigate(self, path: str) -> None:
        self.navigate(path)

    # ── Loaders and actions ──────────────────────────────

    async def run_route_loader(self, route: Route) -> LoadResult:
        """Run the route's loader off the event loop."""
        if route.loader is None:
            return LoadResult.resolved(None)
        try:
            value = await asyncio.to_thread(route.loader, self.service)
        except Exception as exc:
            logger.error(
                "Loader for %s failed: %s", route.path, exc, exc_info=True
            )
            return LoadResult.failed(route.error_message or str(exc))
        return LoadResult.resolved(value)

    async def run_route_action(
        self,
        route: Route,
        form: Mapping[str, Any],
    ) -> LoadResult:
        """Run the route's action with the submitted form off the event loop."""
        if route.action is None:
            logger.warning("Route %s has no action", route.path)
            return LoadResult.failed(f"{route.path} accepts no submissions")
        try:
            value = await asyncio.to_thread(
                route.action, self.service, form
            )
        except Exception as exc:
            logger.error(
                "Action for %s failed: %s", route.path, exc, exc_info=True
            )
            return LoadResult.failed(route.error_message or str(exc))
        return LoadResult.resolved(value)
