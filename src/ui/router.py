# src/ui/router.py

"""Declarative route table mapping paths to screens and their data hooks."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from textual.screen import Screen

from src.models.product import Product
from src.services.loaders import post_product_action, products_loader
from src.services.product_service import ProductService

Loader = Callable[[ProductService], Any]
Action = Callable[[ProductService, Mapping[str, Any]], Product]


class RouteNotFound(LookupError):
    """No route is registered for the requested path."""


@dataclass(frozen=True)
class Route:
    """One entry of the route table.

    ``screen`` is called with no arguments on every visit, so each visit
    gets a fresh view with no state carried over.
    """

    path: str
    screen: Callable[[], Screen[Any]]
    loader: Loader | None = None
    action: Action | None = None
    error_message: str = ""


class Router:
    """Resolve paths against a route table."""

    def __init__(self, routes: Iterable[Route]) -> None:
        self._routes: dict[str, Route] = {}
        for route in routes:
            if route.path in self._routes:
                raise ValueError(f"Duplicate route: {route.path}")
            self._routes[route.path] = route

    @staticmethod
    def normalize(path: str) -> str:
        """Strip query strings and trailing slashes (except for ``/``)."""
        path = path.split("?", 1)[0].strip() or "/"
        if not path.startswith("/"):
            path = "/" + path
        return path.rstrip("/") or "/"

    def resolve(self, path: str) -> Route:
        """Return the route for *path*; raise ``RouteNotFound`` otherwise."""
        try:
            return self._routes[self.normalize(path)]
        except KeyError:
            raise RouteNotFound(path) from None

    @property
    def paths(self) -> list[str]:
        return list(self._routes)


def build_routes() -> list[Route]:
    """The application's default route table."""
    from src.ui.screens.add_product import AddProductScreen
    from src.ui.screens.home import HomeScreen
    from src.ui.screens.products import ProductsScreen

    return [
        Route(path="/", screen=HomeScreen),
        Route(
            path="/products",
            screen=ProductsScreen,
            loader=products_loader,
            error_message="Failed to load products",
        ),
        Route(
            path="/add-product",
            screen=AddProductScreen,
            action=post_product_action,
            error_message="Failed to add product",
        ),
    ]
