# src/cli/runner.py

"""Headless catalog commands that reuse the UI's loader and action."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.product import Product
from src.services.errors import CatalogError
from src.services.loaders import post_product_action, products_loader
from src.services.product_service import HttpProductService, ProductService

logger = logging.getLogger("product_catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": p.price,
            "thumbnail": p.thumbnail,
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout, in server order."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", justify="right")
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Thumbnail", overflow="fold", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            str(p.id) if p.id is not None else "—",
            p.title[:60],
            f"{p.price:,.2f}",
            p.thumbnail,
        )

    Console().print(table)


def cli_list(
    output_format: str = "json",
    service: ProductService | None = None,
) -> int:
    """Print the first page of products; return an exit code (0=ok, 1=fail)."""
    service = service or HttpProductService()
    try:
        products = products_loader(service)
    except CatalogError as exc:
        logger.error("List failed: %s", exc, exc_info=True)
        _err.print("[red]Failed to load products[/red]")
        return 1

    _err.print(f"[green]✓ {len(products)} products[/green]")

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


def cli_add(
    title: str,
    price: str | None = None,
    service: ProductService | None = None,
) -> int:
    """Create one product; return an exit code (0=ok, 1=fail)."""
    if not title.strip():
        _err.print("[red]Title is required[/red]")
        return 1

    service = service or HttpProductService()
    try:
        created = post_product_action(
            service, {"title": title, "price": price}
        )
    except CatalogError as exc:
        logger.error("Add failed: %s", exc, exc_info=True)
        _err.print(f"[red]Failed to add product: {exc}[/red]")
        return 1

    sys.stdout.write(
        f"Product added: {created.title} (ID: {created.id})\n"
    )
    return 0
