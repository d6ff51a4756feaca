# main.py

"""Entry point for the product catalog viewer (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("product_catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="product_catalog",
        description="Browse and add products on a remote catalog API.",
        epilog="Routes: /, /products, /add-product",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        dest="api_url",
        help=f"Catalog API base URL (default: {Settings.API_BASE_URL}).",
    )
    parser.add_argument(
        "--path",
        default=Settings.INITIAL_PATH,
        help=f"Initial route for the TUI (default: {Settings.INITIAL_PATH}).",
    )

    commands = parser.add_subparsers(dest="command")

    list_cmd = commands.add_parser("list", help="Print the first products.")
    list_cmd.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )

    add_cmd = commands.add_parser("add", help="Create a product.")
    add_cmd.add_argument("title", help="Product title.")
    add_cmd.add_argument(
        "price",
        nargs="?",
        default=None,
        help="Product price (default: 0).",
    )
    return parser


def _run_tui(args: argparse.Namespace) -> None:
    """Launch the interactive Textual UI."""
    from src.services.product_service import HttpProductService
    from src.ui.app import CatalogApp

    try:
        app = CatalogApp(
            service=HttpProductService(args.api_url),
            initial_path=args.path,
        )
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("product_catalog TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    from src.cli.runner import cli_list
    from src.services.product_service import HttpProductService

    sys.exit(
        cli_list(args.output_format, HttpProductService(args.api_url))
    )


def _run_add(args: argparse.Namespace) -> None:
    from src.cli.runner import cli_add
    from src.services.product_service import HttpProductService

    sys.exit(
        cli_add(args.title, args.price, HttpProductService(args.api_url))
    )


def main() -> None:
    """Route to the TUI (no command) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    # Stderr belongs to the TUI while it runs
    log_file = setup_logging(console=args.command is not None)
    logger.info("product_catalog starting, log file: %s", log_file)

    if args.command == "list":
        _run_list(args)
    elif args.command == "add":
        _run_add(args)
    else:
        _run_tui(args)


if __name__ == "__main__":
    main()
