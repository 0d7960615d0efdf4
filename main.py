# main.py

"""Entry point for the storefront demo (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.models.search import SearchFilters

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Product catalog browser with a shopping cart.",
        epilog="Run without arguments to launch the interactive dashboard.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search text. Omit (with no filters) to launch the TUI.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Exact category to filter by ('All' for none).",
    )
    parser.add_argument(
        "--min-price",
        type=float,
        default=None,
        dest="min_price",
        help="Inclusive lower price bound (negative = unset).",
    )
    parser.add_argument(
        "--max-price",
        type=float,
        default=None,
        dest="max_price",
        help="Inclusive upper price bound (negative = unset).",
    )
    stock = parser.add_mutually_exclusive_group()
    stock.add_argument(
        "--in-stock",
        action="store_const",
        const=True,
        default=None,
        dest="in_stock",
        help="Only products that are in stock.",
    )
    stock.add_argument(
        "--out-of-stock",
        action="store_const",
        const=False,
        dest="in_stock",
        help="Only products that are out of stock.",
    )
    parser.add_argument(
        "--min-rating",
        type=float,
        default=None,
        dest="min_rating",
        help="Minimum rating (0.0-5.0).",
    )
    parser.add_argument(
        "-p",
        "--page",
        type=int,
        default=Settings.DEFAULT_PAGE,
        help="Result page, starting at 1.",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=Settings.DEFAULT_LIMIT,
        help=f"Results per page (default: {Settings.DEFAULT_LIMIT}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--cart",
        default=None,
        help=(
            "Comma-separated cart actions to apply in order, e.g. "
            "'add:1:2,add:2,update:1:0,remove:2,clear'."
        ),
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        default=False,
        help="List the catalog categories and exit.",
    )
    return parser


def _filters_from_args(args: argparse.Namespace) -> SearchFilters:
    return SearchFilters(
        query=args.query or "",
        category=args.category,
        min_price=args.min_price,
        max_price=args.max_price,
        in_stock=args.in_stock,
        min_rating=args.min_rating,
    )


def _run_tui() -> None:
    """Launch the interactive Textual dashboard."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search and exit."""
    from src.cli.runner import cli_search

    exit_code = asyncio.run(
        cli_search(
            filters=_filters_from_args(args),
            page=args.page,
            limit=args.limit,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def _run_cart(script: str) -> None:
    """Apply a scripted cart session and exit."""
    from src.cli.runner import cli_cart

    sys.exit(asyncio.run(cli_cart(script)))


def _run_categories() -> None:
    from src.cli.runner import cli_categories

    sys.exit(asyncio.run(cli_categories()))


def main() -> None:
    """Route to TUI (no args) or the headless commands."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.categories:
        _run_categories()
    elif args.cart is not None:
        _run_cart(args.cart)
    elif vars(args) == vars(parser.parse_args([])):
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
