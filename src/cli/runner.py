# src/cli/runner.py

"""Headless CLI: catalog search and scripted cart sessions."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.cart import Cart
from src.models.product import Product
from src.models.search import SearchFilters
from src.services.cart_engine import (
    AddItem,
    CartAction,
    CartEngine,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)
from src.services.catalog_service import CatalogLoadError, CatalogService
from src.ui.formatting import (
    EMPTY_CART_MESSAGE,
    EMPTY_RESULTS_MESSAGE,
    format_cart_total,
    format_each,
    format_price,
    format_result_count,
    stock_label,
)

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


class CartScriptError(ValueError):
    """A ``--cart`` step could not be parsed."""


def _print_products(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Search Results",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Stock")

    for p in products:
        table.add_row(
            p.id,
            p.name,
            p.category,
            format_price(p.price),
            f"{p.rating} ({p.review_count})",
            stock_label(p),
        )

    Console().print(table)


def _print_cart(cart: Cart) -> None:
    """Render the cart lines and footer to stdout."""
    console = Console()
    if cart.is_empty:
        console.print(EMPTY_CART_MESSAGE)
        console.print(f"[bold]{format_cart_total(cart)}[/bold]")
        return

    table = Table(
        title="Shopping Cart",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Product", max_width=40)
    table.add_column("Qty", justify="right")
    table.add_column("Each", justify="right")
    table.add_column("Subtotal", justify="right", style="green")
    for line in cart.items:
        table.add_row(
            line.product.name,
            str(line.quantity),
            format_each(line.product.price),
            format_price(line.subtotal),
        )
    console.print(table)
    console.print(f"[bold]{format_cart_total(cart)}[/bold]")


async def cli_search(
    filters: SearchFilters,
    page: int,
    limit: int,
    output_format: str,
    service: CatalogService | None = None,
) -> int:
    """Run a headless search and return an exit code (0=ok, 1=fail)."""
    try:
        catalog = service or CatalogService()
        result = await catalog.search_products(filters, page, limit)
    except CatalogLoadError as exc:
        logger.error("Search failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error loading products: {exc}[/red]")
        return 1

    products = list(result.products)
    if not result.total:
        _err.print(f"[yellow]{EMPTY_RESULTS_MESSAGE}.[/yellow]")
    else:
        _err.print(
            f"[green]✓ {format_result_count(result.total)}[/green]"
            f" [dim](page {result.page}, {len(products)} shown)[/dim]"
        )

    if output_format == "table":
        _print_products(products)
    else:
        json.dump(
            {
                "products": [p.to_dict() for p in products],
                "total": result.total,
                "page": result.page,
                "limit": result.limit,
            },
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


def parse_cart_script(script: str) -> list[tuple[str, list[str]]]:
    """Split ``"add:1:2,update:1:0,clear"`` into ``(verb, args)`` steps.

    Raises:
        CartScriptError: a step has an unknown verb, the wrong number
            of arguments, or a non-integer quantity.
    """
    arity = {"add": (1, 2), "remove": (1, 1), "update": (2, 2), "clear": (0, 0)}
    steps: list[tuple[str, list[str]]] = []
    for raw_step in script.split(","):
        raw_step = raw_step.strip()
        if not raw_step:
            continue
        verb, *args = raw_step.split(":")
        verb = verb.lower()
        if verb not in arity:
            raise CartScriptError(f"Unknown cart action '{verb}'")
        low, high = arity[verb]
        if not low <= len(args) <= high:
            raise CartScriptError(
                f"'{raw_step}': {verb} takes {low}-{high} argument(s)"
            )
        if verb in ("add", "update") and len(args) == 2:
            try:
                int(args[1])
            except ValueError as exc:
                raise CartScriptError(
                    f"'{raw_step}': quantity must be an integer"
                ) from exc
        steps.append((verb, args))
    return steps


async def cli_cart(
    script: str,
    service: CatalogService | None = None,
) -> int:
    """Fold a scripted list of cart actions over an empty cart."""
    try:
        steps = parse_cart_script(script)
        catalog = service or CatalogService()
    except CartScriptError as exc:
        _err.print(f"[red]{exc}[/red]")
        return 1
    except CatalogLoadError as exc:
        logger.error("Cart session failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error loading products: {exc}[/red]")
        return 1

    engine = CartEngine()
    for verb, args in steps:
        action: CartAction
        if verb == "add":
            product = await catalog.get_product_by_id(args[0])
            if product is None:
                _err.print(f"[yellow]Unknown product id: {args[0]}[/yellow]")
                continue
            quantity = int(args[1]) if len(args) == 2 else 1
            action = AddItem(product, quantity)
        elif verb == "remove":
            action = RemoveItem(args[0])
        elif verb == "update":
            action = UpdateQuantity(args[0], int(args[1]))
        else:
            action = ClearCart()
        engine.dispatch(action)

    _print_cart(engine.cart)
    return 0


async def cli_categories(service: CatalogService | None = None) -> int:
    """Print the category list, one per line."""
    try:
        catalog = service or CatalogService()
    except CatalogLoadError as exc:
        _err.print(f"[red]Error loading products: {exc}[/red]")
        return 1
    for category in await catalog.get_categories():
        sys.stdout.write(f"{category}\n")
    return 0
