# src/ui/app.py

"""Terminal dashboard: catalog search on top, shopping cart below."""

import logging
from dataclasses import replace
from typing import cast

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.timer import Timer
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from src.config.settings import Settings
from src.models.cart import CartLine
from src.models.product import Product
from src.models.search import SearchFilters
from src.services.cart_engine import CartEngine
from src.services.catalog_service import CatalogService
from src.ui.formatting import (
    EMPTY_CART_MESSAGE,
    EMPTY_RESULTS_HINT,
    EMPTY_RESULTS_MESSAGE,
    format_cart_total,
    format_each,
    format_price,
    format_result_count,
    stock_label,
)

logger = logging.getLogger("storefront.ui")

_STOCK_OPTIONS: list[tuple[str, str]] = [
    ("In stock only", "true"),
    ("Out of stock only", "false"),
]


def _parse_price(raw: str) -> float | None:
    """Parse a price box; blank or non-numeric input means "unset"."""
    value = raw.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class StorefrontApp(App[object]):
    """Terminal dashboard for browsing the catalog and managing a cart."""

    TITLE = "Product Dashboard"

    CSS = """
    #search_bar, #filter_bar { height: auto; }
    #search_input { width: 1fr; }
    #filter_bar Select { width: 1fr; }
    #filter_bar Input { width: 16; }
    #results_table { height: 1fr; }
    #cart_table { height: 10; }
    #cart_header, #cart_total { padding: 0 1; text-style: bold; }
    #status { padding: 0 1; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_to_cart", "Add to Cart"),
        Binding("plus", "increase_quantity", "Qty +"),
        Binding("minus", "decrease_quantity", "Qty -"),
        Binding("d", "remove_line", "Remove"),
        Binding("x", "clear_cart", "Clear Cart"),
        Binding("r", "retry", "Retry"),
        Binding("ctrl+r", "reset_filters", "Reset Filters"),
    ]

    def __init__(
        self,
        catalog_service: CatalogService | None = None,
        cart_engine: CartEngine | None = None,
    ) -> None:
        super().__init__()
        self.catalog_service = catalog_service or CatalogService()
        self.cart_engine = cart_engine or CartEngine()
        self.filters = SearchFilters()
        self.products: list[Product] = []
        self.categories: list[str] = []
        self.last_error: str | None = None
        self.status_message = ""
        self._debounce_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the dashboard."""
        yield Header()
        yield Container(
            Horizontal(
                Input(
                    placeholder=(
                        "Search products by name, category, "
                        "or description..."
                    ),
                    id="search_input",
                ),
                Button("Search", variant="primary", id="search_btn"),
                Button("Reset", id="reset_btn"),
                id="search_bar",
            ),
            Horizontal(
                Select[str](
                    [], prompt="Category", id="category_select"
                ),
                Select[str](
                    _STOCK_OPTIONS, prompt="Stock", id="stock_select"
                ),
                Input(placeholder="Min $0", id="min_price_input"),
                Input(placeholder="Max $999", id="max_price_input"),
                Select[str](
                    [
                        (f"{r}+ stars", str(r))
                        for r in Settings.RATING_CHOICES
                    ],
                    prompt="Rating",
                    id="rating_select",
                ),
                id="filter_bar",
            ),
            Static("Loading products...", id="status"),
            DataTable(
                id="results_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
            Static("🛒 Shopping Cart (0)", id="cart_header"),
            DataTable(
                id="cart_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
            Static(EMPTY_CART_MESSAGE, id="cart_total"),
            id="main_container",
        )
        yield Footer()

    async def on_mount(self) -> None:
        """Configure tables, load categories, and run the first search."""
        results = self._results_table()
        results.add_column("Name", key="name")
        results.add_column("Category", key="category")
        results.add_column("Price", key="price")
        results.add_column("Rating", key="rating")
        results.add_column("Stock", key="stock")
        results.add_column("In Cart", key="in_cart")

        cart_table = self._cart_table()
        cart_table.add_columns("Product", "Qty", "Each", "Subtotal")

        try:
            self.categories = await self.catalog_service.get_categories()
        except Exception as exc:
            logger.error("Failed to load categories: %s", exc, exc_info=True)
            self.categories = []
        self.query_one("#category_select", Select).set_options(
            (category, category) for category in self.categories
        )

        self.refresh_cart()
        await self.perform_search()

    # ── Widget helpers ───────────────────────────────────

    def _results_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )

    def _cart_table(self) -> DataTable[str]:
        return cast(
            DataTable[str],
            self.query_one("#cart_table", DataTable),
        )

    def _set_status(self, message: str) -> None:
        self.status_message = message
        self.query_one("#status", Static).update(message)

    def _selected_product(self) -> Product | None:
        row = self._results_table().cursor_row
        if 0 <= row < len(self.products):
            return self.products[row]
        return None

    def _selected_line(self) -> CartLine | None:
        items = self.cart_engine.cart.items
        row = self._cart_table().cursor_row
        if 0 <= row < len(items):
            return items[row]
        return None

    # ── Search ───────────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "search_btn":
            self._apply_query()
        elif event.button.id == "reset_btn":
            self.action_reset_filters()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Debounce the query box; apply price boxes immediately."""
        input_id = event.input.id
        if input_id == "search_input":
            if self._debounce_timer is not None:
                self._debounce_timer.stop()
            self._debounce_timer = self.set_timer(
                Settings.SEARCH_DEBOUNCE, self._apply_query
            )
        elif input_id == "min_price_input":
            self.set_filters(min_price=_parse_price(event.value))
        elif input_id == "max_price_input":
            self.set_filters(max_price=_parse_price(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Search immediately on Enter in the query box."""
        if event.input.id == "search_input":
            self._apply_query()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Map filter dropdowns onto the current filters."""
        value = event.value if isinstance(event.value, str) else None
        select_id = event.select.id
        if select_id == "category_select":
            category = None if value == Settings.ALL_CATEGORIES else value
            self.set_filters(category=category)
        elif select_id == "stock_select":
            self.set_filters(
                in_stock=None if value is None else value == "true"
            )
        elif select_id == "rating_select":
            self.set_filters(
                min_rating=None if value is None else float(value)
            )

    def _apply_query(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._debounce_timer = None
        query = self.query_one("#search_input", Input).value
        self.set_filters(query=query)

    def set_filters(self, **changes: object) -> None:
        """Replace some filter fields and search again if anything changed."""
        updated = replace(self.filters, **changes)
        if updated == self.filters:
            return
        self.filters = updated
        logger.info(
            "Filters changed (%d active): %s",
            updated.active_filter_count,
            updated,
        )
        self.run_search()

    @work(exclusive=True, group="search")
    async def run_search(self) -> None:
        """Background search; a newer search cancels an older one."""
        await self.perform_search()

    async def perform_search(self) -> None:
        """Load products for the current filters and refresh the grid."""
        self._set_status("Loading products...")
        filters = self.filters

        try:
            result = await self.catalog_service.load_products(filters)
        except Exception as exc:
            self.last_error = str(exc) or "Failed to load products"
            logger.error(
                "Product load failed for %s: %s",
                filters,
                exc,
                exc_info=True,
            )
            self._set_status(
                f"❌ Error loading products: {self.last_error} "
                "(press r to retry)"
            )
            self.notify(
                f"Error loading products: {self.last_error}",
                severity="error",
            )
            return

        self.last_error = None
        self.products = list(result.products)
        self.populate_table()

        if not self.products:
            self._set_status(
                f"{EMPTY_RESULTS_MESSAGE}. {EMPTY_RESULTS_HINT}"
            )
        else:
            self._set_status(format_result_count(len(self.products)))

    def populate_table(self) -> None:
        """Fill the results table with the current products."""
        table = self._results_table()
        table.clear()
        for p in self.products:
            table.add_row(
                p.name[:60],
                p.category,
                format_price(p.price),
                f"⭐ {p.rating} ({p.review_count})",
                Text(
                    stock_label(p),
                    style="green" if p.in_stock else "red",
                ),
                self._in_cart_text(p.id),
                key=p.id,
            )

    def _in_cart_text(self, product_id: str) -> str:
        quantity = self.cart_engine.get_item_quantity(product_id)
        return str(quantity) if quantity else ""

    def action_retry(self) -> None:
        """Re-run the last search with the same filters."""
        self.run_search()

    def action_reset_filters(self) -> None:
        """Clear every filter widget and reload the full catalog."""
        for input_id in ("#search_input", "#min_price_input", "#max_price_input"):
            self.query_one(input_id, Input).value = ""
        for select_id in ("#category_select", "#stock_select", "#rating_select"):
            self.query_one(select_id, Select).clear()
        self.filters = SearchFilters()
        self.run_search()

    # ── Cart ─────────────────────────────────────────────

    def refresh_cart(self) -> None:
        """Redraw the cart lines, badge, footer, and in-cart column."""
        cart = self.cart_engine.cart
        table = self._cart_table()
        table.clear()
        for line in cart.items:
            table.add_row(
                line.product.name[:40],
                str(line.quantity),
                format_each(line.product.price),
                format_price(line.subtotal),
                key=line.product_id,
            )

        self.query_one("#cart_header", Static).update(
            f"🛒 Shopping Cart ({cart.total_items})"
        )
        self.query_one("#cart_total", Static).update(
            EMPTY_CART_MESSAGE if cart.is_empty else format_cart_total(cart)
        )

        results = self._results_table()
        for p in self.products:
            results.update_cell(p.id, "in_cart", self._in_cart_text(p.id))

    def action_add_to_cart(self) -> None:
        """Add one of the highlighted product to the cart."""
        product = self._selected_product()
        if product is None:
            self.notify("No product selected", severity="warning")
            return
        if not product.in_stock:
            self.notify(f"{product.name} is out of stock", severity="warning")
            return
        self.cart_engine.add_item(product, 1)
        logger.info("Added %s to cart", product.name)
        self.refresh_cart()
        self.notify(f"Added {product.name} to cart")

    def action_increase_quantity(self) -> None:
        line = self._selected_line()
        if line is None:
            return
        self.cart_engine.update_quantity(line.product_id, line.quantity + 1)
        self.refresh_cart()

    def action_decrease_quantity(self) -> None:
        """Decrease the highlighted line; at 1 the line is removed."""
        line = self._selected_line()
        if line is None:
            return
        self.cart_engine.update_quantity(line.product_id, line.quantity - 1)
        self.refresh_cart()

    def action_remove_line(self) -> None:
        line = self._selected_line()
        if line is None:
            self.notify("No cart line selected", severity="warning")
            return
        self.cart_engine.remove_item(line.product_id)
        self.refresh_cart()

    def action_clear_cart(self) -> None:
        if self.cart_engine.cart.is_empty:
            self.notify("Cart is already empty", severity="warning")
            return
        self.cart_engine.clear_cart()
        self.refresh_cart()
        self.notify("Cart cleared")
