# tests/test_app.py

"""Smoke tests for the dashboard using Textual's Pilot."""

import unittest
from typing import cast
from unittest.mock import AsyncMock, patch

from textual.widgets import DataTable, Input, Select, Static

from src.models.product import Product
from src.models.search import SearchFilters
from src.services.cart_engine import CartEngine
from src.services.catalog_service import CatalogLoadError, CatalogService
from src.ui.app import StorefrontApp

PRODUCTS = [
    Product(
        id="1",
        name="MacBook Pro",
        price=1999.99,
        description="Powerful laptop for professionals",
        category="Electronics",
        rating=4.8,
        review_count=120,
        tags=("laptop", "apple", "professional"),
    ),
    Product(
        id="2",
        name="Coffee Machine",
        price=299.99,
        description="Automatic coffee maker",
        category="Kitchen",
        rating=4.2,
        review_count=85,
        tags=("coffee", "kitchen", "automatic"),
    ),
    Product(
        id="3",
        name="Reading Lamp",
        price=24.99,
        category="Lighting",
        rating=3.9,
        in_stock=False,
    ),
]

CATEGORIES = ["All", "Electronics", "Kitchen", "Lighting"]


def _make_app(engine: CartEngine | None = None) -> StorefrontApp:
    """Build an app over the small in-memory test catalog."""
    return StorefrontApp(
        catalog_service=CatalogService(PRODUCTS, CATEGORIES),
        cart_engine=engine or CartEngine(),
    )


def _table(app: StorefrontApp, table_id: str) -> DataTable[str]:
    return cast(DataTable[str], app.query_one(table_id, DataTable))


class TestStorefrontApp(unittest.IsolatedAsyncioTestCase):
    """Smoke tests for the Textual dashboard."""

    async def test_app_composes_without_crash(self) -> None:
        """The app starts and renders all widgets."""
        app = _make_app()
        async with app.run_test() as pilot:
            app.query_one("#search_input", Input)
            app.query_one("#search_btn")
            app.query_one("#category_select", Select)
            app.query_one("#results_table", DataTable)
            app.query_one("#cart_table", DataTable)
            app.query_one("#status", Static)
            app.query_one("#cart_total", Static)
            await pilot.pause()

    async def test_initial_load_populates_table(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await app.perform_search()
            self.assertEqual(len(app.products), 3)
            self.assertEqual(_table(app, "#results_table").row_count, 3)
            self.assertEqual(app.status_message, "3 products found")
            self.assertEqual(app.categories, CATEGORIES)

    async def test_results_table_columns(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            cols = [
                str(c.label)
                for c in _table(app, "#results_table").columns.values()
            ]
            self.assertEqual(
                cols,
                ["Name", "Category", "Price", "Rating", "Stock", "In Cart"],
            )

    async def test_filters_narrow_results(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.set_filters(query="coffee")
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual([p.id for p in app.products], ["2"])
            self.assertEqual(app.status_message, "1 product found")

    async def test_no_match_shows_empty_state(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.set_filters(query="nonexistentproduct123")
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual(app.products, [])
            self.assertTrue(
                app.status_message.startswith("No products found")
            )

    async def test_category_select_filters(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#category_select", Select).value = "Kitchen"
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual(app.filters.category, "Kitchen")
            self.assertEqual([p.id for p in app.products], ["2"])

    async def test_typing_is_debounced(self) -> None:
        """The query applies only after the debounce interval."""
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#search_input", Input).value = "lamp"
            await pilot.pause()
            self.assertEqual(app.filters.query, "")
            await pilot.pause(0.5)
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual(app.filters.query, "lamp")
            self.assertEqual([p.id for p in app.products], ["3"])

    async def test_price_inputs_ignore_garbage(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#min_price_input", Input).value = "abc"
            await pilot.pause()
            self.assertIsNone(app.filters.min_price)
            app.query_one("#min_price_input", Input).value = "100"
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual(app.filters.min_price, 100.0)
            self.assertEqual(
                sorted(p.id for p in app.products), ["1", "2"]
            )

    async def test_reset_filters(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.set_filters(query="coffee", min_rating=4.0)
            await app.workers.wait_for_complete()
            app.action_reset_filters()
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertEqual(app.filters, SearchFilters())
            self.assertEqual(len(app.products), 3)

    async def test_add_to_cart_updates_cart(self) -> None:
        engine = CartEngine()
        app = _make_app(engine)
        async with app.run_test() as pilot:
            await pilot.pause()
            await app.perform_search()
            app.action_add_to_cart()
            await pilot.pause()
            self.assertEqual(engine.get_item_quantity("1"), 1)
            self.assertEqual(_table(app, "#cart_table").row_count, 1)
            self.assertEqual(
                _table(app, "#results_table").get_cell("1", "in_cart"), "1"
            )

    async def test_out_of_stock_not_added(self) -> None:
        engine = CartEngine()
        app = _make_app(engine)
        async with app.run_test(notifications=True) as pilot:
            await pilot.pause()
            await app.perform_search()
            _table(app, "#results_table").move_cursor(row=2)
            app.action_add_to_cart()
            await pilot.pause()
            self.assertTrue(engine.cart.is_empty)

    async def test_quantity_controls(self) -> None:
        """+ increases, - at quantity 1 removes the line."""
        engine = CartEngine()
        engine.add_item(PRODUCTS[1], 1)
        app = _make_app(engine)
        async with app.run_test() as pilot:
            await pilot.pause()
            await app.perform_search()
            app.action_increase_quantity()
            self.assertEqual(engine.get_item_quantity("2"), 2)
            app.action_decrease_quantity()
            app.action_decrease_quantity()
            await pilot.pause()
            self.assertFalse(engine.is_in_cart("2"))
            self.assertEqual(_table(app, "#cart_table").row_count, 0)

    async def test_remove_and_clear(self) -> None:
        engine = CartEngine()
        engine.add_item(PRODUCTS[0], 1)
        engine.add_item(PRODUCTS[1], 2)
        app = _make_app(engine)
        async with app.run_test(notifications=True) as pilot:
            await pilot.pause()
            app.action_remove_line()
            self.assertEqual(
                [line.product_id for line in engine.cart.items], ["2"]
            )
            app.action_clear_cart()
            await pilot.pause()
            self.assertTrue(engine.cart.is_empty)

    async def test_load_error_then_retry(self) -> None:
        """A failed load shows the error; retry re-runs the same search."""
        app = _make_app()
        async with app.run_test(notifications=True) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            with patch.object(
                app.catalog_service,
                "load_products",
                new=AsyncMock(side_effect=CatalogLoadError("Network error")),
            ):
                await app.perform_search()
            self.assertEqual(app.last_error, "Network error")
            self.assertIn("Error loading products", app.status_message)

            app.action_retry()
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            self.assertIsNone(app.last_error)
            self.assertEqual(len(app.products), 3)


if __name__ == "__main__":
    unittest.main()
