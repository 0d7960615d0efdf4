# src/ui/formatting.py

"""Text formatting shared by the TUI and the headless CLI."""

from src.config.settings import Settings
from src.models.cart import Cart, CartLine
from src.models.product import Product

EMPTY_RESULTS_MESSAGE = "No products found"
EMPTY_RESULTS_HINT = "Try adjusting your search criteria"
EMPTY_CART_MESSAGE = "Your cart is empty"


def format_price(value: float) -> str:
    """Render *value* as currency, e.g. ``$1,999.99``."""
    sign = "-" if value < 0 else ""
    return f"{sign}{Settings.CURRENCY_SYMBOL}{abs(value):,.2f}"


def format_each(price: float) -> str:
    return f"{format_price(price)} each"


def format_subtotal(line: CartLine) -> str:
    return f"Subtotal: {format_price(line.subtotal)}"


def format_cart_total(cart: Cart) -> str:
    """Cart footer, e.g. ``Total (2 items): $2,299.98``."""
    return (
        f"Total ({cart.total_items} items): "
        f"{format_price(cart.total_price)}"
    )


def format_result_count(count: int) -> str:
    if count == 1:
        return "1 product found"
    return f"{count} products found"


def truncate_text(
    text: str, max_length: int = Settings.DESCRIPTION_MAX_LENGTH
) -> str:
    """Cut *text* to *max_length* characters, marking the cut with ``...``."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def stock_label(product: Product) -> str:
    return "In Stock" if product.in_stock else "Out of Stock"
