# src/services/cart_engine.py

"""Cart state transitions.

Every transition takes the current :class:`~src.models.cart.Cart` and
returns the next one.  Carts are immutable, so callers always hold a
snapshot and can never alias the engine's internal state.  Totals are
recomputed from scratch by :meth:`Cart.from_lines` on every change.
"""

import logging
import threading
from dataclasses import dataclass, replace

from src.models.cart import Cart, CartLine
from src.models.product import Product

logger = logging.getLogger("storefront.cart")


# ── Pure transitions ─────────────────────────────────────


def add_item(cart: Cart, product: Product, quantity: int = 1) -> Cart:
    """Add *quantity* of *product*; non-positive quantities are ignored.

    An existing line keeps its original product snapshot and only has its
    quantity increased.  A new product is appended after existing lines.
    """
    if quantity <= 0:
        logger.debug(
            "Ignored add of %s with non-positive quantity %d",
            product.id,
            quantity,
        )
        return cart

    if cart.find_line(product.id) is not None:
        lines = [
            replace(line, quantity=line.quantity + quantity)
            if line.product_id == product.id
            else line
            for line in cart.items
        ]
    else:
        lines = [
            *cart.items,
            CartLine(product_id=product.id, quantity=quantity, product=product),
        ]

    return Cart.from_lines(lines)


def remove_item(cart: Cart, product_id: str) -> Cart:
    """Drop the line for *product_id*; unknown ids leave the cart as is."""
    if cart.find_line(product_id) is None:
        return cart
    return Cart.from_lines(
        line for line in cart.items if line.product_id != product_id
    )


def update_quantity(cart: Cart, product_id: str, quantity: int) -> Cart:
    """Set the absolute quantity of an existing line.

    A non-positive quantity removes the line.  Updating a product that is
    not in the cart does nothing.
    """
    if quantity <= 0:
        return remove_item(cart, product_id)

    if cart.find_line(product_id) is None:
        logger.debug("Ignored update of %s: not in cart", product_id)
        return cart

    return Cart.from_lines(
        replace(line, quantity=quantity)
        if line.product_id == product_id
        else line
        for line in cart.items
    )


def clear_cart(cart: Cart) -> Cart:
    """Return the empty cart."""
    return Cart()


def get_item_quantity(cart: Cart, product_id: str) -> int:
    """Quantity of *product_id* in the cart, or 0."""
    line = cart.find_line(product_id)
    return line.quantity if line is not None else 0


def is_in_cart(cart: Cart, product_id: str) -> bool:
    return cart.find_line(product_id) is not None


# ── Action values ────────────────────────────────────────


@dataclass(frozen=True)
class AddItem:
    product: Product
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = AddItem | RemoveItem | UpdateQuantity | ClearCart


def apply_action(cart: Cart, action: CartAction) -> Cart:
    """Dispatch *action* to the matching transition.

    Unrecognised actions leave the cart unchanged.
    """
    if isinstance(action, AddItem):
        return add_item(cart, action.product, action.quantity)
    if isinstance(action, RemoveItem):
        return remove_item(cart, action.product_id)
    if isinstance(action, UpdateQuantity):
        return update_quantity(cart, action.product_id, action.quantity)
    if isinstance(action, ClearCart):
        return clear_cart(cart)
    logger.warning("Ignored unknown cart action: %r", action)
    return cart


# ── Owned state handle ───────────────────────────────────


class CartEngine:
    """Owns one cart and applies transitions strictly one at a time.

    Create a single instance per session and pass it to whatever needs to
    read or change the cart.
    """

    def __init__(self, cart: Cart | None = None) -> None:
        self._cart = cart if cart is not None else Cart()
        self._lock = threading.Lock()

    @property
    def cart(self) -> Cart:
        """Current cart snapshot."""
        return self._cart

    def dispatch(self, action: CartAction) -> Cart:
        """Apply *action* and return the resulting snapshot."""
        with self._lock:
            before = self._cart
            self._cart = apply_action(before, action)
            if self._cart is not before:
                logger.debug(
                    "%s -> items=%d total=%.2f",
                    type(action).__name__,
                    self._cart.total_items,
                    self._cart.total_price,
                )
            return self._cart

    def add_item(self, product: Product, quantity: int = 1) -> Cart:
        return self.dispatch(AddItem(product, quantity))

    def remove_item(self, product_id: str) -> Cart:
        return self.dispatch(RemoveItem(product_id))

    def update_quantity(self, product_id: str, quantity: int) -> Cart:
        return self.dispatch(UpdateQuantity(product_id, quantity))

    def clear_cart(self) -> Cart:
        return self.dispatch(ClearCart())

    def get_item_quantity(self, product_id: str) -> int:
        return get_item_quantity(self._cart, product_id)

    def is_in_cart(self, product_id: str) -> bool:
        return is_in_cart(self._cart, product_id)
