# src/models/cart.py

"""Immutable cart snapshot models.

A :class:`Cart` computes ``total_items`` and ``total_price`` from its
``items`` on construction; neither can be passed in.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from src.models.product import Product

_CENT = Decimal("0.01")


def round_money(amount: Decimal) -> float:
    """Round an exact amount to cents, halves away from zero."""
    return float(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def line_amount(price: float, quantity: int) -> Decimal:
    """Exact ``price × quantity`` using the price's shortest repr."""
    return Decimal(repr(price)) * quantity


@dataclass(frozen=True)
class CartLine:
    """One distinct product in the cart."""

    product_id: str
    quantity: int
    product: Product

    @property
    def subtotal(self) -> float:
        """Line price, rounded to cents."""
        return round_money(line_amount(self.product.price, self.quantity))


@dataclass(frozen=True)
class Cart:
    """Snapshot of the whole cart."""

    items: tuple[CartLine, ...] = ()
    total_items: int = field(init=False, default=0)
    total_price: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        items = tuple(self.items)
        exact_total = sum(
            (line_amount(line.product.price, line.quantity) for line in items),
            Decimal(0),
        )
        object.__setattr__(self, "items", items)
        object.__setattr__(
            self, "total_items", sum(line.quantity for line in items)
        )
        object.__setattr__(self, "total_price", round_money(exact_total))

    @classmethod
    def from_lines(cls, lines: Iterable[CartLine]) -> "Cart":
        """Build a cart whose totals are the exact aggregates of *lines*."""
        return cls(items=tuple(lines))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_line(self, product_id: str) -> CartLine | None:
        """Return the line for *product_id*, or ``None``."""
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None
