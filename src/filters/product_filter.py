# src/filters/product_filter.py

"""Conjunctive product filtering for catalog search."""

import logging
from collections.abc import Iterable

from src.config.settings import Settings
from src.models.product import Product
from src.models.search import SearchFilters

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Independent filter predicates combined by logical AND."""

    @staticmethod
    def matches_query(product: Product, query: str) -> bool:
        """Case-insensitive substring match on name, description, or tags.

        A blank query matches everything.
        """
        needle = query.strip().lower()
        if not needle:
            return True
        return (
            needle in product.name.lower()
            or needle in product.description.lower()
            or any(needle in tag.lower() for tag in product.tags)
        )

    @staticmethod
    def matches_category(product: Product, category: str | None) -> bool:
        """Exact category match; ``None``/empty/"All" matches everything."""
        if not category or category == Settings.ALL_CATEGORIES:
            return True
        return product.category == category

    @staticmethod
    def matches_price(
        product: Product,
        min_price: float | None,
        max_price: float | None,
    ) -> bool:
        """Inclusive price bounds; negative bounds count as unset."""
        if min_price is not None and min_price >= 0:
            if product.price < min_price:
                return False
        if max_price is not None and max_price >= 0:
            if product.price > max_price:
                return False
        return True

    @staticmethod
    def matches_stock(product: Product, in_stock: bool | None) -> bool:
        if in_stock is None:
            return True
        return product.in_stock == in_stock

    @staticmethod
    def matches_rating(product: Product, min_rating: float | None) -> bool:
        if min_rating is None:
            return True
        return product.rating >= min_rating

    @staticmethod
    def matches(product: Product, filters: SearchFilters) -> bool:
        """True when *product* satisfies every filter in *filters*."""
        return (
            ProductFilter.matches_query(product, filters.query)
            and ProductFilter.matches_category(product, filters.category)
            and ProductFilter.matches_price(
                product, filters.min_price, filters.max_price
            )
            and ProductFilter.matches_stock(product, filters.in_stock)
            and ProductFilter.matches_rating(product, filters.min_rating)
        )

    @staticmethod
    def apply(
        products: Iterable[Product],
        filters: SearchFilters,
    ) -> list[Product]:
        """Return the products matching *filters*, in catalog order."""
        candidates = list(products)
        kept = [p for p in candidates if ProductFilter.matches(p, filters)]

        excluded = len(candidates) - len(kept)
        if excluded:
            logger.debug(
                "Filtered out %d of %d products (active filters=%d)",
                excluded,
                len(candidates),
                filters.active_filter_count,
            )

        return kept
