# src/services/catalog_service.py

"""Async catalog facade with simulated network latency."""

import asyncio
import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.models.product import Product
from src.models.search import SearchFilters, SearchPage
from src.services.search_engine import paginate, search
from src.storage.catalog_loader import CatalogLoadError, load_catalog

logger = logging.getLogger("storefront.catalog")

__all__ = ["CatalogLoadError", "CatalogService"]


class CatalogService:
    """Serves the in-memory catalog as if it were a remote API.

    Only the awaited delay is simulated; filtering and paging are the
    synchronous search engine.
    """

    def __init__(
        self,
        products: Sequence[Product] | None = None,
        categories: Sequence[str] | None = None,
    ) -> None:
        if products is None or categories is None:
            catalog = load_catalog()
            products = catalog.products if products is None else products
            categories = (
                catalog.categories if categories is None else categories
            )
        self._products: tuple[Product, ...] = tuple(products)
        self._categories: tuple[str, ...] = tuple(categories)

    async def get_all_products(
        self,
        page: int = Settings.DEFAULT_PAGE,
        limit: int = Settings.DEFAULT_LIMIT,
    ) -> SearchPage:
        """Return one page of the unfiltered catalog."""
        await asyncio.sleep(Settings.LIST_DELAY)
        return paginate(self._products, page, limit)

    async def search_products(
        self,
        filters: SearchFilters,
        page: int = Settings.DEFAULT_PAGE,
        limit: int = Settings.DEFAULT_LIMIT,
    ) -> SearchPage:
        """Return one page of products matching *filters*."""
        await asyncio.sleep(Settings.SEARCH_DELAY)
        return search(self._products, filters, page, limit)

    async def get_product_by_id(self, product_id: str) -> Product | None:
        await asyncio.sleep(Settings.LOOKUP_DELAY)
        for product in self._products:
            if product.id == product_id:
                return product
        logger.debug("No product with id %r", product_id)
        return None

    async def get_categories(self) -> list[str]:
        await asyncio.sleep(Settings.LOOKUP_DELAY)
        return list(self._categories)

    async def load_products(self, filters: SearchFilters) -> SearchPage:
        """Dashboard loading rule: unfiltered listing unless something narrows."""
        if filters.is_default:
            return await self.get_all_products()
        return await self.search_products(filters)
