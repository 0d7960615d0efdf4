# src/services/search_engine.py

"""Pure, side-effect-free catalog search with simple page slicing."""

import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.models.product import Product
from src.models.search import SearchFilters, SearchPage

logger = logging.getLogger("storefront.search")


def paginate(
    products: Sequence[Product],
    page: int = Settings.DEFAULT_PAGE,
    limit: int = Settings.DEFAULT_LIMIT,
) -> SearchPage:
    """Slice *products* into one page.

    ``page`` below 1 and ``limit`` below 1 are clamped to 1.  A page past
    the end is empty; ``total`` always reports the full length.
    """
    page = max(page, 1)
    limit = max(limit, 1)
    start = (page - 1) * limit
    return SearchPage(
        products=tuple(products[start:start + limit]),
        total=len(products),
        page=page,
        limit=limit,
    )


def search(
    catalog: Sequence[Product],
    filters: SearchFilters,
    page: int = Settings.DEFAULT_PAGE,
    limit: int = Settings.DEFAULT_LIMIT,
) -> SearchPage:
    """Filter *catalog* by *filters* and return the requested page.

    The catalog is never mutated and identical inputs always give
    identical output.
    """
    matches = ProductFilter.apply(catalog, filters)
    result = paginate(matches, page, limit)
    logger.debug(
        "Search query=%r category=%r matched %d/%d (page=%d, limit=%d)",
        filters.query,
        filters.category,
        result.total,
        len(catalog),
        result.page,
        result.limit,
    )
    return result
