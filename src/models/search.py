# src/models/search.py

"""Search query and result models."""

from dataclasses import dataclass

from src.config.settings import Settings
from src.models.product import Product


@dataclass(frozen=True)
class SearchFilters:
    """Transient filter criteria; every unset field means "no constraint"."""

    query: str = ""
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock: bool | None = None
    min_rating: float | None = None

    @property
    def active_filter_count(self) -> int:
        """Number of filters that actually narrow a search."""
        count = 0
        if self.query.strip():
            count += 1
        if self.category and self.category != Settings.ALL_CATEGORIES:
            count += 1
        if self.min_price is not None and self.min_price >= 0:
            count += 1
        if self.max_price is not None and self.max_price >= 0:
            count += 1
        if self.in_stock is not None:
            count += 1
        if self.min_rating is not None:
            count += 1
        return count

    @property
    def is_default(self) -> bool:
        return self.active_filter_count == 0


@dataclass(frozen=True)
class SearchPage:
    """One page of search results plus the pre-pagination match count."""

    products: tuple[Product, ...]
    total: int
    page: int
    limit: int
