# src/storage/catalog_loader.py

"""Loads the bundled mock catalog from disk."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.storage")


class CatalogLoadError(Exception):
    """The product catalog could not be loaded."""


@dataclass(frozen=True)
class Catalog:
    """Static product collection plus the category list ("All" first)."""

    products: tuple[Product, ...]
    categories: tuple[str, ...]


def load_catalog(path: Path | None = None) -> Catalog:
    """Read and parse the catalog JSON file.

    Raises:
        CatalogLoadError: the file is missing or its records are malformed.
    """
    catalog_path = path or Settings.CATALOG_PATH
    try:
        with open(catalog_path, encoding="utf-8") as f:
            raw = json.load(f)
        products = tuple(Product.from_dict(item) for item in raw["products"])
        categories = [str(c) for c in raw.get("categories", [])]
    except (OSError, ValueError, KeyError, TypeError) as exc:
        logger.error(
            "Failed to load catalog from %s", catalog_path, exc_info=True
        )
        raise CatalogLoadError(
            f"Failed to load catalog from {catalog_path}: {exc}"
        ) from exc

    # The synthetic "All" entry always leads the list
    if Settings.ALL_CATEGORIES in categories:
        categories.remove(Settings.ALL_CATEGORIES)
    if not categories:
        categories = sorted({p.category for p in products if p.category})
    categories.insert(0, Settings.ALL_CATEGORIES)

    logger.info(
        "Loaded %d products in %d categories from %s",
        len(products),
        len(categories) - 1,
        catalog_path,
    )
    return Catalog(products=products, categories=tuple(categories))
