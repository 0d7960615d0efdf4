# tests/test_catalog_loader.py

"""Tests for loading the catalog JSON file."""

import json
import tempfile
import unittest
from pathlib import Path

from src.storage.catalog_loader import Catalog, CatalogLoadError, load_catalog


class TestLoadBundledCatalog(unittest.TestCase):
    """The catalog shipped in src/config/catalog.json."""

    def test_loads_twelve_products(self) -> None:
        catalog = load_catalog()
        self.assertIsInstance(catalog, Catalog)
        self.assertEqual(len(catalog.products), 12)

    def test_ids_unique(self) -> None:
        ids = [p.id for p in load_catalog().products]
        self.assertEqual(len(ids), len(set(ids)))

    def test_categories_start_with_all(self) -> None:
        categories = load_catalog().categories
        self.assertEqual(categories[0], "All")
        self.assertIn("Electronics", categories)
        self.assertIn("Kitchen", categories)

    def test_every_product_category_is_known(self) -> None:
        catalog = load_catalog()
        for product in catalog.products:
            with self.subTest(product=product.id):
                self.assertIn(product.category, catalog.categories)

    def test_field_domains(self) -> None:
        for product in load_catalog().products:
            with self.subTest(product=product.id):
                self.assertGreaterEqual(product.price, 0)
                self.assertTrue(0.0 <= product.rating <= 5.0)
                self.assertGreaterEqual(product.review_count, 0)


class TestLoadCustomCatalog(unittest.TestCase):
    """load_catalog with explicit files."""

    def setUp(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp())

    def _write(self, name: str, content: str) -> Path:
        path = self.tmp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(CatalogLoadError):
            load_catalog(self.tmp_dir / "absent.json")

    def test_malformed_json_raises(self) -> None:
        path = self._write("bad.json", "{not json")
        with self.assertRaises(CatalogLoadError):
            load_catalog(path)

    def test_missing_required_field_raises(self) -> None:
        path = self._write(
            "partial.json",
            json.dumps({"products": [{"id": "1", "price": 1.0}]}),
        )
        with self.assertRaises(CatalogLoadError):
            load_catalog(path)

    def test_categories_derived_when_absent(self) -> None:
        """Without a category list, categories come from the products."""
        path = self._write(
            "derived.json",
            json.dumps(
                {
                    "products": [
                        {"id": "1", "name": "A", "price": 1, "category": "Toys"},
                        {"id": "2", "name": "B", "price": 2, "category": "Books"},
                    ]
                }
            ),
        )
        catalog = load_catalog(path)
        self.assertEqual(catalog.categories, ("All", "Books", "Toys"))

    def test_all_moved_to_front(self) -> None:
        path = self._write(
            "order.json",
            json.dumps({"categories": ["Toys", "All"], "products": []}),
        )
        self.assertEqual(load_catalog(path).categories, ("All", "Toys"))


if __name__ == "__main__":
    unittest.main()
