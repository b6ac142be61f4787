# tests/test_catalog_service.py

"""Tests for payload assembly in the catalog service."""

import unittest
from unittest.mock import MagicMock

from src.errors import NetworkError
from src.models.category import Category
from src.models.product import ListingProduct, ProductDetails, Variation
from src.models.review import Review, ReviewSet
from src.services.catalog_service import CatalogService


def _listing() -> list[ListingProduct]:
    return [
        ListingProduct(
            name="Tecno Spark 10",
            price=85000.0,
            original_price=85000.0,
            old_price=100000.0,
            slug="tecno-spark-10-1",
        ),
        ListingProduct(name="Kettle", price=4500.0, original_price=4500.0),
    ]


class TestCatalogService(unittest.TestCase):
    """Each operation builds one scraper and marks prices up."""

    def setUp(self) -> None:
        self.scraper = MagicMock()
        self.factory = MagicMock(return_value=self.scraper)
        self.store = MagicMock()
        self.service = CatalogService(
            margin_pct=10,
            scraper_factory=self.factory,
            category_store=self.store,
        )

    def test_home_products_payload(self) -> None:
        self.scraper.scrape_home_page.return_value = _listing()

        payload = self.service.home_products()

        self.assertTrue(payload["success"])
        self.assertEqual(payload["count"], 2)
        self.assertEqual(payload["profitMargin"], 10)
        first = payload["products"][0]
        self.assertEqual(first["price"], 93500.0)
        self.assertEqual(first["originalPrice"], 85000.0)
        self.assertEqual(first["oldPrice"], 108500.0)
        self.assertEqual(first["profitAmount"], 8500)
        self.assertEqual(first["profitMargin"], 10.0)

    def test_fresh_scraper_per_operation(self) -> None:
        self.scraper.scrape_home_page.return_value = []
        self.service.home_products()
        self.service.home_products()
        self.assertEqual(self.factory.call_count, 2)

    def test_category_products(self) -> None:
        self.scraper.scrape_category.return_value = _listing()

        payload = self.service.category_products(
            "https://www.jumia.com.ng/phones-tablets/"
        )

        self.scraper.scrape_category.assert_called_once_with(
            "https://www.jumia.com.ng/phones-tablets/"
        )
        self.assertEqual(
            [p["name"] for p in payload["products"]],
            ["Tecno Spark 10", "Kettle"],
        )

    def test_search_with_price_range(self) -> None:
        self.scraper.search_products.return_value = _listing()

        payload = self.service.search("phone", "1000", "90000")

        self.scraper.search_products.assert_called_once_with(
            "phone", "1000", "90000"
        )
        self.assertEqual(payload["query"], "phone")
        self.assertEqual(payload["priceRange"], "1000-90000")
        self.assertEqual(payload["count"], 2)

    def test_search_without_full_range(self) -> None:
        self.scraper.search_products.return_value = []

        payload = self.service.search("phone", "1000", None)

        self.assertIsNone(payload["priceRange"])
        self.assertEqual(payload["products"], [])
        self.assertEqual(payload["count"], 0)

    def test_product_details_payload(self) -> None:
        self.scraper.build_product_url.return_value = (
            "https://www.jumia.com.ng/sneakers-1.html"
        )
        self.scraper.scrape_product_details.return_value = ProductDetails(
            title="Sneakers",
            price=25000.0,
            original_price=25000.0,
            sku="GE779FA0SNKNAFAMZ",
            url="https://www.jumia.com.ng/sneakers-1.html",
            variations=[Variation("EU 40", "v40", price=25000.0)],
            badges=["Official Store"],
            specifications={"Weight (kg)": "0.2"},
        )

        payload = self.service.product_details("sneakers-1")

        self.scraper.scrape_product_details.assert_called_once_with(
            "https://www.jumia.com.ng/sneakers-1.html"
        )
        product = payload["product"]
        self.assertTrue(payload["success"])
        self.assertEqual(payload["profitMargin"], 10)
        self.assertEqual(product["slug"], "sneakers-1")
        self.assertNotIn("url", product)
        self.assertEqual(product["price"], 27500.0)
        self.assertEqual(product["variations"][0]["price"], 25000.0)
        self.assertEqual(product["specifications"], {"Weight (kg)": "0.2"})
        self.assertTrue(product["isOfficialStore"])
        self.assertTrue(product["inStock"])

    def test_product_reviews_payload(self) -> None:
        self.scraper.scrape_product_reviews.return_value = ReviewSet(
            overall_rating=4.2,
            total_ratings=10,
            rating_distribution={5: 10},
            reviews=[Review(rating=5, title="Good")],
            current_page=1,
            total_pages=2,
        )

        payload = self.service.product_reviews("SKU1", 1)

        self.scraper.scrape_product_reviews.assert_called_once_with("SKU1", 1)
        self.assertTrue(payload["success"])
        self.assertEqual(payload["overallRating"], 4.2)
        self.assertEqual(payload["ratingDistribution"], {5: 10})
        self.assertEqual(payload["reviews"][0]["author"], "Anonymous")
        self.assertTrue(payload["hasMore"])

    def test_categories_payload(self) -> None:
        self.store.load.return_value = [
            Category("Computing", "https://www.jumia.com.ng/computing/")
        ]

        payload = self.service.categories()

        self.assertEqual(payload["count"], 1)
        self.assertEqual(
            payload["categories"][0],
            {
                "name": "Computing",
                "url": "https://www.jumia.com.ng/computing/",
                "subcategories": [],
            },
        )

    def test_failures_propagate(self) -> None:
        self.scraper.scrape_home_page.side_effect = NetworkError("boom")
        with self.assertRaises(NetworkError):
            self.service.home_products()

    def test_product_url(self) -> None:
        self.assertEqual(
            self.service.product_url("abc-1"),
            "https://www.jumia.com.ng/abc-1.html",
        )


if __name__ == "__main__":
    unittest.main()
