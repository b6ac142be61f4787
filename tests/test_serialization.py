# tests/test_serialization.py

"""Tests for the camelCase JSON shape of the data models."""

import unittest

from src.models.category import Category, CategoryItem, Subcategory
from src.models.product import ListingProduct, ProductDetails, Variation
from src.models.review import Review, ReviewSet
from src.models.serialization import (
    camel_case,
    categories_to_dicts,
    details_to_dict,
    listing_to_dict,
    reviews_to_dict,
)


class TestCamelCase(unittest.TestCase):

    def test_conversion(self) -> None:
        self.assertEqual(camel_case("old_price"), "oldPrice")
        self.assertEqual(camel_case("is_official_store"), "isOfficialStore")
        self.assertEqual(camel_case("price"), "price")


class TestListingToDict(unittest.TestCase):

    def test_keys(self) -> None:
        data = listing_to_dict(ListingProduct(name="Kettle", price=4500.0))
        self.assertEqual(
            set(data),
            {
                "name", "price", "originalPrice", "brand", "category",
                "productId", "slug", "url", "image", "oldPrice",
                "discount", "rating", "reviews", "isOfficialStore",
                "hasExpressShipping", "campaign", "profitMargin",
                "profitAmount",
            },
        )
        self.assertIsNone(data["oldPrice"])


class TestDetailsToDict(unittest.TestCase):

    def _details(self) -> ProductDetails:
        return ProductDetails(
            title="Phone",
            price=100.0,
            url="https://www.jumia.com.ng/phone-1.html",
            variations=[Variation("Black", "v1", False, stock_quantity=2)],
            badges=["Pay on delivery"],
            specifications={"Weight (kg)": "0.2", "main_material": "Glass"},
        )

    def test_nested_variations_camelized(self) -> None:
        data = details_to_dict(self._details())
        self.assertEqual(
            data["variations"],
            [
                {
                    "name": "Black",
                    "value": "v1",
                    "available": False,
                    "price": None,
                    "stockQuantity": 2,
                }
            ],
        )

    def test_specification_labels_untouched(self) -> None:
        data = details_to_dict(self._details())
        self.assertEqual(
            data["specifications"],
            {"Weight (kg)": "0.2", "main_material": "Glass"},
        )

    def test_derived_flags(self) -> None:
        data = details_to_dict(self._details())
        self.assertFalse(data["isOfficialStore"])
        self.assertFalse(data["inStock"])

    def test_url_optional(self) -> None:
        self.assertIn("url", details_to_dict(self._details()))
        self.assertNotIn(
            "url", details_to_dict(self._details(), include_url=False)
        )

    def test_missing_specifications(self) -> None:
        data = details_to_dict(ProductDetails(title="x", price=0.0))
        self.assertIsNone(data["specifications"])
        self.assertIsNone(data["keyFeatures"])


class TestReviewsToDict(unittest.TestCase):

    def test_shape(self) -> None:
        data = reviews_to_dict(
            ReviewSet(
                overall_rating=4.0,
                total_ratings=3,
                rating_distribution={5: 2, 3: 1},
                reviews=[Review(rating=5, date="01-02-2024")],
                current_page=2,
                total_pages=2,
            )
        )
        self.assertEqual(data["overallRating"], 4.0)
        self.assertEqual(data["totalRatings"], 3)
        self.assertEqual(data["ratingDistribution"], {5: 2, 3: 1})
        self.assertEqual(data["currentPage"], 2)
        self.assertFalse(data["hasMore"])
        self.assertEqual(
            data["reviews"][0],
            {
                "rating": 5, "title": "", "comment": "",
                "date": "01-02-2024", "author": "Anonymous",
                "verified": False,
            },
        )


class TestCategoriesToDicts(unittest.TestCase):

    def test_nested_tree(self) -> None:
        data = categories_to_dicts(
            [
                Category(
                    "Phones",
                    "https://x.test/phones/",
                    [
                        Subcategory(
                            "Mobile",
                            "https://x.test/mobile/",
                            [CategoryItem("Smart", "https://x.test/s/")],
                        )
                    ],
                )
            ]
        )
        self.assertEqual(
            data[0]["subcategories"][0]["items"],
            [{"name": "Smart", "url": "https://x.test/s/"}],
        )


if __name__ == "__main__":
    unittest.main()
