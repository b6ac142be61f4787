# src/models/serialization.py

"""Serialise models to the camelCase JSON shape clients consume."""

from dataclasses import asdict
from typing import Any

from src.models.category import Category
from src.models.product import ListingProduct, ProductDetails
from src.models.review import ReviewSet


def camel_case(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _camelize(value: Any) -> Any:
    """Recursively rename dict keys; leaves non-string keys alone."""
    if isinstance(value, dict):
        return {
            (camel_case(k) if isinstance(k, str) else k): _camelize(v)
            for k, v in value.items()  # type: ignore[union-attr]
        }
    if isinstance(value, list):
        return [_camelize(v) for v in value]  # type: ignore[union-attr]
    return value


def listing_to_dict(product: ListingProduct) -> dict[str, Any]:
    """Serialise one listing card."""
    result: dict[str, Any] = _camelize(asdict(product))
    return result


def listings_to_dicts(
    products: list[ListingProduct],
) -> list[dict[str, Any]]:
    """Serialise a listing, preserving order."""
    return [listing_to_dict(p) for p in products]


def details_to_dict(
    details: ProductDetails,
    include_url: bool = True,
) -> dict[str, Any]:
    """Serialise a detail page, adding the derived flags.

    Specification labels are scraped text and keep their original case.
    """
    specifications = details.specifications
    raw = asdict(details)
    raw.pop("specifications")
    data: dict[str, Any] = _camelize(raw)
    data["specifications"] = (
        dict(specifications) if specifications is not None else None
    )
    data["isOfficialStore"] = details.is_official_store
    data["inStock"] = details.in_stock
    if not include_url:
        data.pop("url", None)
    return data


def reviews_to_dict(review_set: ReviewSet) -> dict[str, Any]:
    """Serialise a review page with its ``hasMore`` flag."""
    data: dict[str, Any] = _camelize(asdict(review_set))
    data["hasMore"] = review_set.has_more
    return data


def categories_to_dicts(
    categories: list[Category],
) -> list[dict[str, Any]]:
    """Serialise the category tree."""
    return [asdict(c) for c in categories]
