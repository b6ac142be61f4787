# src/models/category.py

"""Three-level category tree loaded from static data."""

from dataclasses import dataclass, field


@dataclass
class CategoryItem:
    """Leaf entry of the category menu."""

    name: str
    url: str


@dataclass
class Subcategory:
    """Second-level grouping holding leaf items."""

    name: str
    url: str
    items: list[CategoryItem] = field(
        default_factory=lambda: list[CategoryItem]()
    )


@dataclass
class Category:
    """Top-level category with its ordered subcategories."""

    name: str
    url: str
    subcategories: list[Subcategory] = field(
        default_factory=lambda: list[Subcategory]()
    )
