# src/scrapers/category_menu_extractor.py

"""Build the category tree from a saved copy of the site's flyout menu.

Used offline to regenerate ``data/categories.json``; the API itself only
reads the stored tree.
"""

import logging

from bs4 import BeautifulSoup, Tag

from src.models.category import Category, CategoryItem, Subcategory
from src.scrapers import dom
from src.scrapers.schema import ExtractionSchema, load_schema

logger = logging.getLogger("jumia_reseller.categories")


class CategoryMenuExtractor:
    """Walk ``flyout`` menu blocks into a three-level tree."""

    def __init__(self, schema: ExtractionSchema | None = None) -> None:
        schema = schema if schema is not None else load_schema()
        self.selectors = schema.category_menu

    def _parse_subcategory(self, block: Tag) -> Subcategory | None:
        sel = self.selectors
        link = block.select_one(sel["subcategory_link"])
        name = dom.select_text(block, sel["subcategory_link"])
        if not name:
            return None
        items: list[CategoryItem] = []
        for item in block.select(sel["item"]):
            text = item.get_text().strip()
            if text:
                items.append(
                    CategoryItem(name=text, url=dom.attr(item, "href"))
                )
        return Subcategory(name=name, url=dom.attr(link, "href"), items=items)

    def _parse_flyout(self, container: Tag) -> Category | None:
        sel = self.selectors
        main_link = container.select_one(sel["main_link"])
        name = dom.select_text(main_link, sel["main_name"])
        if not name:
            return None

        category = Category(name=name, url=dom.attr(main_link, "href"))
        submenu = container.select_one(sel["submenu"])
        if submenu is not None:
            for block in submenu.select(sel["subcategory"]):
                sub = self._parse_subcategory(block)
                if sub is not None:
                    category.subcategories.append(sub)
        return category

    def extract(self, soup: BeautifulSoup) -> list[Category]:
        """Return top-level categories in menu order."""
        categories: list[Category] = []
        for container in soup.select(self.selectors["flyout"]):
            category = self._parse_flyout(container)
            if category is not None:
                categories.append(category)
        logger.info("Found %d categories in menu markup", len(categories))
        return categories
