# src/storage/category_store.py

"""Static category tree stored as JSON on disk."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.errors import ConfigError
from src.models.category import Category, CategoryItem, Subcategory

logger = logging.getLogger("jumia_reseller.storage")


def normalize_url(url: str, base_url: str) -> str:
    """Prefix relative URLs with the site origin exactly once."""
    if url.startswith("http"):
        return url
    return base_url + url


class CategoryStore:
    """Read (and regenerate) the three-level category tree.

    The file is re-read on every :meth:`load`; there is no in-memory
    cache, so edits to the JSON take effect on the next request.
    """

    def __init__(
        self,
        path: Path | None = None,
        base_url: str = Settings.BASE_URL,
    ) -> None:
        self.path: Path = path or Settings.CATEGORIES_PATH
        self.base_url = base_url

    def _read_raw(self) -> list[dict[str, Any]]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data: Any = json.load(f)
        except FileNotFoundError as exc:
            raise ConfigError(
                f"Category data not found: {self.path}"
            ) from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(
                f"Category data is not valid JSON: {exc}"
            ) from exc
        if not isinstance(data, list):
            raise ConfigError(
                "Category data must be a list of categories"
            )
        return data  # type: ignore[return-value]

    @staticmethod
    def _text(raw: dict[str, Any], key: str) -> str:
        value = raw[key]
        if not isinstance(value, str):
            raise ConfigError(
                f"Category field '{key}' must be a string, got {value!r}"
            )
        return value

    def _build_item(self, raw: dict[str, Any]) -> CategoryItem:
        return CategoryItem(
            name=self._text(raw, "name"),
            url=normalize_url(self._text(raw, "url"), self.base_url),
        )

    def _build_subcategory(self, raw: dict[str, Any]) -> Subcategory:
        return Subcategory(
            name=self._text(raw, "name"),
            url=normalize_url(self._text(raw, "url"), self.base_url),
            items=[self._build_item(i) for i in raw.get("items", [])],
        )

    def _build_category(self, raw: dict[str, Any]) -> Category:
        return Category(
            name=self._text(raw, "name"),
            url=normalize_url(self._text(raw, "url"), self.base_url),
            subcategories=[
                self._build_subcategory(s)
                for s in raw.get("subcategories", [])
            ],
        )

    def load(self) -> list[Category]:
        """Load the tree with every URL made absolute.

        Raises:
            ConfigError: when the file is missing, unreadable or has
                the wrong shape.
        """
        raw_categories = self._read_raw()
        try:
            categories = [self._build_category(c) for c in raw_categories]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ConfigError(
                f"Malformed category entry: {exc!r}"
            ) from exc
        logger.debug(
            "Loaded %d categories from %s", len(categories), self.path
        )
        return categories

    def save(self, categories: list[Category]) -> Path:
        """Write *categories* to the backing file as-is."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(
                [asdict(c) for c in categories],
                f,
                ensure_ascii=False,
                indent=2,
            )
        logger.info(
            "Saved %d categories to %s", len(categories), self.path
        )
        return self.path
