# src/services/catalog_service.py

"""One fetch, extract and mark-up cycle per client operation."""

import logging
from collections.abc import Callable
from typing import Any

from src.config.settings import Settings
from src.filters.profit_margin import ProfitMargin
from src.models.serialization import (
    categories_to_dicts,
    details_to_dict,
    listings_to_dicts,
    reviews_to_dict,
)
from src.scrapers.jumia_scraper import JumiaScraper
from src.scrapers.schema import ExtractionSchema, load_schema
from src.storage.category_store import CategoryStore

logger = logging.getLogger("jumia_reseller.catalog")


class CatalogService:
    """Assemble the JSON payloads served to clients.

    A fresh scraper is built for every operation so concurrent requests
    never share an HTTP session. Every payload carries ``success: True``;
    failures propagate as exceptions for the caller to map.
    """

    def __init__(
        self,
        margin_pct: float | None = None,
        scraper_factory: Callable[[], JumiaScraper] | None = None,
        category_store: CategoryStore | None = None,
        schema: ExtractionSchema | None = None,
    ) -> None:
        self.margin_pct: float = (
            margin_pct if margin_pct is not None else Settings.PROFIT_MARGIN
        )
        self._schema = schema
        if scraper_factory is None and schema is None:
            self._schema = load_schema()
        self._scraper_factory = scraper_factory or self._default_scraper
        self.category_store = category_store or CategoryStore()

    def _default_scraper(self) -> JumiaScraper:
        return JumiaScraper(self._schema)

    def _scraper(self) -> JumiaScraper:
        return self._scraper_factory()

    def _listing_payload(
        self, products: list[Any], **extra: Any,
    ) -> dict[str, Any]:
        marked = ProfitMargin.apply_to_listing(products, self.margin_pct)
        return {
            "success": True,
            "count": len(marked),
            **extra,
            "profitMargin": self.margin_pct,
            "products": listings_to_dicts(marked),
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def categories(self) -> dict[str, Any]:
        """The static category tree with absolute URLs."""
        categories = self.category_store.load()
        return {
            "success": True,
            "count": len(categories),
            "categories": categories_to_dicts(categories),
        }

    def home_products(self) -> dict[str, Any]:
        logger.info("Fetching home page products")
        return self._listing_payload(self._scraper().scrape_home_page())

    def category_products(self, url: str) -> dict[str, Any]:
        logger.info("Fetching category: %s", url)
        return self._listing_payload(self._scraper().scrape_category(url))

    def search(
        self,
        query: str,
        price_min: str | None = None,
        price_max: str | None = None,
    ) -> dict[str, Any]:
        """Search, forwarding the price range only when both bounds exist."""
        logger.info(
            "Searching for '%s' (price range: %s - %s)",
            query,
            price_min,
            price_max,
        )
        products = self._scraper().search_products(
            query, price_min, price_max
        )
        price_range = (
            f"{price_min}-{price_max}" if price_min and price_max else None
        )
        return self._listing_payload(
            products, query=query, priceRange=price_range
        )

    def product_url(self, slug: str) -> str:
        """Upstream URL a slug resolves to."""
        return JumiaScraper.product_url_for(slug)

    def product_details(self, slug: str) -> dict[str, Any]:
        """Detail page for *slug*; the upstream URL is not exposed."""
        scraper = self._scraper()
        url = scraper.build_product_url(slug)
        logger.info("Fetching product by slug '%s' from %s", slug, url)
        details = scraper.scrape_product_details(url)
        logger.info("Successfully scraped product: %s", details.title)

        marked = ProfitMargin.apply_to_details(details, self.margin_pct)
        marked.slug = slug
        return {
            "success": True,
            "profitMargin": self.margin_pct,
            "product": details_to_dict(marked, include_url=False),
        }

    def product_reviews(self, sku: str, page: int = 1) -> dict[str, Any]:
        logger.info("Fetching reviews for SKU %s, page %d", sku, page)
        review_set = self._scraper().scrape_product_reviews(sku, page)
        return {"success": True, **reviews_to_dict(review_set)}
