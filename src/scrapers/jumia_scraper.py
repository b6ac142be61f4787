# src/scrapers/jumia_scraper.py

"""Scraper for jumia.com.ng listing, product and review pages."""

import urllib.parse

from src.config.settings import Settings
from src.models.product import ListingProduct, ProductDetails
from src.models.review import ReviewSet
from src.scrapers.base_scraper import BaseScraper
from src.scrapers.listing_extractor import ListingExtractor
from src.scrapers.product_extractor import ProductDetailExtractor
from src.scrapers.review_extractor import ReviewExtractor
from src.scrapers.schema import ExtractionSchema


class JumiaScraper(BaseScraper):
    """Fetch a Jumia page and hand it to the matching extractor.

    Each call is one sequential fetch, parse and extract cycle; nothing
    is cached between calls.
    """

    SEARCH_PATH = "/catalog/?q={query}"
    REVIEWS_PATH = (
        "/catalog/productratingsreviews/sku/{sku}/?page={page}"
    )

    def __init__(self, schema: ExtractionSchema | None = None) -> None:
        super().__init__("jumia", schema)
        self.base_url = self.settings.BASE_URL
        self.listing_extractor = ListingExtractor(self.schema, self.base_url)
        self.product_extractor = ProductDetailExtractor(self.schema)
        self.review_extractor = ReviewExtractor(self.schema)

    def _get_homepage(self) -> str:
        """Return the Jumia Nigeria homepage URL."""
        return self.base_url

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------

    def build_search_url(
        self,
        query: str,
        price_min: str | None = None,
        price_max: str | None = None,
    ) -> str:
        """Catalog search URL; the price filter needs both bounds."""
        url = self.base_url + self.SEARCH_PATH.format(
            query=urllib.parse.quote(query, safe="")
        )
        if price_min and price_max:
            url += f"&price={price_min}-{price_max}"
        return url

    @staticmethod
    def product_url_for(slug: str, base_url: str = Settings.BASE_URL) -> str:
        """Product page URL reconstructed from a slug."""
        return f"{base_url}/{slug}.html"

    def build_product_url(self, slug: str) -> str:
        return self.product_url_for(slug, self.base_url)

    def build_reviews_url(self, sku: str, page: int = 1) -> str:
        return self.base_url + self.REVIEWS_PATH.format(
            sku=urllib.parse.quote(sku, safe=""), page=page
        )

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def scrape_category(self, category_url: str) -> list[ListingProduct]:
        """All non-sponsored product cards on a listing page."""
        soup = self.get_page(category_url)
        products = self.listing_extractor.extract(soup)
        self.logger.info(
            "[jumia] %d products from %s", len(products), category_url
        )
        return products

    def scrape_home_page(self) -> list[ListingProduct]:
        return self.scrape_category(self._get_homepage())

    def search_products(
        self,
        query: str,
        price_min: str | None = None,
        price_max: str | None = None,
    ) -> list[ListingProduct]:
        """Search the catalog, forwarding an optional price range."""
        url = self.build_search_url(query, price_min, price_max)
        self.logger.info("[jumia] Search URL with price filter: %s", url)
        return self.scrape_category(url)

    def scrape_product_details(self, product_url: str) -> ProductDetails:
        soup = self.get_page(product_url)
        return self.product_extractor.extract(soup, url=product_url)

    def scrape_product_reviews(self, sku: str, page: int = 1) -> ReviewSet:
        """One page of reviews for the product identified by *sku*."""
        soup = self.get_page(self.build_reviews_url(sku, page))
        return self.review_extractor.extract(soup, page=page)
