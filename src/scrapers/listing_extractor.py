# src/scrapers/listing_extractor.py

"""Extract product cards from catalog, search, category and home pages."""

import logging
import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings
from src.models.product import ListingProduct
from src.scrapers import dom
from src.scrapers.field_parsers import parse_integer, parse_number
from src.scrapers.schema import ExtractionSchema, load_schema

logger = logging.getLogger("jumia_reseller.listing")

_HTML_SUFFIX = re.compile(r"\.html$")
_URL_PREFIXES = ("http://", "https://", "//", "/")


def derive_slug(href: str | None) -> str:
    """Turn a product href into its slug.

    Absolute URLs and root-relative paths lose scheme, domain, query
    string and fragment, then the leading ``/`` and trailing ``.html``.
    Anything else is treated as a slug already and only loses a trailing
    ``.html``, so ``derive_slug(derive_slug(x)) == derive_slug(x)``.
    """
    if not href:
        return ""
    href = href.strip()
    if href.startswith(_URL_PREFIXES):
        href = urlsplit(href).path
    return _HTML_SUFFIX.sub("", href.lstrip("/"))


def absolute_url(href: str, base_url: str) -> str:
    """Prefix *href* with the site origin unless it is already absolute."""
    if not href or href.startswith("http"):
        return href
    return base_url + href


class ListingExtractor:
    """Parse every non-sponsored product card on a listing page."""

    def __init__(
        self,
        schema: ExtractionSchema | None = None,
        base_url: str = Settings.BASE_URL,
    ) -> None:
        schema = schema if schema is not None else load_schema()
        self.selectors = schema.listing
        self.patterns = schema.patterns
        self.base_url = base_url

    def is_sponsored(self, card: Tag) -> bool:
        """Paid placements carry an ad-click id attribute."""
        return bool(dom.attr(card, self.selectors["sponsored_attr"]))

    def _price(self, card: Tag, key: str) -> float | None:
        text = dom.select_text(card, self.selectors[key])
        result = parse_number(text, self.patterns["price_strip"])
        # A zero price reads as missing, like the storefront's own scripts
        return result.value if result.is_found and result.value else None

    def parse_card(self, card: Tag) -> ListingProduct | None:
        """Parse one card; ``None`` for sponsored cards."""
        if self.is_sponsored(card):
            return None

        sel = self.selectors
        name = dom.attr(card, sel["name_attr"]) or dom.select_text(
            card, sel["name"]
        )
        img = card.select_one(sel["image"])
        image = dom.attr(img, "data-src") or dom.attr(img, "src")
        href = dom.attr(card, "href")

        price = self._price(card, "price") or 0.0
        rating = parse_number(dom.attr(card, sel["rating_attr"]))

        return ListingProduct(
            name=name,
            price=price,
            original_price=price,
            brand=dom.attr(card, sel["brand_attr"]),
            category=dom.attr(card, sel["category_attr"]),
            product_id=dom.attr(card, sel["id_attr"]),
            slug=derive_slug(href),
            url=absolute_url(href, self.base_url),
            image=image,
            old_price=self._price(card, "old_price"),
            discount=dom.select_text(card, sel["discount"]),
            rating=rating.value if rating.value else None,
            reviews=parse_integer(
                dom.attr(card, sel["reviews_attr"])
            ).or_default(0),
            is_official_store=dom.has_match(card, sel["official_store"]),
            has_express_shipping=dom.has_match(
                card, sel["express_shipping"]
            ),
            campaign=dom.select_text(card, sel["campaign"]),
        )

    def extract(self, soup: BeautifulSoup) -> list[ListingProduct]:
        """Return listing products in page order, sponsored cards skipped."""
        products: list[ListingProduct] = []
        skipped = 0
        for card in soup.select(self.selectors["card"]):
            product = self.parse_card(card)
            if product is None:
                skipped += 1
                continue
            products.append(product)
        logger.debug(
            "Extracted %d listing cards (%d sponsored skipped)",
            len(products),
            skipped,
        )
        return products
