# src/scrapers/product_extractor.py

"""Extract a full product record from a product detail page."""

import logging

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings
from src.models.product import ProductDetails
from src.scrapers import dom
from src.scrapers.field_parsers import (
    FieldResult,
    match_group,
    parse_number,
    parse_stock_text,
)
from src.scrapers.schema import ExtractionSchema, load_schema
from src.scrapers.variation_strategies import (
    VariationStrategy,
    default_strategies,
    resolve_variations,
)

logger = logging.getLogger("jumia_reseller.product")


class ProductDetailExtractor:
    """Walk a product page and build :class:`ProductDetails`.

    Every field is optional. A missing add-to-cart control means no SKU,
    which in turn leaves reviews and cart flows without an identifier;
    that is tolerated rather than treated as an error.
    """

    def __init__(
        self,
        schema: ExtractionSchema | None = None,
        strategies: list[VariationStrategy] | None = None,
    ) -> None:
        schema = schema if schema is not None else load_schema()
        self.selectors = schema.detail
        self.patterns = schema.patterns
        self.strategies = (
            strategies
            if strategies is not None
            else default_strategies(self.selectors, self.patterns)
        )

    # ------------------------------------------------------------------
    # Individual fields
    # ------------------------------------------------------------------

    def _price(self, soup: BeautifulSoup, key: str) -> FieldResult[float]:
        return parse_number(
            dom.select_text(soup, self.selectors[key]),
            self.patterns["price_strip"],
        )

    def extract_images(self, soup: BeautifulSoup) -> list[str]:
        """Gallery images upgraded to high resolution, de-duplicated."""
        placeholder = self.selectors["image_placeholder"]
        images: list[str] = []
        for img in soup.select(self.selectors["gallery_image"]):
            src = dom.attr(img, "data-src") or dom.attr(img, "src")
            if not src or placeholder in src:
                continue
            high_res = src.replace(
                Settings.THUMBNAIL_SEGMENT, Settings.HIGH_RES_SEGMENT
            )
            if high_res not in images:
                images.append(high_res)
        return images

    def extract_rating(self, soup: BeautifulSoup) -> FieldResult[float]:
        """Average rating from text such as ``"4.3 out of 5"``."""
        found = match_group(
            self.patterns["rating"],
            dom.select_text(soup, self.selectors["rating_text"]),
        )
        if not found.is_found or found.value is None:
            return FieldResult(found.status, None, found.raw)
        return parse_number(found.value)

    def extract_review_count(self, soup: BeautifulSoup) -> FieldResult[int]:
        """Count from text such as ``"(128 verified ratings)"``."""
        found = match_group(
            self.patterns["verified_ratings"],
            dom.select_text(soup, self.selectors["reviews_text"]),
        )
        if not found.is_found or found.value is None:
            return FieldResult(found.status, None, found.raw)
        return FieldResult.found(int(found.value), found.raw)

    def extract_stock(self, soup: BeautifulSoup) -> FieldResult[int]:
        """Stock wording next to the add-to-cart control."""
        cart = soup.select_one(self.selectors["add_to_cart"])
        container = cart.parent if cart is not None else None
        text = (
            dom.select_text(container, self.selectors["stock_text"])
            if isinstance(container, Tag)
            else ""
        )
        return parse_stock_text(
            text,
            units_left=self.patterns["units_left"],
            few_units=self.patterns["few_units"],
            few_units_default=Settings.FEW_UNITS_STOCK,
            in_stock=self.patterns["in_stock"],
            in_stock_default=Settings.IN_STOCK_DEFAULT,
        )

    def extract_key_features(self, soup: BeautifulSoup) -> list[str] | None:
        """Bullet features, long text blocks dropped as noise."""
        features = [
            text
            for text in (
                li.get_text().strip()
                for li in soup.select(self.selectors["key_features"])
            )
            if text and len(text) < Settings.MAX_FEATURE_LENGTH
        ]
        return features or None

    def extract_specifications(
        self, soup: BeautifulSoup,
    ) -> dict[str, str] | None:
        """Label/value rows of the specification table."""
        specs: dict[str, str] = {}
        for row in soup.select(self.selectors["spec_rows"]):
            label = dom.select_text(row, "th")
            value = dom.select_text(row, "td")
            if (
                label
                and value
                and len(label) < Settings.MAX_SPEC_LABEL_LENGTH
            ):
                specs[label] = value
        return specs or None

    def extract_badges(self, soup: BeautifulSoup) -> list[str]:
        return [
            text
            for text in (
                b.get_text().strip()
                for b in soup.select(self.selectors["badges"])
            )
            if text
        ]

    # ------------------------------------------------------------------
    # Whole page
    # ------------------------------------------------------------------

    def extract(self, soup: BeautifulSoup, url: str = "") -> ProductDetails:
        """Build the product record for one page."""
        sel = self.selectors

        cart = soup.select_one(sel["add_to_cart"])
        sku = dom.attr(cart, sel["sku_attr"]) or None
        if sku is None:
            logger.warning("No SKU found on product page %s", url)

        price = self._price(soup, "price").or_default(0.0)
        old_price = self._price(soup, "old_price")
        variations, strategy = resolve_variations(soup, self.strategies)
        description_node = soup.select_one(sel["description"])

        details = ProductDetails(
            title=dom.select_text(soup, sel["title"]),
            brand=dom.first_text(soup, sel["brand"]),
            sku=sku,
            url=url,
            price=price,
            original_price=price,
            old_price=old_price.value if old_price.value else None,
            discount=dom.first_text(soup, sel["discount"]),
            images=self.extract_images(soup),
            rating=self.extract_rating(soup).value,
            reviews=self.extract_review_count(soup).or_default(0),
            variations=variations,
            stock_quantity=self.extract_stock(soup).value,
            description=dom.select_text(soup, sel["description"]),
            description_html=dom.inner_html(description_node),
            shipping=dom.select_text(soup, sel["shipping"]),
            badges=self.extract_badges(soup),
            key_features=self.extract_key_features(soup),
            specifications=self.extract_specifications(soup),
        )
        logger.debug(
            "Extracted product '%s' (sku=%s, %d images, "
            "%d variations via %s)",
            details.title,
            details.sku,
            len(details.images),
            len(details.variations),
            strategy or "none",
        )
        return details
