# src/scrapers/variation_strategies.py

"""Ordered strategies for reading a product's variations.

Product pages show variations either as a row of selectable inputs or
inside a popup with per-option price and stock. Strategies are tried in
order and the first non-empty result wins.
"""

import logging
import re
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings
from src.models.product import Variation
from src.scrapers import dom
from src.scrapers.field_parsers import parse_number, parse_stock_text

logger = logging.getLogger("jumia_reseller.variations")


class VariationStrategy(ABC):
    """One way of finding variations on a product page."""

    name: str = "base"

    def __init__(
        self,
        selectors: dict[str, str],
        patterns: dict[str, re.Pattern[str]],
    ) -> None:
        self.selectors = selectors
        self.patterns = patterns

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> list[Variation]:
        """Return the variations this strategy recognises (maybe none)."""
        ...


class InputVariationStrategy(VariationStrategy):
    """Checkbox/radio inputs; a disabled class marks an option sold out."""

    name = "inputs"

    def extract(self, soup: BeautifulSoup) -> list[Variation]:
        disabled_class = self.selectors["variation_disabled_class"]
        variations: list[Variation] = []
        for node in soup.select(self.selectors["variation_input"]):
            input_id = dom.attr(node, "id")
            label = (
                soup.find("label", attrs={"for": input_id})
                if input_id
                else None
            )
            classes = node.get("class") or []
            variations.append(
                Variation(
                    name=(
                        label.get_text().strip()
                        if isinstance(label, Tag)
                        else ""
                    ),
                    value=dom.attr(node, "value"),
                    available=disabled_class not in classes,
                )
            )
        return variations


class PopupVariationStrategy(VariationStrategy):
    """Popup option blocks with their own price and stock wording."""

    name = "popup"

    def _parse_block(self, form: Tag) -> Variation | None:
        sel = self.selectors
        parent = form.parent if isinstance(form.parent, Tag) else form
        var_name = dom.first_text(parent, sel["popup_name"])
        if not var_name:
            return None

        price = parse_number(
            dom.select_text(parent, sel["popup_price"]),
            self.patterns["price_strip"],
        )
        stock = parse_stock_text(
            dom.select_text(parent, sel["popup_stock"]),
            units_left=self.patterns["units_left"],
            few_units=self.patterns["few_units"],
            few_units_default=Settings.FEW_UNITS_STOCK,
        )
        return Variation(
            name=var_name,
            value=dom.attr(form, sel["popup_value_attr"]) or var_name,
            available=not dom.has_match(parent, sel["popup_disabled"]),
            price=price.value if price.value else None,
            stock_quantity=stock.value,
        )

    def extract(self, soup: BeautifulSoup) -> list[Variation]:
        variations: list[Variation] = []
        for form in soup.select(self.selectors["popup_variation_form"]):
            variation = self._parse_block(form)
            if variation is not None:
                variations.append(variation)
        return variations


def default_strategies(
    selectors: dict[str, str],
    patterns: dict[str, re.Pattern[str]],
) -> list[VariationStrategy]:
    """Inputs first, popup blocks as the fallback."""
    return [
        InputVariationStrategy(selectors, patterns),
        PopupVariationStrategy(selectors, patterns),
    ]


def resolve_variations(
    soup: BeautifulSoup,
    strategies: list[VariationStrategy],
) -> tuple[list[Variation], str | None]:
    """Run *strategies* in order until one yields variations.

    Returns the variations and the name of the strategy that produced
    them, or ``([], None)`` when the product has none.
    """
    for strategy in strategies:
        variations = strategy.extract(soup)
        if variations:
            logger.debug(
                "Variations resolved by '%s' strategy (%d found)",
                strategy.name,
                len(variations),
            )
            return variations, strategy.name
    return [], None
