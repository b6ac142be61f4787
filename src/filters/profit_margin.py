# src/filters/profit_margin.py

"""Profit-margin markup applied to prices before they reach clients."""

import dataclasses
import logging

from src.config.settings import Settings
from src.models.product import ListingProduct, ProductDetails
from src.scrapers.field_parsers import round_half_up

logger = logging.getLogger("jumia_reseller.filters")


class ProfitMargin:
    """Pure markup calculation with a fixed absolute cap.

    The margin percentage is always passed in explicitly; nothing here
    reads configuration at call time.
    """

    @staticmethod
    def compute_profit(
        original_price: float,
        margin_pct: float,
        max_profit: int = Settings.MAX_PROFIT,
    ) -> int:
        """``min(round(price * pct / 100), max_profit)``."""
        if original_price <= 0 or margin_pct <= 0:
            return 0
        profit = round_half_up(original_price * margin_pct / 100)
        return min(profit, max_profit)

    @staticmethod
    def actual_margin(original_price: float, profit: int) -> float:
        """Effective margin after capping, as a percentage to 2dp.

        A zero price yields ``0.0`` rather than dividing by zero.
        """
        if original_price <= 0:
            return 0.0
        return round(profit / original_price * 100, 2)

    @staticmethod
    def _marked_up_old_price(
        old_price: float | None, profit: int,
    ) -> float | None:
        # Same absolute profit keeps the discount gap unchanged
        return old_price + profit if old_price else None

    @staticmethod
    def apply_to_product(
        product: ListingProduct,
        margin_pct: float,
        max_profit: int = Settings.MAX_PROFIT,
    ) -> ListingProduct:
        """Return a marked-up copy of one listing card."""
        original = product.original_price or product.price
        profit = ProfitMargin.compute_profit(original, margin_pct, max_profit)
        return dataclasses.replace(
            product,
            original_price=original,
            price=original + profit,
            old_price=ProfitMargin._marked_up_old_price(
                product.old_price, profit
            ),
            profit_margin=ProfitMargin.actual_margin(original, profit),
            profit_amount=profit,
        )

    @staticmethod
    def apply_to_listing(
        products: list[ListingProduct],
        margin_pct: float,
        max_profit: int = Settings.MAX_PROFIT,
    ) -> list[ListingProduct]:
        """Mark up every card, preserving order."""
        marked = [
            ProfitMargin.apply_to_product(p, margin_pct, max_profit)
            for p in products
        ]
        logger.debug(
            "Applied %.2f%% margin to %d products", margin_pct, len(marked)
        )
        return marked

    @staticmethod
    def apply_to_details(
        details: ProductDetails,
        margin_pct: float,
        max_profit: int = Settings.MAX_PROFIT,
    ) -> ProductDetails:
        """Return a marked-up copy of a product detail record.

        Variation prices are left as scraped.
        """
        original = details.original_price or details.price
        profit = ProfitMargin.compute_profit(original, margin_pct, max_profit)
        return dataclasses.replace(
            details,
            original_price=original,
            price=original + profit,
            old_price=ProfitMargin._marked_up_old_price(
                details.old_price, profit
            ),
            profit_margin=ProfitMargin.actual_margin(original, profit),
            profit_amount=profit,
        )
