# src/models/product.py

"""Product data models for listing cards and detail pages."""

from dataclasses import dataclass, field


@dataclass
class ListingProduct:
    """A single product card as it appears in a catalog grid.

    ``price`` is the customer-facing price. Until a margin is applied it
    equals ``original_price`` and both profit fields are zero.
    """

    name: str
    price: float
    original_price: float = 0.0
    brand: str = ""
    category: str = ""
    product_id: str = ""
    slug: str = ""
    url: str = ""
    image: str = ""
    old_price: float | None = None
    discount: str = ""
    rating: float | None = None
    reviews: int = 0
    is_official_store: bool = False
    has_express_shipping: bool = False
    campaign: str = ""
    profit_margin: float = 0.0
    profit_amount: int = 0


@dataclass
class Variation:
    """A purchasable option of a product (size, colour, ...)."""

    name: str
    value: str
    available: bool = True
    price: float | None = None
    stock_quantity: int | None = None


@dataclass
class ProductDetails:
    """Everything extracted from one product detail page."""

    title: str
    price: float
    original_price: float = 0.0
    brand: str = ""
    sku: str | None = None
    url: str = ""
    slug: str = ""
    old_price: float | None = None
    discount: str = ""
    images: list[str] = field(default_factory=lambda: list[str]())
    rating: float | None = None
    reviews: int = 0
    variations: list[Variation] = field(
        default_factory=lambda: list[Variation]()
    )
    stock_quantity: int | None = None
    description: str = ""
    description_html: str = ""
    shipping: str = ""
    badges: list[str] = field(default_factory=lambda: list[str]())
    key_features: list[str] | None = None
    specifications: dict[str, str] | None = None
    profit_margin: float = 0.0
    profit_amount: int = 0

    @property
    def is_official_store(self) -> bool:
        """True when any badge advertises an official store."""
        return any(
            "official store" in b.lower() for b in self.badges
        )

    @property
    def in_stock(self) -> bool:
        """True unless every listed variation is unavailable."""
        return not self.variations or any(
            v.available for v in self.variations
        )
