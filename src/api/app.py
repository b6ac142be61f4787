# src/api/app.py

"""HTTP API: each endpoint runs one fetch, extract and mark-up cycle."""

import logging
from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config.settings import Settings
from src.errors import ConfigError, NetworkError
from src.scrapers.field_parsers import parse_integer
from src.services.catalog_service import CatalogService

logger = logging.getLogger("jumia_reseller.api")


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    """Failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


def _failure(exc: Exception) -> JSONResponse:
    """Map an operation failure to a 500 carrying the raw message."""
    if isinstance(exc, NetworkError):
        logger.error("Upstream fetch failed: %s", exc)
    else:
        logger.error("Unexpected error: %s", exc, exc_info=True)
    return _error(500, str(exc))


def create_app(service: CatalogService | None = None) -> FastAPI:
    """Build the FastAPI application around a catalog service.

    Endpoints are plain ``def`` functions so the server runs each in
    its own worker thread; requests share no mutable state.
    """
    catalog = service or CatalogService()

    app = FastAPI(
        title="Jumia Reseller API",
        description="Scraped Jumia catalog with a capped profit margin",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        """Liveness check."""
        return {"status": "ok", "message": "Jumia Reseller API is running"}

    @app.get("/api/categories", response_model=None)
    def categories() -> dict[str, Any] | JSONResponse:
        logger.info("Fetching categories")
        try:
            return catalog.categories()
        except ConfigError as exc:
            logger.error("Category data unavailable: %s", exc)
            return _error(500, str(exc))

    @app.get("/api/products", response_model=None)
    def home_products() -> dict[str, Any] | JSONResponse:
        try:
            return catalog.home_products()
        except Exception as exc:
            return _failure(exc)

    @app.get("/api/products/category", response_model=None)
    def category_products(
        url: str | None = None,
    ) -> dict[str, Any] | JSONResponse:
        if not url:
            return _error(400, "Category URL is required")
        try:
            return catalog.category_products(url)
        except Exception as exc:
            return _failure(exc)

    @app.get("/api/products/search", response_model=None)
    def search_products(
        q: str | None = None,
        price_min: str | None = Query(default=None, alias="priceMin"),
        price_max: str | None = Query(default=None, alias="priceMax"),
    ) -> dict[str, Any] | JSONResponse:
        if not q:
            return _error(400, "Search query is required")
        try:
            return catalog.search(q, price_min, price_max)
        except Exception as exc:
            return _failure(exc)

    @app.get("/api/product/reviews", response_model=None)
    def product_reviews(
        sku: str | None = None,
        page: str | None = None,
    ) -> dict[str, Any] | JSONResponse:
        if not sku:
            return _error(400, "Product SKU is required")
        page_number = parse_integer(page).or_default(1)
        try:
            return catalog.product_reviews(sku, max(page_number, 1))
        except Exception as exc:
            return _failure(exc)

    @app.get("/api/product/details", response_model=None)
    def product_details(
        slug: str | None = None,
        product_id: str | None = Query(default=None, alias="id"),
    ) -> dict[str, Any] | JSONResponse:
        if not slug and not product_id:
            return _error(400, "Product slug or ID is required")
        if not slug:
            # Lookup by listing id would need a search round-trip first
            return _error(400, "Please provide product slug")

        attempted_url = catalog.product_url(slug)
        try:
            return catalog.product_details(slug)
        except Exception as exc:
            logger.error(
                "Error fetching product details for slug '%s' (%s): %s",
                slug,
                attempted_url,
                exc,
                exc_info=True,
            )
            return _error(
                500, str(exc), slug=slug, attemptedUrl=attempted_url
            )

    logger.info(
        "API ready: profit margin %.2f%%, upstream %s",
        catalog.margin_pct,
        Settings.BASE_URL,
    )
    return app
