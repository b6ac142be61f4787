# src/cli/runner.py

"""Headless CLI commands that reuse the catalog service without the server."""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from src.errors import ConfigError, NetworkError
from src.scrapers.base_scraper import BaseScraper
from src.scrapers.category_menu_extractor import CategoryMenuExtractor
from src.services.catalog_service import CatalogService
from src.storage.category_store import CategoryStore

logger = logging.getLogger("jumia_reseller.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_json(payload: dict[str, Any]) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _format_price(value: float | None) -> str:
    return f"₦ {value:,.0f}" if value else "-"


def _print_products_table(payload: dict[str, Any]) -> None:
    """Render listing products in page order."""
    table = Table(
        title=f"Products (margin {payload['profitMargin']}%)",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Was", justify="right", style="dim")
    table.add_column("Profit", justify="right")
    table.add_column("Rating", justify="center")
    table.add_column("Slug", overflow="fold", style="dim")

    for idx, p in enumerate(payload["products"], 1):
        table.add_row(
            str(idx),
            p["name"][:60],
            _format_price(p["price"]),
            _format_price(p["oldPrice"]),
            _format_price(p["profitAmount"]),
            str(p["rating"]) if p["rating"] is not None else "-",
            p["slug"],
        )
    Console().print(table)


def _print_product_table(payload: dict[str, Any]) -> None:
    product = payload["product"]
    table = Table(title=product["title"] or "Product", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    for label, key in (
        ("Brand", "brand"),
        ("SKU", "sku"),
        ("Price", "price"),
        ("Original price", "originalPrice"),
        ("Old price", "oldPrice"),
        ("Rating", "rating"),
        ("Reviews", "reviews"),
        ("Stock", "stockQuantity"),
        ("In stock", "inStock"),
    ):
        value = product[key]
        table.add_row(label, "-" if value is None else str(value))
    for v in product["variations"]:
        state = "available" if v["available"] else "sold out"
        table.add_row("Variation", f"{v['name']} ({state})")
    Console().print(table)


def _print_reviews_table(payload: dict[str, Any]) -> None:
    table = Table(
        title=(
            f"Reviews page {payload['currentPage']}/{payload['totalPages']}"
            f" | overall {payload['overallRating'] or '-'}"
            f" from {payload['totalRatings']} ratings"
        ),
        show_lines=True,
    )
    table.add_column("Stars", justify="center")
    table.add_column("Title")
    table.add_column("Comment", max_width=60)
    table.add_column("Author")
    table.add_column("Date")
    table.add_column("Verified", justify="center")
    for r in payload["reviews"]:
        table.add_row(
            "★" * r["rating"],
            r["title"],
            r["comment"],
            r["author"],
            r["date"] or "-",
            "✓" if r["verified"] else "",
        )
    Console().print(table)


def _print_categories_table(payload: dict[str, Any]) -> None:
    table = Table(title="Categories", show_lines=True)
    table.add_column("Category", style="bold")
    table.add_column("Subcategories")
    table.add_column("URL", overflow="fold", style="dim")
    for c in payload["categories"]:
        table.add_row(
            c["name"],
            ", ".join(s["name"] for s in c["subcategories"]),
            c["url"],
        )
    Console().print(table)


_TABLE_PRINTERS: dict[str, Callable[[dict[str, Any]], None]] = {
    "categories": _print_categories_table,
    "home": _print_products_table,
    "category": _print_products_table,
    "search": _print_products_table,
    "product": _print_product_table,
    "reviews": _print_reviews_table,
}


def run_command(
    command: str,
    call: Callable[[], dict[str, Any]],
    output_format: str = "json",
) -> int:
    """Run one catalog operation and return an exit code (0=ok, 1=fail)."""
    try:
        payload = call()
    except (NetworkError, ConfigError) as exc:
        logger.error("%s failed: %s", command, exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    except Exception as exc:
        logger.error("%s failed: %s", command, exc, exc_info=True)
        _err.print(f"[red]Unexpected error: {exc}[/red]")
        return 1

    if output_format == "table":
        _TABLE_PRINTERS[command](payload)
    else:
        _print_json(payload)
    return 0


def dispatch(
    args: Any,
    service: CatalogService | None = None,
) -> int:
    """Map parsed CLI arguments onto a catalog operation."""
    catalog = service or CatalogService()
    calls: dict[str, Callable[[], dict[str, Any]]] = {
        "categories": catalog.categories,
        "home": catalog.home_products,
        "category": lambda: catalog.category_products(args.url),
        "search": lambda: catalog.search(
            args.query, args.price_min, args.price_max
        ),
        "product": lambda: catalog.product_details(args.slug),
        "reviews": lambda: catalog.product_reviews(
            args.sku, max(args.page, 1)
        ),
    }
    return run_command(args.command, calls[args.command], args.output_format)


def build_categories(
    html_path: str,
    output_path: str | None = None,
) -> int:
    """Regenerate the category JSON from a saved menu HTML file."""
    source = Path(html_path)
    if not source.exists():
        _err.print(f"[red]File not found: {source}[/red]")
        return 1

    soup = BaseScraper.parse_html(source.read_text(encoding="utf-8"))
    categories = CategoryMenuExtractor().extract(soup)
    if not categories:
        _err.print("[yellow]No categories found in menu markup.[/yellow]")
        return 1

    store = CategoryStore(Path(output_path) if output_path else None)
    path = store.save(categories)
    _err.print(
        f"[green]✓ Saved {len(categories)} categories → {path}[/green]"
    )
    return 0
