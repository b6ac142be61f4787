# main.py

"""Entry point for jumia_reseller (HTTP API server or headless commands)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("jumia_reseller.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jumia_reseller",
        description="Jumia catalog scraper with a capped profit margin.",
        epilog=f"Profit margin: {Settings.PROFIT_MARGIN}% "
        "(set PROFIT_MARGIN_PERCENTAGE to change).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for headless commands (default: json).",
    )
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API (default).")
    serve.add_argument("--host", default=Settings.HOST)
    serve.add_argument("--port", type=int, default=Settings.PORT)

    sub.add_parser("categories", help="Print the category tree.")
    sub.add_parser("home", help="Home page products.")

    category = sub.add_parser("category", help="Products of a category URL.")
    category.add_argument("url")

    search = sub.add_parser("search", help="Search products.")
    search.add_argument("query")
    search.add_argument("--price-min", default=None, dest="price_min")
    search.add_argument("--price-max", default=None, dest="price_max")

    product = sub.add_parser("product", help="Product details by slug.")
    product.add_argument("slug")

    reviews = sub.add_parser("reviews", help="Product reviews by SKU.")
    reviews.add_argument("sku")
    reviews.add_argument("--page", type=int, default=1)

    build = sub.add_parser(
        "build-categories",
        help="Regenerate data/categories.json from saved menu HTML.",
    )
    build.add_argument("html_file")
    build.add_argument("-o", "--output", default=None, dest="output_path")
    return parser


def _run_server(host: str, port: int) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    from src.api.app import create_app

    logger.info("Server running on http://%s:%d", host, port)
    try:
        uvicorn.run(create_app(), host=host, port=port)
    except Exception:
        logger.critical("Fatal error in API server", exc_info=True)
        raise
    finally:
        logger.info("jumia_reseller server shutting down")


def main() -> None:
    """Route to the API server (no command) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    serving = args.command in (None, "serve")
    log_file = setup_logging(
        console_level=logging.INFO if serving else logging.WARNING,
        include_server=serving,
    )
    logger.info("jumia_reseller starting, log file: %s", log_file)

    if serving:
        _run_server(
            getattr(args, "host", Settings.HOST),
            getattr(args, "port", Settings.PORT),
        )
        return

    from src.cli.runner import build_categories, dispatch

    if args.command == "build-categories":
        sys.exit(build_categories(args.html_file, args.output_path))
    sys.exit(dispatch(args))


if __name__ == "__main__":
    main()
