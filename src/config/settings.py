# src/config/settings.py

"""Central configuration for the jumia_reseller service."""

import math
import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PROFIT_MARGIN: float = 15.0


def parse_margin(raw: str | None) -> float:
    """Parse a margin percentage, falling back to the default.

    Unset, blank, non-numeric, negative and zero values all yield
    :data:`DEFAULT_PROFIT_MARGIN`.
    """
    if not raw or not raw.strip():
        return DEFAULT_PROFIT_MARGIN
    try:
        value = float(raw.strip())
    except ValueError:
        return DEFAULT_PROFIT_MARGIN
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_PROFIT_MARGIN
    return value


class Settings:
    """Central configuration for the jumia_reseller service."""

    # --- Upstream site ---
    BASE_URL: str = "https://www.jumia.com.ng"
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/91.0.4472.124 Safari/537.36"
        ),
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/webp,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
    }

    # --- Pricing ---
    PROFIT_MARGIN: float = parse_margin(
        os.getenv("PROFIT_MARGIN_PERCENTAGE")
    )                                   # Read once at process start
    MAX_PROFIT: int = 20000             # Naira cap on the absolute markup

    # --- Extraction heuristics ---
    # Approximations of the storefront's stock wording, not business rules.
    FEW_UNITS_STOCK: int = 5
    IN_STOCK_DEFAULT: int = 99
    MAX_FEATURE_LENGTH: int = 200
    MAX_SPEC_LABEL_LENGTH: int = 100
    THUMBNAIL_SEGMENT: str = "/500x500/"
    HIGH_RES_SEGMENT: str = "/680x680/"

    # --- Server ---
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT") or 5000)

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SCHEMA_PATH: Path = BASE_DIR / "src" / "config" / "extraction_schema.json"
    CATEGORIES_PATH: Path = BASE_DIR / "data" / "categories.json"
    LOGS_DIR: Path = BASE_DIR / "logs"
