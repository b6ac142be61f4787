# src/scrapers/schema.py

"""Load the extraction schema: every selector and regex, kept as data."""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.errors import ConfigError

_SECTIONS = ("listing", "detail", "reviews", "category_menu")


def _compile_pattern(name: str, spec: Any) -> re.Pattern[str]:
    if isinstance(spec, str):
        return re.compile(spec, re.IGNORECASE)
    if isinstance(spec, dict) and isinstance(spec.get("regex"), str):
        flags = re.IGNORECASE if spec.get("ignore_case", True) else 0
        return re.compile(spec["regex"], flags)
    raise ConfigError(f"Pattern '{name}' must be a regex string or object")


@dataclass(frozen=True)
class ExtractionSchema:
    """Selectors per entity plus compiled text patterns."""

    listing: dict[str, str]
    detail: dict[str, str]
    reviews: dict[str, str]
    category_menu: dict[str, str]
    patterns: dict[str, re.Pattern[str]]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractionSchema":
        """Build a schema, compiling every pattern.

        A pattern is either a bare regex string, matched
        case-insensitively, or an object ``{"regex": ..., "ignore_case":
        false}`` for patterns that must respect case.
        """
        missing = [
            key for key in (*_SECTIONS, "patterns") if key not in data
        ]
        if missing:
            raise ConfigError(
                f"Extraction schema missing sections: {', '.join(missing)}"
            )
        try:
            patterns = {
                name: _compile_pattern(name, spec)
                for name, spec in data["patterns"].items()
            }
        except re.error as exc:
            raise ConfigError(f"Invalid pattern in schema: {exc}") from exc
        return cls(
            listing=dict(data["listing"]),
            detail=dict(data["detail"]),
            reviews=dict(data["reviews"]),
            category_menu=dict(data["category_menu"]),
            patterns=patterns,
        )


def load_schema(path: Path | None = None) -> ExtractionSchema:
    """Read the schema JSON from disk (defaults to the bundled file)."""
    schema_path = path or Settings.SCHEMA_PATH
    try:
        with open(schema_path, encoding="utf-8") as f:
            data: dict[str, Any] = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(
            f"Extraction schema not found: {schema_path}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Extraction schema is not valid JSON: {exc}"
        ) from exc
    return ExtractionSchema.from_dict(data)
