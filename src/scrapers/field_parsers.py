# src/scrapers/field_parsers.py

"""Lenient field parsing with an explicit per-field outcome.

Scraped text is messy and the upstream layout drifts, so a failed field
never raises. Each helper returns a :class:`FieldResult` recording whether
the value was found, absent from the markup, or present but unparsable.
Extractors collapse it to the public default with :meth:`FieldResult.or_default`.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")

_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)")
_LEADING_INT = re.compile(r"^[+-]?\d+")


class FieldStatus(Enum):
    """How a single extracted field was resolved."""

    FOUND = auto()
    ABSENT = auto()
    UNPARSED = auto()


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of extracting one field."""

    status: FieldStatus
    value: T | None = None
    raw: str | None = None

    @classmethod
    def found(cls, value: T, raw: str | None = None) -> "FieldResult[T]":
        return cls(FieldStatus.FOUND, value, raw)

    @classmethod
    def absent(cls) -> "FieldResult[T]":
        return cls(FieldStatus.ABSENT)

    @classmethod
    def unparsed(cls, raw: str) -> "FieldResult[T]":
        return cls(FieldStatus.UNPARSED, None, raw)

    @property
    def is_found(self) -> bool:
        return self.status is FieldStatus.FOUND

    def or_default(self, default: T) -> T:
        """Return the parsed value, or *default* on any miss."""
        if self.status is FieldStatus.FOUND and self.value is not None:
            return self.value
        return default


def round_half_up(value: float) -> int:
    """Round .5 upwards, matching the storefront's JavaScript rounding."""
    return int(math.floor(value + 0.5))


def clean_text(text: str | None) -> str:
    """Collapse ``None`` to an empty string and trim whitespace."""
    return text.strip() if text else ""


def parse_number(
    text: str | None,
    strip: re.Pattern[str] | None = None,
) -> FieldResult[float]:
    """Parse the leading decimal number of *text*.

    Characters matching *strip* (currency symbol, thousands separators,
    whitespace) are removed first. Trailing garbage is ignored, so a
    price range like ``"1000-2000"`` yields ``1000.0``.
    """
    raw = clean_text(text)
    if not raw:
        return FieldResult.absent()
    cleaned = strip.sub("", raw) if strip is not None else raw
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return FieldResult.unparsed(raw)
    return FieldResult.found(float(match.group(0)), raw)


def parse_integer(text: str | None) -> FieldResult[int]:
    """Parse the leading integer of *text*, ignoring trailing garbage."""
    raw = clean_text(text)
    if not raw:
        return FieldResult.absent()
    match = _LEADING_INT.match(raw)
    if not match:
        return FieldResult.unparsed(raw)
    return FieldResult.found(int(match.group(0)), raw)


def match_group(
    pattern: re.Pattern[str],
    text: str | None,
    group: int = 1,
) -> FieldResult[str]:
    """Search *text* with *pattern* and return the stripped capture group."""
    raw = clean_text(text)
    if not raw:
        return FieldResult.absent()
    match = pattern.search(raw)
    if not match:
        return FieldResult.unparsed(raw)
    return FieldResult.found(match.group(group).strip(), raw)


def parse_stock_text(
    text: str | None,
    units_left: re.Pattern[str],
    few_units: re.Pattern[str],
    few_units_default: int,
    in_stock: re.Pattern[str] | None = None,
    in_stock_default: int | None = None,
) -> FieldResult[int]:
    """Turn free-text stock wording into a quantity.

    An explicit ``"N units left"`` count wins. Otherwise the vague
    "few units" phrase maps to *few_units_default*, and, when an
    *in_stock* pattern is supplied, a bare "in stock" maps to
    *in_stock_default*. Anything else is unparsed.
    """
    raw = clean_text(text)
    if not raw:
        return FieldResult.absent()
    count = units_left.search(raw)
    if count:
        return FieldResult.found(int(count.group(1)), raw)
    if few_units.search(raw):
        return FieldResult.found(few_units_default, raw)
    if (
        in_stock is not None
        and in_stock_default is not None
        and in_stock.search(raw)
    ):
        return FieldResult.found(in_stock_default, raw)
    return FieldResult.unparsed(raw)


def star_width_to_rating(
    style: str | None,
    width: re.Pattern[str],
    max_stars: int = 5,
) -> FieldResult[int]:
    """Derive a star rating from a fill element's ``width:P%`` style."""
    found = match_group(width, style)
    if not found.is_found or found.value is None:
        return FieldResult(found.status, None, found.raw)
    percent = float(found.value)
    return FieldResult.found(
        round_half_up(percent / 100 * max_stars), found.raw
    )
