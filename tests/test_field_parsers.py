# tests/test_field_parsers.py

"""Tests for lenient field parsing and per-field outcomes."""

import re
import unittest

from src.scrapers.field_parsers import (
    FieldResult,
    FieldStatus,
    match_group,
    parse_integer,
    parse_number,
    parse_stock_text,
    round_half_up,
    star_width_to_rating,
)

_PRICE_STRIP = re.compile(r"[₦,\s]")
_UNITS_LEFT = re.compile(r"(\d+)\s*units?\s*left", re.IGNORECASE)
_FEW_UNITS = re.compile(r"few units", re.IGNORECASE)
_IN_STOCK = re.compile(r"in stock", re.IGNORECASE)
_STAR_WIDTH = re.compile(r"width:\s*(\d+(?:\.\d+)?)%", re.IGNORECASE)


class TestFieldResult(unittest.TestCase):
    """FieldResult keeps 'absent' apart from 'zero'."""

    def test_found_zero_is_not_absent(self) -> None:
        zero = parse_number("₦ 0", _PRICE_STRIP)
        missing = parse_number("", _PRICE_STRIP)

        self.assertEqual(zero.status, FieldStatus.FOUND)
        self.assertEqual(zero.value, 0.0)
        self.assertEqual(missing.status, FieldStatus.ABSENT)
        self.assertIsNone(missing.value)

    def test_or_default_on_miss(self) -> None:
        self.assertEqual(FieldResult[int].absent().or_default(7), 7)
        self.assertEqual(
            FieldResult[int].unparsed("abc").or_default(7), 7
        )
        self.assertEqual(FieldResult.found(3).or_default(7), 3)

    def test_unparsed_keeps_raw_text(self) -> None:
        result = parse_number("Call for price", _PRICE_STRIP)
        self.assertEqual(result.status, FieldStatus.UNPARSED)
        self.assertEqual(result.raw, "Call for price")


class TestParseNumber(unittest.TestCase):
    """Currency symbol, separators and whitespace are stripped."""

    def test_naira_price(self) -> None:
        self.assertEqual(
            parse_number("₦ 1,299,000", _PRICE_STRIP).value, 1299000.0
        )

    def test_decimal_price(self) -> None:
        self.assertEqual(
            parse_number("₦ 12,499.50", _PRICE_STRIP).value, 12499.5
        )

    def test_price_range_takes_lower_bound(self) -> None:
        self.assertEqual(
            parse_number("₦ 1,200 - ₦ 2,500", _PRICE_STRIP).value, 1200.0
        )

    def test_none_is_absent(self) -> None:
        self.assertEqual(
            parse_number(None).status, FieldStatus.ABSENT
        )

    def test_plain_float(self) -> None:
        self.assertEqual(parse_number("4.5").value, 4.5)


class TestParseInteger(unittest.TestCase):

    def test_leading_digits(self) -> None:
        self.assertEqual(parse_integer("120").value, 120)
        self.assertEqual(parse_integer("12 reviews").value, 12)

    def test_non_numeric_unparsed(self) -> None:
        self.assertEqual(
            parse_integer("n/a").status, FieldStatus.UNPARSED
        )


class TestMatchGroup(unittest.TestCase):

    def test_group_extracted_and_stripped(self) -> None:
        pattern = re.compile(r"by\s+(.+)$")
        self.assertEqual(
            match_group(pattern, "12-05-2024 by  Ada  ").value, "Ada"
        )

    def test_no_match_is_unparsed(self) -> None:
        pattern = re.compile(r"(\d{2}-\d{2}-\d{4})")
        self.assertEqual(
            match_group(pattern, "yesterday").status,
            FieldStatus.UNPARSED,
        )


class TestStockText(unittest.TestCase):
    """Explicit counts, then the 'few units' and 'in stock' sentinels."""

    def _parse(self, text: str | None) -> int | None:
        return parse_stock_text(
            text,
            units_left=_UNITS_LEFT,
            few_units=_FEW_UNITS,
            few_units_default=5,
            in_stock=_IN_STOCK,
            in_stock_default=99,
        ).value

    def test_explicit_count(self) -> None:
        self.assertEqual(self._parse("3 units left"), 3)

    def test_singular_unit(self) -> None:
        self.assertEqual(self._parse("1 unit left"), 1)

    def test_few_units_sentinel(self) -> None:
        self.assertEqual(self._parse("few units left"), 5)

    def test_in_stock_sentinel(self) -> None:
        self.assertEqual(self._parse("In Stock"), 99)

    def test_unrelated_text(self) -> None:
        self.assertIsNone(self._parse("Ships from abroad"))

    def test_empty_text(self) -> None:
        self.assertIsNone(self._parse(""))

    def test_in_stock_sentinel_optional(self) -> None:
        """Without an in-stock pattern the bare phrase is unparsed."""
        result = parse_stock_text(
            "In Stock",
            units_left=_UNITS_LEFT,
            few_units=_FEW_UNITS,
            few_units_default=5,
        )
        self.assertEqual(result.status, FieldStatus.UNPARSED)


class TestStarWidth(unittest.TestCase):
    """Ratings derive from the fill width, rounding half up."""

    def test_eighty_percent_is_four(self) -> None:
        self.assertEqual(
            star_width_to_rating("width:80%", _STAR_WIDTH).value, 4
        )

    def test_thirty_percent_rounds_up_to_two(self) -> None:
        self.assertEqual(
            star_width_to_rating("width:30%", _STAR_WIDTH).value, 2
        )

    def test_zero_percent_is_zero(self) -> None:
        self.assertEqual(
            star_width_to_rating("width:0%", _STAR_WIDTH).value, 0
        )

    def test_full_width_is_five(self) -> None:
        self.assertEqual(
            star_width_to_rating("width: 100%", _STAR_WIDTH).value, 5
        )

    def test_missing_style_defaults(self) -> None:
        result = star_width_to_rating(None, _STAR_WIDTH)
        self.assertEqual(result.status, FieldStatus.ABSENT)
        self.assertEqual(result.or_default(0), 0)


class TestRoundHalfUp(unittest.TestCase):

    def test_halves_round_up(self) -> None:
        self.assertEqual(round_half_up(1.5), 2)
        self.assertEqual(round_half_up(2.5), 3)

    def test_below_half_rounds_down(self) -> None:
        self.assertEqual(round_half_up(2.49), 2)


if __name__ == "__main__":
    unittest.main()
