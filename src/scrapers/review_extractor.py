# src/scrapers/review_extractor.py

"""Extract ratings summary and one page of reviews."""

import logging

from bs4 import BeautifulSoup, Tag

from src.models.review import Review, ReviewSet
from src.scrapers import dom
from src.scrapers.field_parsers import (
    FieldResult,
    match_group,
    parse_integer,
    parse_number,
    star_width_to_rating,
)
from src.scrapers.schema import ExtractionSchema, load_schema

logger = logging.getLogger("jumia_reseller.reviews")

_STAR_VALUES = range(1, 6)


class ReviewExtractor:
    """Parse a product's ratings-and-reviews page.

    Per-review star ratings are read from the width of the filled star
    bar (``width:80%`` is four stars), not from a numeric field.
    """

    def __init__(self, schema: ExtractionSchema | None = None) -> None:
        schema = schema if schema is not None else load_schema()
        self.selectors = schema.reviews
        self.patterns = schema.patterns

    def extract_overall_rating(self, soup: BeautifulSoup) -> FieldResult[float]:
        return parse_number(
            dom.select_text(soup, self.selectors["overall_rating"])
        )

    def extract_total_ratings(self, soup: BeautifulSoup) -> FieldResult[int]:
        text = dom.select_text(soup, self.selectors["total_ratings"])
        found = match_group(self.patterns["total_ratings"], text.replace(",", ""))
        if not found.is_found or found.value is None:
            return FieldResult(found.status, None, found.raw)
        return FieldResult.found(int(found.value), found.raw)

    def extract_distribution(self, soup: BeautifulSoup) -> dict[int, int]:
        """Map star value (1-5) to its rating count."""
        distribution: dict[int, int] = {}
        for row in soup.select(self.selectors["distribution_row"]):
            star = parse_integer(row.get_text().strip()[:1]).value
            if star not in _STAR_VALUES:
                continue
            count = match_group(
                self.patterns["distribution_count"],
                dom.select_text(row, self.selectors["distribution_count"]),
            )
            distribution[star] = (
                int(count.value) if count.is_found and count.value else 0
            )
        return distribution

    def parse_review(self, article: Tag) -> Review:
        """Parse one review block."""
        sel = self.selectors
        star_fill = article.select_one(sel["star_fill"])
        rating = star_width_to_rating(
            dom.attr(star_fill, "style"), self.patterns["star_width"]
        )

        # Date and author share one text node; each may miss independently
        date_author = dom.first_text(article, sel["date_author"])
        date = match_group(self.patterns["review_date"], date_author)
        author = match_group(self.patterns["review_author"], date_author)

        return Review(
            rating=rating.or_default(0),
            title=dom.select_text(article, sel["title"]),
            comment=dom.first_text(article, sel["comment"]),
            date=date.value,
            author=author.or_default("") or "Anonymous",
            verified=dom.has_match(article, sel["verified"]),
        )

    def extract_total_pages(self, soup: BeautifulSoup) -> FieldResult[int]:
        """Page count from the "last page" link; absent means one page."""
        link = soup.select_one(self.selectors["last_page"])
        found = match_group(
            self.patterns["last_page"], dom.attr(link, "href")
        )
        if not found.is_found or found.value is None:
            return FieldResult(found.status, None, found.raw)
        return FieldResult.found(int(found.value), found.raw)

    def extract(self, soup: BeautifulSoup, page: int = 1) -> ReviewSet:
        """Build the review set for *page*."""
        overall = self.extract_overall_rating(soup)
        reviews = [
            self.parse_review(article)
            for article in soup.select(self.selectors["review"])
        ]
        total_pages = self.extract_total_pages(soup).or_default(1) or 1

        review_set = ReviewSet(
            overall_rating=overall.value if overall.value else None,
            total_ratings=self.extract_total_ratings(soup).or_default(0),
            rating_distribution=self.extract_distribution(soup),
            reviews=reviews,
            current_page=page,
            total_pages=total_pages,
        )
        logger.debug(
            "Extracted %d reviews (page %d of %d)",
            len(reviews),
            page,
            total_pages,
        )
        return review_set
