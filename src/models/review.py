# src/models/review.py

"""Review models for a product's paginated ratings page."""

from dataclasses import dataclass, field


@dataclass
class Review:
    """A single customer review."""

    rating: int
    title: str = ""
    comment: str = ""
    date: str | None = None
    author: str = "Anonymous"
    verified: bool = False


@dataclass
class ReviewSet:
    """One page of reviews plus the product's rating summary."""

    overall_rating: float | None = None
    total_ratings: int = 0
    rating_distribution: dict[int, int] = field(
        default_factory=lambda: dict[int, int]()
    )
    reviews: list[Review] = field(
        default_factory=lambda: list[Review]()
    )
    current_page: int = 1
    total_pages: int = 1

    @property
    def has_more(self) -> bool:
        """Whether another page follows this one."""
        return self.current_page < self.total_pages
