"""Application search – QueryOptions value object and SortBy."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ["QueryOptions", "SortBy"]


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    PRICE_LOW_HIGH = "price_low_high"
    PRICE_HIGH_LOW = "price_high_low"
    RATING = "rating"
    NEWEST = "newest"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "SortBy":
        """Return the matching member, or :attr:`RELEVANCE` for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return cls.RELEVANCE


_SORT_LABELS: dict[SortBy, str] = {
    SortBy.RELEVANCE: "Relevance",
    SortBy.PRICE_LOW_HIGH: "Price: Low to High",
    SortBy.PRICE_HIGH_LOW: "Price: High to Low",
    SortBy.RATING: "Rating",
    SortBy.NEWEST: "Newest",
}


def _finite(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclasses.dataclass(frozen=True)
class QueryOptions:
    """Search, filter and sort parameters for a single catalog query.

    Malformed values never raise: each field falls back to its default.
    ``max_price=None`` means the price range is unbounded above, and
    ``min_rating=0`` disables the rating filter entirely.
    """

    query: str = ""
    category: str | None = None
    min_price: int = 0
    max_price: int | None = None
    min_rating: float = 0
    sort_by: SortBy = SortBy.RELEVANCE

    def __post_init__(self) -> None:
        if not isinstance(self.query, str):
            object.__setattr__(self, "query", "")
        if not isinstance(self.category, str) or not self.category:
            object.__setattr__(self, "category", None)
        if not _finite(self.min_price):
            object.__setattr__(self, "min_price", 0)
        if self.max_price is not None and not _finite(self.max_price):
            object.__setattr__(self, "max_price", None)
        if not _finite(self.min_rating):
            object.__setattr__(self, "min_rating", 0)
        object.__setattr__(self, "sort_by", SortBy.parse(self.sort_by))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueryOptions":
        """Build options from camelCase (``minPrice``) or snake_case (``min_price``) keys."""

        def pick(camel: str, snake: str, default: Any) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        return cls(
            query=data.get("query", ""),
            category=data.get("category"),
            min_price=pick("minPrice", "min_price", 0),
            max_price=pick("maxPrice", "max_price", None),
            min_rating=pick("minRating", "min_rating", 0),
            sort_by=pick("sortBy", "sort_by", SortBy.RELEVANCE),
        )
