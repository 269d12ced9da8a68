"""Application search – the catalog query pipeline.

Stages run in a fixed order, each over the output of the previous one::

    text search -> category -> price -> rating -> sort

Every stage is a pure function that returns a new list and never mutates
its input, so the stages can also be composed individually.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from catalog_query.application.search.query import QueryOptions, SortBy
from catalog_query.config.settings.catalog import DEFAULT_SUGGESTION_LIMIT, DEFAULT_SUGGESTION_MAX_LENGTH
from catalog_query.kernel.catalog import CatalogItem
from catalog_query.kernel.text import sanitize_string, truncate_string

__all__ = [
    "MIN_SUGGESTION_QUERY_LENGTH",
    "apply_query",
    "filter_by_category",
    "filter_by_price",
    "filter_by_rating",
    "get_suggestions",
    "search_items",
    "sort_items",
]

MIN_SUGGESTION_QUERY_LENGTH = 2


def _int_or(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _matches(item: CatalogItem, term: str) -> bool:
    if term in item.name.lower():
        return True
    return any(term in keyword.lower() for keyword in item.keywords)


def search_items(items: Iterable[CatalogItem], query: Any) -> list[CatalogItem]:
    """Keep items whose name or any keyword contains *query* (case-insensitive).

    The query is HTML-escaped and trimmed first; an empty result means no
    text filtering at all.
    """
    term = sanitize_string(query).lower()
    if not term:
        return list(items)
    return [item for item in items if _matches(item, term)]


def filter_by_category(items: Iterable[CatalogItem], category: str | None) -> list[CatalogItem]:
    """Keep uncategorised items and items whose category equals *category* exactly."""
    if not category:
        return list(items)
    return [item for item in items if not item.category or item.category == category]


def filter_by_price(
    items: Iterable[CatalogItem],
    min_price: float = 0,
    max_price: float | None = None,
) -> list[CatalogItem]:
    """Keep items priced within ``[min_price, max_price]``; ``None`` is unbounded."""
    return [
        item
        for item in items
        if item.price_cents >= min_price and (max_price is None or item.price_cents <= max_price)
    ]


def filter_by_rating(items: Iterable[CatalogItem], min_rating: float = 0) -> list[CatalogItem]:
    """Keep items rated at least *min_rating* stars; unrated items count as 0."""
    return [item for item in items if item.stars >= min_rating]


def sort_items(items: Iterable[CatalogItem], sort_by: SortBy | str = SortBy.RELEVANCE) -> list[CatalogItem]:
    """Return a new list ordered by *sort_by*.

    Key-based orders rely on :func:`sorted` being stable, so items with equal
    keys keep their incoming relative order (``reverse=True`` preserves this
    too). ``newest`` reverses the incoming order and ``relevance`` keeps it.
    """
    ordered = list(items)
    match SortBy.parse(sort_by):
        case SortBy.PRICE_LOW_HIGH:
            return sorted(ordered, key=lambda item: item.price_cents)
        case SortBy.PRICE_HIGH_LOW:
            return sorted(ordered, key=lambda item: item.price_cents, reverse=True)
        case SortBy.RATING:
            return sorted(ordered, key=lambda item: item.stars, reverse=True)
        case SortBy.NEWEST:
            ordered.reverse()
            return ordered
        case _:
            return ordered


def apply_query(items: Sequence[CatalogItem], options: QueryOptions | None = None) -> list[CatalogItem]:
    """Run every pipeline stage over *items* and return the filtered, sorted list."""
    opts = options or QueryOptions()
    filtered = list(items)

    if opts.query:
        filtered = search_items(filtered, opts.query)
    if opts.category:
        filtered = filter_by_category(filtered, opts.category)
    filtered = filter_by_price(filtered, opts.min_price, opts.max_price)
    if opts.min_rating > 0:
        filtered = filter_by_rating(filtered, opts.min_rating)

    return sort_items(filtered, opts.sort_by)


def get_suggestions(
    items: Iterable[CatalogItem],
    query: Any,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
    max_length: int = DEFAULT_SUGGESTION_MAX_LENGTH,
) -> list[str]:
    """Collect up to *limit* distinct search suggestions for *query*.

    Matching product names (truncated to *max_length*) and matching keywords
    (lower-cased) are gathered in first-encountered order. Queries shorter
    than two characters yield nothing. A *limit* or *max_length* that is not
    an int falls back to its default; a non-positive *limit* yields nothing.
    """
    if not isinstance(query, str) or len(query) < MIN_SUGGESTION_QUERY_LENGTH:
        return []

    limit = _int_or(limit, DEFAULT_SUGGESTION_LIMIT)
    max_length = _int_or(max_length, DEFAULT_SUGGESTION_MAX_LENGTH)

    term = query.lower()
    suggestions: dict[str, None] = {}

    for item in items:
        if len(suggestions) >= limit:
            break
        if term in item.name.lower():
            suggestions.setdefault(truncate_string(item.name, max_length))
        for keyword in item.keywords:
            if len(suggestions) >= limit:
                break
            lowered = keyword.lower()
            if term in lowered:
                suggestions.setdefault(lowered)

    return list(suggestions)
