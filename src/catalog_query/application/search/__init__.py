"""Application search – catalog query pipeline and search service."""
from catalog_query.application.search.pipeline import (
    apply_query,
    filter_by_category,
    filter_by_price,
    filter_by_rating,
    get_suggestions,
    search_items,
    sort_items,
)
from catalog_query.application.search.query import QueryOptions, SortBy
from catalog_query.application.search.service import CatalogSearchService

__all__ = [
    "CatalogSearchService",
    "QueryOptions",
    "SortBy",
    "apply_query",
    "filter_by_category",
    "filter_by_price",
    "filter_by_rating",
    "get_suggestions",
    "search_items",
    "sort_items",
]
