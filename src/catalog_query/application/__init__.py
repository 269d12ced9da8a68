"""Application – query pipeline, pagination and the search service."""

from catalog_query.application.pagination import PageInfo, Paginator, ResultPage
from catalog_query.application.search import (
    CatalogSearchService,
    QueryOptions,
    SortBy,
    apply_query,
    get_suggestions,
)

__all__ = [
    "CatalogSearchService",
    "PageInfo",
    "Paginator",
    "QueryOptions",
    "ResultPage",
    "SortBy",
    "apply_query",
    "get_suggestions",
]
