"""
catalog_query – in-memory product catalog search, filtering and pagination.

Import path convention::

    from catalog_query.kernel.catalog import CatalogItem
    from catalog_query.application.search import QueryOptions, SortBy, apply_query
    from catalog_query.application.pagination import Paginator
    from catalog_query.application.search import CatalogSearchService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
