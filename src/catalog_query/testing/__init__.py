"""Testing support – Hypothesis strategies for catalog data."""

from catalog_query.testing.strategies import (
    catalog_item_strategy,
    query_options_strategy,
    rating_strategy,
)

__all__ = [
    "catalog_item_strategy",
    "query_options_strategy",
    "rating_strategy",
]
