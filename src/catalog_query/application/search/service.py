"""Application search – CatalogSearchService."""
from __future__ import annotations

import dataclasses
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from catalog_query.application.pagination import Paginator, ResultPage
from catalog_query.application.search.pipeline import apply_query, get_suggestions
from catalog_query.application.search.query import QueryOptions
from catalog_query.config.settings import CatalogSettings
from catalog_query.kernel.catalog import CatalogItem
from catalog_query.observability.logging import get_logger

__all__ = ["CatalogSearchService"]

_log = get_logger(__name__)


class CatalogSearchService:
    """Search, filter, sort and paginate a fixed in-memory catalog.

    Instances are built explicitly by the caller; there is no shared
    default instance. The catalog is copied into a tuple on construction
    and never modified afterwards, so a single service can be queried from
    several threads.
    """

    def __init__(self, items: Iterable[CatalogItem], settings: CatalogSettings | None = None) -> None:
        self._items: tuple[CatalogItem, ...] = tuple(items)
        self._settings = settings or CatalogSettings()

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        settings: CatalogSettings | None = None,
    ) -> "CatalogSearchService":
        """Build a service from boundary records (dicts with ``priceCents``, ``type``, ...)."""
        return cls((CatalogItem.from_dict(r) for r in records), settings)

    @property
    def items(self) -> Sequence[CatalogItem]:
        return self._items

    @property
    def settings(self) -> CatalogSettings:
        return self._settings

    def search(self, options: QueryOptions | None = None, page: int = 1) -> ResultPage[CatalogItem]:
        """Run the query pipeline and return the requested page.

        An out-of-range *page* leaves the paginator on page 1.
        """
        t0 = time.monotonic()
        opts = options or QueryOptions()
        if opts.query and not self._settings.enable_search:
            opts = dataclasses.replace(opts, query="")

        filtered = apply_query(self._items, opts)
        paginator = Paginator(len(filtered), self._settings.items_per_page)
        if page != 1:
            paginator.go_to_page(page)
        result = paginator.page(filtered)

        _log.info(
            "catalog.search.completed",
            query=opts.query,
            category=opts.category,
            sort_by=opts.sort_by.value,
            requested_page=page,
            page=result.current_page,
            total=result.total_items,
            took_ms=int((time.monotonic() - t0) * 1000),
        )
        return result

    def suggest(self, query: str, limit: int | None = None) -> list[str]:
        """Return search suggestions for *query*.

        A missing or non-int *limit* uses the configured ``suggestion_limit``.
        """
        if isinstance(limit, bool) or not isinstance(limit, int):
            limit = self._settings.suggestion_limit
        suggestions = get_suggestions(
            self._items,
            query,
            limit=limit,
            max_length=self._settings.suggestion_max_length,
        )
        _log.debug("catalog.suggest.completed", query=query, count=len(suggestions))
        return suggestions

    def __len__(self) -> int:
        return len(self._items)
