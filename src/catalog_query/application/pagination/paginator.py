"""Application pagination – Paginator.

A stateful page cursor over a sequence of known length. ``current_page`` is
1-based and only ever changes through :meth:`Paginator.go_to_page`.

An empty paginator reports ``total_pages() == 0`` while ``current_page``
stays at 1; it is not clamped, so ``is_last_page()`` is ``False`` and
``go_to_page(1)`` fails. ``start_item``/``end_item`` in :meth:`Paginator.info`
are likewise derived without bounds correction.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, TypeVar

from catalog_query.application.pagination.page import PageInfo, ResultPage
from catalog_query.config.settings.catalog import DEFAULT_ITEMS_PER_PAGE
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def _non_negative_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


class Paginator:
    """Fixed-size page windows over ``total_items`` items."""

    def __init__(self, total_items: int, items_per_page: int = DEFAULT_ITEMS_PER_PAGE) -> None:
        total = _non_negative_int(total_items)
        per_page = _non_negative_int(items_per_page)
        if total is None or not per_page:
            _log.debug(
                "pagination.invalid_arguments",
                total_items=total_items,
                items_per_page=items_per_page,
            )
        self._total_items = total if total is not None else 0
        self._items_per_page = per_page if per_page else DEFAULT_ITEMS_PER_PAGE
        self._current_page = 1

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def current_page(self) -> int:
        return self._current_page

    def total_pages(self) -> int:
        return math.ceil(self._total_items / self._items_per_page)

    def page_items(self, items: Sequence[T]) -> list[T]:
        """Return the current page's slice of *items*; empty when out of range."""
        start = (self._current_page - 1) * self._items_per_page
        return list(items[start:start + self._items_per_page])

    def go_to_page(self, page_number: int) -> bool:
        """Move to *page_number* if it is within ``1..total_pages()``."""
        max_page = self.total_pages()
        if (
            isinstance(page_number, int)
            and not isinstance(page_number, bool)
            and 1 <= page_number <= max_page
        ):
            self._current_page = page_number
            return True
        _log.debug(
            "pagination.navigation_rejected",
            requested=page_number,
            current_page=self._current_page,
            total_pages=max_page,
        )
        return False

    def next_page(self) -> bool:
        return self.go_to_page(self._current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self._current_page - 1)

    def is_first_page(self) -> bool:
        return self._current_page == 1

    def is_last_page(self) -> bool:
        return self._current_page == self.total_pages()

    def info(self) -> PageInfo:
        return PageInfo(
            current_page=self._current_page,
            total_pages=self.total_pages(),
            total_items=self._total_items,
            items_per_page=self._items_per_page,
            start_item=(self._current_page - 1) * self._items_per_page + 1,
            end_item=min(self._current_page * self._items_per_page, self._total_items),
        )

    def page(self, items: Sequence[T]) -> ResultPage[T]:
        """Bundle :meth:`page_items` and :meth:`info` into a :class:`ResultPage`."""
        return ResultPage.of(self.page_items(items), self.info())

    def __repr__(self) -> str:
        return (
            f"Paginator(total_items={self._total_items}, "
            f"items_per_page={self._items_per_page}, current_page={self._current_page})"
        )


__all__ = ["Paginator"]
