"""Application pagination – PageInfo and ResultPage."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class PageInfo:
    """Page window metadata; all positions are 1-based."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    start_item: int
    end_item: int


@dataclasses.dataclass
class ResultPage(Generic[T]):
    """One page of results plus the metadata needed to render navigation."""

    items: list[T]
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    start_item: int
    end_item: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def info(self) -> PageInfo:
        return PageInfo(
            current_page=self.current_page,
            total_pages=self.total_pages,
            total_items=self.total_items,
            items_per_page=self.items_per_page,
            start_item=self.start_item,
            end_item=self.end_item,
        )

    def map(self, fn: Callable[[T], Any]) -> "ResultPage[Any]":
        """Return a new :class:`ResultPage` with each item transformed by *fn*."""
        return dataclasses.replace(self, items=[fn(item) for item in self.items])

    @classmethod
    def of(cls, items: list[T], info: PageInfo) -> "ResultPage[T]":
        return cls(items=items, **dataclasses.asdict(info))


__all__ = ["PageInfo", "ResultPage"]
