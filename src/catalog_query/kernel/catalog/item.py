"""Kernel catalog – CatalogItem and Rating value objects."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Mapping
from typing import Any

_KNOWN_KEYS = frozenset(
    {"id", "name", "keywords", "priceCents", "price_cents", "rating", "type", "category"}
)


def _number(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return value


def _cents(value: Any) -> int | float:
    # fractional cents are kept as-is so price bounds compare the raw amount
    return _number(value, 0)


@dataclasses.dataclass(frozen=True, slots=True)
class Rating:
    """Star rating summary of a product."""

    stars: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Rating | None":
        if not isinstance(data, Mapping):
            return None
        return cls(
            stars=float(_number(data.get("stars"), 0.0)),
            count=int(_number(data.get("count"), 0)),
        )


@dataclasses.dataclass(frozen=True)
class CatalogItem:
    """A single product record, read-only from the engine's point of view.

    ``category`` is exposed as ``type`` at the boundary. Items without a
    category pass every category filter.
    """

    id: str
    name: str = ""
    keywords: tuple[str, ...] = ()
    price_cents: int | float = 0
    rating: Rating | None = None
    category: str | None = None
    extras: Mapping[str, Any] = dataclasses.field(default_factory=dict, compare=False, repr=False)

    @property
    def stars(self) -> float:
        """Rating stars, or ``0`` when the item has no rating."""
        if self.rating is None:
            return 0.0
        return self.rating.stars

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogItem":
        """Build an item from a boundary record.

        Accepts camelCase (``priceCents``, ``type``) or snake_case
        (``price_cents``, ``category``) keys. Missing or malformed fields
        degrade to their defaults; keys the engine does not use are kept in
        :attr:`extras`.
        """
        raw_keywords = data.get("keywords") or ()
        keywords: tuple[str, ...] = ()
        if isinstance(raw_keywords, Iterable) and not isinstance(raw_keywords, (str, bytes)):
            keywords = tuple(k for k in raw_keywords if isinstance(k, str))

        price = data.get("priceCents", data.get("price_cents"))
        category = data.get("type", data.get("category"))
        name = data.get("name")

        return cls(
            id=str(data.get("id", "")),
            name=name if isinstance(name, str) else "",
            keywords=keywords,
            price_cents=_cents(price),
            rating=Rating.from_dict(data.get("rating")),
            category=category if isinstance(category, str) and category else None,
            extras={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the boundary (camelCase) shape."""
        payload: dict[str, Any] = {
            **self.extras,
            "id": self.id,
            "name": self.name,
            "keywords": list(self.keywords),
            "priceCents": self.price_cents,
        }
        if self.rating is not None:
            payload["rating"] = {"stars": self.rating.stars, "count": self.rating.count}
        if self.category is not None:
            payload["type"] = self.category
        return payload


__all__ = ["CatalogItem", "Rating"]
