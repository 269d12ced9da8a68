"""Config settings – CatalogSettings."""

import dataclasses
from typing import ClassVar

from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import InvalidSettingValueError

DEFAULT_ITEMS_PER_PAGE = 12
DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_SUGGESTION_MAX_LENGTH = 50


@dataclasses.dataclass
class CatalogSettings(Settings):
    """Tunables for :class:`~catalog_query.application.search.CatalogSearchService`.

    Read from ``CATALOG_*`` environment variables by the settings loaders,
    e.g. ``CATALOG_ITEMS_PER_PAGE=24``.
    """

    _prefix: ClassVar[str] = "CATALOG"

    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    items_per_page_options: list[int] = dataclasses.field(default_factory=lambda: [6, 12, 24, 48])
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    suggestion_max_length: int = DEFAULT_SUGGESTION_MAX_LENGTH
    enable_search: bool = True

    def _validate(self) -> None:
        for name in ("items_per_page", "suggestion_limit", "suggestion_max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidSettingValueError(name, value, "must be a positive integer")
        if self.items_per_page_options and self.items_per_page not in self.items_per_page_options:
            raise InvalidSettingValueError(
                "items_per_page",
                self.items_per_page,
                f"must be one of {self.items_per_page_options}",
            )


__all__ = [
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_SUGGESTION_LIMIT",
    "DEFAULT_SUGGESTION_MAX_LENGTH",
    "CatalogSettings",
]
