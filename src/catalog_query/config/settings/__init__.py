"""Config settings – env-based configuration."""
from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.catalog import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_SUGGESTION_LIMIT,
    DEFAULT_SUGGESTION_MAX_LENGTH,
    CatalogSettings,
)
from catalog_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_SUGGESTION_LIMIT",
    "DEFAULT_SUGGESTION_MAX_LENGTH",
    "CatalogSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
