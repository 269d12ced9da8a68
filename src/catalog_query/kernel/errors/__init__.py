"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError          (application.py)
        └── ConfigError           (catalog_query.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError

The query pipeline and paginator never raise; only explicit settings
loading does.
"""

from catalog_query.kernel.errors.application import ApplicationError
from catalog_query.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
