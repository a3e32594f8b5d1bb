"""admin-resource-core — resource contract consumed by the administration layer.

Zero infrastructure dependencies. Storage adapters implement
:class:`BaseResource`, :class:`BaseProperty` and :class:`IModelStore`.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    NUMERIC_LIKE_TYPES,
    PARAM_SEPARATOR,
    BaseProperty,
    BaseRecord,
    Filter,
    FilterElement,
    PropertyType,
    attach_populated,
    normalize_filter_keys,
)

# ── Options ──────────────────────────────────────────────────────
from .options import FindOptions, SortOptions

# ── Ports ────────────────────────────────────────────────────────
from .ports import BaseDatabase, BaseResource, IModelStore

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    AdminResourceError,
    PropertyError,
    RecordNotFoundError,
    ResourceConfigurationError,
    StorageError,
    StorageErrorKind,
    UnsortablePropertyError,
    ValidationError,
)

__all__ = [
    # Domain
    "NUMERIC_LIKE_TYPES",
    "PARAM_SEPARATOR",
    "BaseProperty",
    "BaseRecord",
    "Filter",
    "FilterElement",
    "PropertyType",
    "attach_populated",
    "normalize_filter_keys",
    # Options
    "FindOptions",
    "SortOptions",
    # Ports
    "BaseDatabase",
    "BaseResource",
    "IModelStore",
    # Primitives
    "AdminResourceError",
    "PropertyError",
    "RecordNotFoundError",
    "ResourceConfigurationError",
    "StorageError",
    "StorageErrorKind",
    "UnsortablePropertyError",
    "ValidationError",
]
