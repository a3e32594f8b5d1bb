"""Domain primitives: properties, records, filters."""

from __future__ import annotations

from .filter import PARAM_SEPARATOR, Filter, FilterElement, normalize_filter_keys
from .property import NUMERIC_LIKE_TYPES, BaseProperty, PropertyType
from .record import BaseRecord, attach_populated

__all__: list[str] = [
    "NUMERIC_LIKE_TYPES",
    "PARAM_SEPARATOR",
    "BaseProperty",
    "BaseRecord",
    "Filter",
    "FilterElement",
    "PropertyType",
    "attach_populated",
    "normalize_filter_keys",
]
