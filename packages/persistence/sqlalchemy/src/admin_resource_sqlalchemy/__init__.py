"""SQLAlchemy adapter for the admin-resource contract."""

from __future__ import annotations

from .config import ResourceConfig
from .database import Database
from .exceptions import (
    RecordNotFoundError,
    SQLAlchemyAdapterError,
    StorageError,
    StorageErrorKind,
    UnsupportedModelError,
)
from .filters import (
    FilterCondition,
    coerce_number,
    convert_filter,
    escape_like,
    where_clause,
)
from .params import parse_params
from .property import Property, virtual_attribute_names
from .resource import Resource
from .schema import build_params_schema
from .store import SQLAlchemyModelStore
from .validation import create_validation_error

__all__ = [
    # Adapters
    "Database",
    "Property",
    "Resource",
    "ResourceConfig",
    "SQLAlchemyModelStore",
    # Filter translation / params normalization
    "FilterCondition",
    "coerce_number",
    "convert_filter",
    "escape_like",
    "parse_params",
    "where_clause",
    # Schema / validation
    "build_params_schema",
    "create_validation_error",
    "virtual_attribute_names",
    # Exceptions
    "RecordNotFoundError",
    "SQLAlchemyAdapterError",
    "StorageError",
    "StorageErrorKind",
    "UnsupportedModelError",
]
