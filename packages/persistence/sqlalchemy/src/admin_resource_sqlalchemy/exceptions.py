"""Exceptions for the SQLAlchemy resource adapter."""

from __future__ import annotations

from admin_resource_core.primitives.exceptions import (
    AdminResourceError,
    RecordNotFoundError,
    ResourceConfigurationError,
    StorageError,
    StorageErrorKind,
)


class SQLAlchemyAdapterError(AdminResourceError):
    """Base exception for all SQLAlchemy adapter errors."""


class UnsupportedModelError(SQLAlchemyAdapterError, ResourceConfigurationError):
    """Raised when a model cannot be exposed as a resource (e.g. composite keys)."""


__all__: list[str] = [
    "RecordNotFoundError",
    "SQLAlchemyAdapterError",
    "StorageError",
    "StorageErrorKind",
    "UnsupportedModelError",
]
