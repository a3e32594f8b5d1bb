"""Primitives: exceptions shared by resources and storage collaborators."""

from __future__ import annotations

from .exceptions import (
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
    "AdminResourceError",
    "PropertyError",
    "RecordNotFoundError",
    "ResourceConfigurationError",
    "StorageError",
    "StorageErrorKind",
    "UnsortablePropertyError",
    "ValidationError",
]
