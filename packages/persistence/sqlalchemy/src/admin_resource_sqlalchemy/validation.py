"""Translate storage validation failures into the host ``ValidationError``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from admin_resource_core.primitives.exceptions import PropertyError, ValidationError

if TYPE_CHECKING:
    from admin_resource_core.primitives.exceptions import StorageError


def create_validation_error(error: StorageError) -> ValidationError:
    """Build a :class:`ValidationError` with one entry per offending field."""
    errors = {
        field: PropertyError(message=detail.message, kind=detail.kind)
        for field, detail in error.errors.items()
    }
    return ValidationError(errors, base_error=PropertyError(message=str(error)))
