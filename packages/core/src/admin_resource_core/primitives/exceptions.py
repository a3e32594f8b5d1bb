"""Resource contract and storage exceptions for admin-resource-core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AdminResourceError(Exception):
    """Root exception for the entire admin-resource toolkit."""


@dataclass(frozen=True)
class PropertyError:
    """A single validation failure attached to one property."""

    message: str
    kind: str | None = None


class ValidationError(AdminResourceError):
    """Raised when a record fails validation during create or update.

    Carries structured errors: ``{property_name: PropertyError}``.
    """

    def __init__(
        self,
        errors: dict[str, PropertyError] | None = None,
        base_error: PropertyError | None = None,
    ) -> None:
        self.errors: dict[str, PropertyError] = dict(errors or {})
        self.base_error = base_error
        message = base_error.message if base_error else "Resource validation failed"
        if self.errors:
            fields = ", ".join(sorted(self.errors))
            message = f"{message}: {fields}"
        super().__init__(message)


class UnsortablePropertyError(AdminResourceError):
    """Raised when ``find`` is asked to sort on a property that cannot be sorted."""

    def __init__(self, field: str | None, resource: str) -> None:
        self.field = field
        self.resource = resource
        super().__init__(
            f'Cannot sort on property "{field}" of resource "{resource}": '
            "it is virtual, not a plain column, or does not exist. "
            "Provide a different sort field."
        )


class ResourceConfigurationError(AdminResourceError):
    """Raised when a resource cannot be built from the given model."""


# ── Storage collaborator errors ──────────────────────────────────────


class StorageErrorKind(str, Enum):
    """Failure classes reported by a storage collaborator."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class StorageError(AdminResourceError):
    """Structured failure raised by an ``IModelStore`` implementation.

    ``errors`` is only populated for ``StorageErrorKind.VALIDATION`` and holds
    one :class:`PropertyError` per offending field.
    """

    def __init__(
        self,
        kind: StorageErrorKind,
        message: str | None = None,
        *,
        errors: dict[str, PropertyError] | None = None,
    ) -> None:
        self.kind = kind
        self.errors: dict[str, PropertyError] = dict(errors or {})
        super().__init__(message or f"Storage operation failed ({kind.value})")

    @property
    def is_validation(self) -> bool:
        return self.kind is StorageErrorKind.VALIDATION


class RecordNotFoundError(StorageError):
    """Raised when a record with the given primary key does not exist."""

    def __init__(self, resource: str, record_id: Any) -> None:
        self.resource = resource
        self.record_id = record_id
        super().__init__(
            StorageErrorKind.NOT_FOUND,
            f"{resource} with id={record_id!r} not found",
        )
