"""BaseProperty — metadata of one field of a resource."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class PropertyType(str, Enum):
    """Closed set of property kinds understood by the administration layer."""

    STRING = "string"
    NUMBER = "number"
    FLOAT = "float"
    DATE = "date"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    REFERENCE = "reference"
    OTHER = "other"


# Kinds whose form value "" means "not provided" rather than a value.
NUMERIC_LIKE_TYPES: frozenset[PropertyType] = frozenset(
    {PropertyType.NUMBER, PropertyType.FLOAT, PropertyType.REFERENCE}
)


class BaseProperty(ABC):
    """
    Describes one field of a record.

    Adapters subclass this and answer from their store's column metadata.
    Instances are immutable and looked up by :meth:`name` on the owning
    resource.
    """

    @abstractmethod
    def name(self) -> str:
        """Unique name of the property within its resource."""
        ...

    @abstractmethod
    def type(self) -> PropertyType: ...

    @abstractmethod
    def is_editable(self) -> bool:
        """Whether client-supplied values for this field may be persisted."""
        ...

    @property
    def column(self) -> Any | None:
        """Queryable expression backing the property, ``None`` when virtual."""
        return None

    def is_visible(self) -> bool:
        return "password" not in self.name()

    def is_id(self) -> bool:
        return False

    def is_sortable(self) -> bool:
        return self.column is not None and not self.is_array()

    def is_required(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def reference(self) -> str | None:
        """Id of the referenced resource for ``reference`` properties."""
        return None

    def available_values(self) -> list[str] | None:
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name()!r} ({self.type().value})>"
