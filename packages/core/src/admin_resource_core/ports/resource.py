"""BaseResource — contract between the administration layer and a data store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..domain.property import PropertyType

if TYPE_CHECKING:
    from ..domain.filter import Filter
    from ..domain.property import BaseProperty
    from ..domain.record import BaseRecord
    from ..options import FindOptions


class BaseResource(ABC):
    """
    The adapter's view of one queryable/mutable entity.

    Adapters answer metadata questions (``id``, ``properties``...) from the
    underlying model and implement the async CRUD operations against their
    storage.  ``create``/``update`` raise
    :class:`~admin_resource_core.primitives.exceptions.ValidationError` on
    per-field failures and propagate any other error unchanged.
    """

    @classmethod
    @abstractmethod
    def is_adapter_for(cls, raw_resource: Any) -> bool:
        """Return ``True`` when this adapter can wrap *raw_resource*."""
        ...

    # -- metadata -------------------------------------------------------------

    @abstractmethod
    def id(self) -> str: ...

    def name(self) -> str:
        return self.id()

    @abstractmethod
    def database_name(self) -> str | None: ...

    @abstractmethod
    def database_type(self) -> str: ...

    @abstractmethod
    def properties(self) -> list[BaseProperty]: ...

    def property(self, path: str) -> BaseProperty | None:
        for prop in self.properties():
            if prop.name() == path:
                return prop
        return None

    def id_property(self) -> BaseProperty | None:
        for prop in self.properties():
            if prop.is_id():
                return prop
        return None

    def title_property(self) -> BaseProperty | None:
        """First visible string property that does not look like an id."""
        for prop in self.properties():
            if (
                prop.type() is PropertyType.STRING
                and prop.is_visible()
                and not prop.is_id()
                and prop.name().lower() not in ("id", "_id", "uuid")
            ):
                return prop
        return self.id_property()

    # -- operations -----------------------------------------------------------

    @abstractmethod
    async def count(self, filter: Filter | None = None) -> int: ...

    @abstractmethod
    async def find(
        self, filter: Filter | None, options: FindOptions | None = None
    ) -> list[BaseRecord]: ...

    @abstractmethod
    async def find_one(self, record_id: Any) -> BaseRecord | None: ...

    @abstractmethod
    async def find_many(self, record_ids: list[Any]) -> list[BaseRecord]: ...

    @abstractmethod
    async def create(self, params: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def delete(self, record_id: Any) -> int: ...

    @abstractmethod
    async def populate(
        self, records: list[BaseRecord], property: BaseProperty
    ) -> dict[Any, BaseRecord]:
        """Resolve *property* references of *records* against this resource.

        Returns record id -> referenced record; records whose reference does
        not resolve are absent from the mapping.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id()!r}>"
