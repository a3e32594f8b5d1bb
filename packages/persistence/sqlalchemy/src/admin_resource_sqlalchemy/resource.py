"""
Resource — exposes one SQLAlchemy mapped class to the administration layer.

Filters are compiled with :func:`convert_filter` and params sanitized with
:func:`parse_params` before reaching the :class:`SQLAlchemyModelStore`::

    factory = async_sessionmaker(engine, expire_on_commit=False)
    users = Resource(User, factory)

    total = await users.count(Filter({"email": "doe"}, users))
    page = await users.find(None, FindOptions(limit=10, sort=SortOptions("email")))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper

from admin_resource_core.domain.record import BaseRecord
from admin_resource_core.options import FindOptions, SortOptions
from admin_resource_core.ports.resource import BaseResource
from admin_resource_core.primitives.exceptions import (
    StorageError,
    UnsortablePropertyError,
)

from .config import ResourceConfig
from .filters.compiler import convert_filter
from .params import parse_params
from .property import Property, virtual_attribute_names
from .store import SQLAlchemyModelStore
from .validation import create_validation_error

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

    from admin_resource_core.domain.filter import Filter
    from admin_resource_core.domain.property import BaseProperty
    from admin_resource_core.ports.store import IModelStore

logger = logging.getLogger(__name__)


class Resource(BaseResource):
    """
    :class:`BaseResource` implementation for a SQLAlchemy declarative model.

    Args:
        model: The mapped class.
        session_factory: ``async_sessionmaker`` bound to an ``AsyncEngine``;
            it provides both sessions and database metadata.
        config: Paging/sorting defaults.
        store: Storage collaborator override (defaults to
            :class:`SQLAlchemyModelStore`).
    """

    def __init__(
        self,
        model: type[Any],
        session_factory: async_sessionmaker[AsyncSession],
        *,
        config: ResourceConfig | None = None,
        store: IModelStore | None = None,
    ) -> None:
        self.model = model
        self.config = config or ResourceConfig()
        self._session_factory = session_factory
        self._store: IModelStore = store or SQLAlchemyModelStore(model, session_factory)
        properties = [
            Property.from_column(attr) for attr in sa_inspect(model).column_attrs
        ]
        properties.extend(Property.virtual(n) for n in virtual_attribute_names(model))
        self._properties: dict[str, Property] = {p.name(): p for p in properties}

    @classmethod
    def is_adapter_for(cls, raw_resource: Any) -> bool:
        if not isinstance(raw_resource, type):
            return False
        return isinstance(sa_inspect(raw_resource, raiseerr=False), Mapper)

    # -- metadata -------------------------------------------------------------

    @property
    def bind(self) -> AsyncEngine | None:
        return self._session_factory.kw.get("bind")  # type: ignore[no-any-return]

    def id(self) -> str:
        return str(sa_inspect(self.model).local_table.name)

    def database_name(self) -> str | None:
        if self.bind is None:
            return None
        url = self.bind.url
        return url.database or url.host

    def database_type(self) -> str:
        if self.bind is None:
            return "unknown"
        return str(self.bind.dialect.name)

    def properties(self) -> list[BaseProperty]:
        return list(self._properties.values())

    def property(self, path: str) -> Property | None:
        return self._properties.get(path)

    # -- reads ----------------------------------------------------------------

    async def count(self, filter: Filter | None = None) -> int:
        return await self._store.count(convert_filter(filter))

    async def find(
        self, filter: Filter | None, options: FindOptions | None = None
    ) -> list[BaseRecord]:
        options = options or FindOptions(
            limit=self.config.default_limit,
            sort=SortOptions(direction=self.config.default_direction),
        )
        sort_by = options.sort.sort_by or self._default_sort_field()
        sort_property = self.property(sort_by) if sort_by else None
        if sort_property is None or not sort_property.is_sortable():
            raise UnsortablePropertyError(sort_by, self.name())

        limit = min(max(1, options.limit), self.config.max_limit)
        logger.debug(
            "find %s sort=%s %s limit=%d offset=%d",
            self.id(),
            sort_by,
            options.sort.direction,
            limit,
            options.offset,
        )
        rows = await self._store.find_all(
            convert_filter(filter),
            limit=limit,
            offset=max(0, options.offset),
            order_by=[(sort_by, options.sort.direction)],
        )
        return [BaseRecord(row, self) for row in rows]

    async def find_one(self, record_id: Any) -> BaseRecord | None:
        row = await self._store.get(record_id)
        return BaseRecord(row, self) if row is not None else None

    async def find_many(self, record_ids: list[Any]) -> list[BaseRecord]:
        rows = await self._store.find_by_pks(record_ids)
        return [BaseRecord(row, self) for row in rows]

    async def populate(
        self, records: list[BaseRecord], property: BaseProperty
    ) -> dict[Any, BaseRecord]:
        name = property.name()
        referenced_ids = list(
            dict.fromkeys(
                r.param(name) for r in records if r.param(name) is not None
            )
        )
        rows = await self._store.find_by_pks(referenced_ids)
        id_property = self.id_property()
        pk_name = id_property.name() if id_property is not None else None
        by_pk = {row.get(pk_name): BaseRecord(row, self) for row in rows}

        resolved: dict[Any, BaseRecord] = {}
        for record in records:
            referenced = by_pk.get(record.param(name))
            if referenced is not None:
                resolved[record.id()] = referenced
        return resolved

    # -- writes ---------------------------------------------------------------

    async def create(self, params: dict[str, Any]) -> dict[str, Any]:
        parsed = self.parse_params(params)
        try:
            return await self._store.insert(parsed)
        except StorageError as error:
            if error.is_validation:
                raise create_validation_error(error) from error
            raise

    async def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        parsed = self.parse_params(params)
        try:
            return await self._store.update(record_id, parsed)
        except StorageError as error:
            if error.is_validation:
                raise create_validation_error(error) from error
            raise

    async def delete(self, record_id: Any) -> int:
        return await self._store.delete(record_id)

    def parse_params(self, params: dict[str, Any]) -> dict[str, Any]:
        """Sanitize form params with this resource's properties."""
        return parse_params(params, self.properties())

    # -- internals ------------------------------------------------------------

    def _default_sort_field(self) -> str | None:
        id_property = self.id_property()
        return id_property.name() if id_property is not None else None
