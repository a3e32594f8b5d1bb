"""Database — every mapped class of a declarative base as a resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.orm import DeclarativeBase, Mapper, registry

from admin_resource_core.ports.database import BaseDatabase

from .resource import Resource

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from .config import ResourceConfig

logger = logging.getLogger(__name__)


class Database(BaseDatabase):
    """
    Wraps a declarative base (or its ``registry``)::

        db = Database(Base, async_sessionmaker(engine, expire_on_commit=False))
        resources = db.resources()
    """

    def __init__(
        self,
        base: type[DeclarativeBase] | registry,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        config: ResourceConfig | None = None,
    ) -> None:
        self._registry: registry = base if isinstance(base, registry) else base.registry
        self._session_factory = session_factory
        self._config = config

    @classmethod
    def is_adapter_for(cls, raw_database: Any) -> bool:
        if isinstance(raw_database, registry):
            return True
        return (
            isinstance(raw_database, type)
            and issubclass(raw_database, DeclarativeBase)
            and not Resource.is_adapter_for(raw_database)
        )

    def resources(self) -> list[Resource]:
        mappers: list[Mapper[Any]] = []
        for mapper in self._registry.mappers:
            if len(mapper.primary_key) != 1:
                logger.warning(
                    "Skipping %s: composite primary keys are not supported",
                    mapper.class_.__name__,
                )
                continue
            mappers.append(mapper)
        mappers.sort(key=lambda m: (m.local_table.name, m.class_.__name__))
        return [
            Resource(mapper.class_, self._session_factory, config=self._config)
            for mapper in mappers
        ]
