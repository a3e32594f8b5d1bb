"""
SQLAlchemyModelStore — storage collaborator for one mapped model.

Runs every call in its own ``AsyncSession`` taken from the configured
``async_sessionmaker`` and exchanges rows as plain ``dict`` params.

Write failures are decided here, at the storage boundary:

- params that the generated pydantic schema rejects, and values refused by
  the model's ``@validates`` hooks, raise ``StorageError`` of kind
  ``VALIDATION`` with one message per field;
- a missing primary key on update raises ``RecordNotFoundError``;
- anything else (``IntegrityError``, driver errors...) propagates unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import InvalidRequestError

from admin_resource_core.primitives.exceptions import (
    PropertyError,
    RecordNotFoundError,
    StorageError,
    StorageErrorKind,
)

from .exceptions import UnsupportedModelError
from .filters.condition import where_clause
from .property import virtual_attribute_names
from .schema import build_params_schema, errors_from_pydantic

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class SQLAlchemyModelStore:
    """
    :class:`~admin_resource_core.ports.store.IModelStore` over an async session
    factory::

        factory = async_sessionmaker(engine, expire_on_commit=False)
        store = SQLAlchemyModelStore(User, factory)
        row = await store.insert({"email": "john@example.com"})
    """

    def __init__(
        self,
        model: type[Any],
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        mapper = sa_inspect(model)
        if len(mapper.primary_key) != 1:
            raise UnsupportedModelError(
                f"Model {model.__name__} must have exactly one primary key column"
            )
        self.model = model
        self._session_factory = session_factory
        self._mapper = mapper
        self.pk_name: str = mapper.get_property_by_column(mapper.primary_key[0]).key
        self._virtual_names = virtual_attribute_names(model)

    @property
    def table_name(self) -> str:
        return str(self._mapper.local_table.name)

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    # -- reads ----------------------------------------------------------------

    async def count(self, condition: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        stmt = self._apply_condition(stmt, condition)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def find_all(
        self,
        condition: Any,
        *,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Sequence[tuple[str, str]] = (),
    ) -> list[dict[str, Any]]:
        stmt = self._apply_condition(select(self.model), condition)
        for name, direction in order_by:
            column = getattr(self.model, name)
            stmt = stmt.order_by(desc(column) if direction == "desc" else asc(column))
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self.to_params(m) for m in result.scalars().all()]

    async def find_by_pks(self, pks: Sequence[Any]) -> list[dict[str, Any]]:
        if not pks:
            return []
        stmt = select(self.model).where(self._pk_column.in_(list(pks)))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self.to_params(m) for m in result.scalars().all()]

    async def get(self, pk: Any) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            instance = await session.get(self.model, pk)
            if instance is None:
                return None
            return self.to_params(instance)

    # -- writes ---------------------------------------------------------------

    async def insert(self, params: dict[str, Any]) -> dict[str, Any]:
        values = self._validate(params, partial=False)
        async with self._session_factory() as session:
            instance = self.model()
            self._assign(instance, values)
            session.add(instance)
            await session.commit()
            await session.refresh(instance)
            logger.info("Inserted %s record %r", self.table_name, self._pk_of(instance))
            return self.to_params(instance)

    async def update(self, pk: Any, params: dict[str, Any]) -> dict[str, Any]:
        values = self._validate(params, partial=True)
        async with self._session_factory() as session:
            instance = await session.get(self.model, pk)
            if instance is None:
                raise RecordNotFoundError(self.table_name, pk)
            self._assign(instance, values)
            await session.commit()
            await session.refresh(instance)
            logger.info("Updated %s record %r", self.table_name, pk)
            return self.to_params(instance)

    async def delete(self, pk: Any) -> int:
        stmt = delete(self.model).where(self._pk_column == pk)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
            logger.info("Deleted %s record %r", self.table_name, pk)
            return int(result.rowcount or 0)

    # -- mapping --------------------------------------------------------------

    def to_params(self, instance: Any) -> dict[str, Any]:
        """Column values (plus computable virtual attributes) of *instance*."""
        params = {
            attr.key: getattr(instance, attr.key) for attr in self._mapper.column_attrs
        }
        for name in self._virtual_names:
            try:
                params[name] = getattr(instance, name)
            except InvalidRequestError:
                # e.g. a getter touching an unloaded relationship
                logger.debug("Virtual attribute %r not computable, skipped", name)
        return params

    # -- internals ------------------------------------------------------------

    @property
    def _pk_column(self) -> Any:
        return getattr(self.model, self.pk_name)

    def _pk_of(self, instance: Any) -> Any:
        return getattr(instance, self.pk_name)

    @staticmethod
    def _apply_condition(stmt: Select[Any], condition: Any) -> Select[Any]:
        clause = where_clause(condition)
        return stmt if clause is None else stmt.where(clause)

    def _validate(self, params: dict[str, Any], *, partial: bool) -> dict[str, Any]:
        schema = build_params_schema(self.model, partial=partial)
        try:
            validated = schema.model_validate(params)
        except PydanticValidationError as exc:
            raise StorageError(
                StorageErrorKind.VALIDATION,
                f"{self.table_name} validation failed",
                errors=errors_from_pydantic(exc),
            ) from exc
        return validated.model_dump(exclude_unset=True)

    def _assign(self, instance: Any, values: dict[str, Any]) -> None:
        """Set attributes one by one so ``@validates`` failures map to fields."""
        errors: dict[str, PropertyError] = {}
        for key, value in values.items():
            try:
                setattr(instance, key, value)
            except ValueError as exc:
                errors[key] = PropertyError(message=str(exc), kind="validator")
        if errors:
            raise StorageError(
                StorageErrorKind.VALIDATION,
                f"{self.table_name} validation failed",
                errors=errors,
            )
