"""
Property — resource property backed by SQLAlchemy column metadata.

Two sources produce properties:

- mapped columns (``ColumnProperty``), typed from the column's SQL type;
- plain Python ``property`` objects defined on the model ("virtual"
  attributes), which exist only on loaded instances and therefore cannot be
  filtered, sorted or written.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    ARRAY,
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Float,
    Integer,
    Numeric,
    String,
    TypeDecorator,
    Uuid,
)
from sqlalchemy import inspect as sa_inspect

from admin_resource_core.domain.property import BaseProperty, PropertyType

if TYPE_CHECKING:
    from sqlalchemy.orm import ColumnProperty
    from sqlalchemy.types import TypeEngine

# Order matters: first match wins.
TYPES_MAPPING: tuple[tuple[type[Any], PropertyType], ...] = (
    (Boolean, PropertyType.BOOLEAN),
    (Integer, PropertyType.NUMBER),
    (Float, PropertyType.FLOAT),
    (Numeric, PropertyType.FLOAT),
    (DateTime, PropertyType.DATETIME),
    (Date, PropertyType.DATE),
    (Enum, PropertyType.STRING),
    (String, PropertyType.STRING),
    (Uuid, PropertyType.STRING),
)


def unwrap_type(type_: TypeEngine[Any]) -> TypeEngine[Any]:
    """Return the underlying type of (nested) ``TypeDecorator`` instances."""
    while isinstance(type_, TypeDecorator):
        type_ = type_.impl
    return type_


class Property(BaseProperty):
    """
    :class:`BaseProperty` implementation for SQLAlchemy models.

    Build with :meth:`from_column` for mapped columns or :meth:`virtual` for
    Python-only attributes.
    """

    def __init__(
        self,
        name: str,
        *,
        column_property: ColumnProperty[Any] | None = None,
    ) -> None:
        self._name = name
        self._column_property = column_property
        expression = column_property.columns[0] if column_property is not None else None
        self._expression: Any = expression
        self._table_column: Column[Any] | None = (
            expression if isinstance(expression, Column) else None
        )

    @classmethod
    def from_column(cls, column_property: ColumnProperty[Any]) -> Property:
        return cls(column_property.key, column_property=column_property)

    @classmethod
    def virtual(cls, name: str) -> Property:
        return cls(name)

    # -- identity -------------------------------------------------------------

    def name(self) -> str:
        return self._name

    @property
    def column(self) -> Any | None:
        if self._column_property is None:
            return None
        return self._column_property.class_attribute

    @property
    def table_column(self) -> Column[Any] | None:
        return self._table_column

    @property
    def sql_type(self) -> TypeEngine[Any] | None:
        if self._expression is None:
            return None
        return unwrap_type(self._expression.type)

    def is_virtual(self) -> bool:
        return self._column_property is None

    # -- classification -------------------------------------------------------

    def type(self) -> PropertyType:
        if self.reference() is not None:
            return PropertyType.REFERENCE
        sql_type = self.sql_type
        if sql_type is None:
            return PropertyType.OTHER
        for type_cls, property_type in TYPES_MAPPING:
            if isinstance(sql_type, type_cls):
                return property_type
        return PropertyType.OTHER

    def is_id(self) -> bool:
        return self._table_column is not None and self._table_column.primary_key

    def is_array(self) -> bool:
        return isinstance(self.sql_type, ARRAY)

    def is_editable(self) -> bool:
        column = self._table_column
        if column is None:
            # virtual attributes and column_property() expressions
            return False
        if column.primary_key or column.autoincrement is True:
            return False
        if column.computed is not None:
            return False
        return column.onupdate is None and column.server_onupdate is None

    def is_sortable(self) -> bool:
        if self.column is None or self.is_array():
            return False
        return not isinstance(self.sql_type, JSON)

    def is_required(self) -> bool:
        column = self._table_column
        if column is None or column.primary_key:
            return False
        return (
            not column.nullable
            and column.default is None
            and column.server_default is None
        )

    def reference(self) -> str | None:
        if self._table_column is None or self.is_array():
            return None
        for foreign_key in self._table_column.foreign_keys:
            # "table.column" or "schema.table.column"
            return foreign_key.target_fullname.split(".")[-2]
        return None

    def available_values(self) -> list[str] | None:
        sql_type = self.sql_type
        if isinstance(sql_type, Enum) and sql_type.enums:
            return list(sql_type.enums)
        return None


def virtual_attribute_names(model: type[Any]) -> list[str]:
    """Public plain-``property`` attributes of *model* that are not mapped."""
    mapper = sa_inspect(model)
    names: list[str] = []
    for name in dir(model):
        if name.startswith("_") or name in mapper.attrs:
            continue
        if isinstance(inspect.getattr_static(model, name), property):
            names.append(name)
    return names
