"""
Pydantic params schemas generated from SQLAlchemy models.

Form values arrive as strings; the schema coerces them to the column's
Python type and reports per-field failures before anything reaches the
session.  Two flavours exist per model:

- ``partial=False`` (create): required columns must be present;
- ``partial=True`` (update): every field is optional.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, create_model
from sqlalchemy import JSON, Enum, String
from sqlalchemy import inspect as sa_inspect

from admin_resource_core.primitives.exceptions import PropertyError

from .property import Property

if TYPE_CHECKING:
    from pydantic import ValidationError as PydanticValidationError
    from sqlalchemy.types import TypeEngine

SCHEMA_CONFIG = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


@lru_cache(maxsize=None)
def build_params_schema(model: type[Any], *, partial: bool = False) -> type[BaseModel]:
    """Return (and cache) the params schema of *model*'s editable columns."""
    fields: dict[str, Any] = {}
    for column_property in sa_inspect(model).column_attrs:
        prop = Property.from_column(column_property)
        if not prop.is_editable():
            continue
        fields[prop.name()] = _field_definition(prop, partial=partial)
    suffix = "UpdateParams" if partial else "CreateParams"
    return create_model(
        f"{model.__name__}{suffix}",
        __config__=SCHEMA_CONFIG,
        **fields,
    )


def _field_definition(prop: Property, *, partial: bool) -> tuple[Any, Any]:
    sql_type = prop.sql_type
    annotation = python_type_for(sql_type) if sql_type is not None else Any
    constraints: dict[str, Any] = {}
    if isinstance(sql_type, String) and not isinstance(sql_type, Enum) and sql_type.length:
        constraints["max_length"] = sql_type.length

    column = prop.table_column
    if column is None or column.nullable:
        annotation = Optional[annotation]

    if prop.is_required() and not partial:
        return annotation, Field(..., **constraints)
    return annotation, Field(default=None, **constraints)


def python_type_for(sql_type: TypeEngine[Any]) -> Any:
    if isinstance(sql_type, Enum) and sql_type.enums:
        if sql_type.enum_class is not None:
            return sql_type.enum_class
        return Literal[tuple(sql_type.enums)]
    if isinstance(sql_type, JSON):
        return Any
    try:
        return sql_type.python_type
    except NotImplementedError:
        return Any


def errors_from_pydantic(exc: PydanticValidationError) -> dict[str, PropertyError]:
    """One :class:`PropertyError` per field: the first reported message wins."""
    errors: dict[str, PropertyError] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field = str(loc[0])
        if field in errors:
            continue
        errors[field] = PropertyError(
            message=error.get("msg", "validation error"),
            kind=error.get("type"),
        )
    return errors
