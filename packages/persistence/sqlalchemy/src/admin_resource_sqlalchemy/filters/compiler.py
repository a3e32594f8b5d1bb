"""
Translate an administration ``Filter`` into a SQLAlchemy condition.

Each clause is compiled according to its property's type:

- ``string``      -> ``lower(col) LIKE lower('%value%')`` with LIKE escaping
- ``number``      -> ``col = <number>``; non-numeric values drop the clause
- ``boolean``     -> ``col = <bool>``; unparsable values drop the clause
- ``date``/``datetime`` -> ``col >= from`` and/or ``col <= to``; a range with
  neither bound drops the clause
- anything else   -> ``col = value``

A dropped clause simply does not constrain the query.  Properties without
a column (virtual attributes) never contribute a predicate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func
from typing_extensions import assert_never

from admin_resource_core.domain.property import PropertyType

from .condition import FilterCondition
from .utils import (
    LIKE_ESCAPE_CHAR,
    coerce_bool,
    coerce_date_bound,
    coerce_number,
    escape_like,
)

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from admin_resource_core.domain.filter import FilterElement

logger = logging.getLogger(__name__)


def convert_filter(filter: Iterable[FilterElement] | None) -> FilterCondition:
    """
    Build a conjunctive :class:`FilterCondition` from filter elements.

    Args:
        filter: A :class:`~admin_resource_core.domain.filter.Filter` (or any
            iterable of ``FilterElement``).  ``None`` or empty matches all.

    Returns:
        Condition keyed by property name.  When a property appears more than
        once, the first clause wins.
    """
    if not filter:
        return FilterCondition()

    predicates: dict[str, ColumnElement[bool]] = {}
    for element in filter:
        name = element.property.name()
        if name in predicates:
            continue
        predicate = compile_element(element)
        if predicate is None:
            logger.debug("Filter on %r dropped (value=%r)", name, element.value)
            continue
        predicates[name] = predicate
    return FilterCondition(predicates)


def compile_element(element: FilterElement) -> ColumnElement[bool] | None:
    """Compile a single clause, ``None`` when it contributes no predicate."""
    prop = element.property
    column = prop.column
    if column is None:
        return None
    value = element.value
    kind = PropertyType(prop.type())

    if kind is PropertyType.STRING:
        return _contains_insensitive(column, value)
    if kind is PropertyType.NUMBER:
        number = coerce_number(value)
        return None if number is None else column == number
    if kind is PropertyType.BOOLEAN:
        flag = coerce_bool(value)
        return None if flag is None else column == flag
    if kind is PropertyType.DATE or kind is PropertyType.DATETIME:
        return _date_range(column, value, with_time=kind is PropertyType.DATETIME)
    if (
        kind is PropertyType.FLOAT
        or kind is PropertyType.REFERENCE
        or kind is PropertyType.OTHER
    ):
        return column == value  # type: ignore[no-any-return]
    assert_never(kind)


def _contains_insensitive(column: Any, value: Any) -> ColumnElement[bool]:
    pattern = f"%{escape_like(str(value))}%"
    return func.lower(column).like(func.lower(pattern), escape=LIKE_ESCAPE_CHAR)


def _date_range(
    column: Any, value: Any, *, with_time: bool
) -> ColumnElement[bool] | None:
    if not isinstance(value, Mapping):
        return None
    lower = coerce_date_bound(value.get("from"), with_time=with_time)
    upper = coerce_date_bound(value.get("to"), with_time=with_time)
    bounds: list[ColumnElement[bool]] = []
    if lower is not None:
        bounds.append(column >= lower)
    if upper is not None:
        bounds.append(column <= upper)
    if not bounds:
        return None
    if len(bounds) == 1:
        return bounds[0]
    return and_(*bounds)
