"""Filter translation: administration filters -> SQLAlchemy conditions."""

from __future__ import annotations

from .compiler import compile_element, convert_filter
from .condition import FilterCondition, where_clause
from .utils import coerce_bool, coerce_date_bound, coerce_number, escape_like

__all__ = [
    "FilterCondition",
    "coerce_bool",
    "coerce_date_bound",
    "coerce_number",
    "compile_element",
    "convert_filter",
    "escape_like",
    "where_clause",
]
