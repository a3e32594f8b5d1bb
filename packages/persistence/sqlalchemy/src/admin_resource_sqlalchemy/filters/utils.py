"""Value coercion helpers for filter translation."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

LIKE_ESCAPE_CHAR = "/"

_BOOL_ADAPTER: TypeAdapter[bool] = TypeAdapter(bool)
_DATE_ADAPTER: TypeAdapter[date] = TypeAdapter(date)
_DATETIME_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)


def escape_like(value: str, escape_char: str = LIKE_ESCAPE_CHAR) -> str:
    """Escape LIKE metacharacters so *value* matches literally.

    The escape character itself is escaped first.
    """
    escaped = value.replace(escape_char, escape_char * 2)
    return escaped.replace("%", f"{escape_char}%").replace("_", f"{escape_char}_")


def coerce_number(value: Any) -> int | float | None:
    """Return *value* as ``int``/``float``, ``None`` when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def coerce_bool(value: Any) -> bool | None:
    try:
        return _BOOL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return None


def coerce_date_bound(value: Any, *, with_time: bool) -> date | datetime | None:
    """Parse a range bound; empty or unparsable bounds yield ``None``."""
    if value is None or value == "":
        return None
    if with_time:
        return _parse(_DATETIME_ADAPTER, value)
    parsed = _parse(_DATE_ADAPTER, value)
    if parsed is None:
        # full timestamps are truncated to their date
        moment = _parse(_DATETIME_ADAPTER, value)
        parsed = moment.date() if moment is not None else None
    return parsed


def _parse(adapter: TypeAdapter[Any], value: Any) -> Any:
    try:
        return adapter.validate_python(value)
    except PydanticValidationError:
        return None
