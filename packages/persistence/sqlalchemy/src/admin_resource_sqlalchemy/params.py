"""Sanitize record params submitted by the administration form."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from admin_resource_core.domain.property import NUMERIC_LIKE_TYPES, PropertyType

if TYPE_CHECKING:
    from admin_resource_core.domain.property import BaseProperty

logger = logging.getLogger(__name__)


def parse_params(
    params: Mapping[str, Any],
    properties: Iterable[BaseProperty],
) -> dict[str, Any]:
    """
    Return a sanitized copy of *params* ready for persistence.

    - ``number``, ``float`` and ``reference`` properties submitted as ``""``
      are removed, so the store sees "not provided" instead of a value it
      would fail to coerce.
    - Values for non-editable properties (primary keys, generated or
      virtual attributes) are removed whatever the client sent.

    Keys that are not properties of the resource are passed through.
    """
    parsed = dict(params)
    for prop in properties:
        name = prop.name()
        if name not in parsed:
            continue
        if PropertyType(prop.type()) in NUMERIC_LIKE_TYPES and parsed[name] == "":
            del parsed[name]
            continue
        if not prop.is_editable():
            logger.debug("Dropping value for non-editable property %r", name)
            del parsed[name]
    return parsed
