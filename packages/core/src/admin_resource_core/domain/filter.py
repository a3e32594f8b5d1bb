"""
Filter — per-property search constraints built from request params.

Flat query params are folded into one element per property.  Range bounds
use the ``~~`` separator, the way the administration frontend submits them::

    Filter({"email": "doe", "created_at~~from": "2020-01-01"}, resource)

yields two elements: ``email -> "doe"`` and
``created_at -> {"from": "2020-01-01"}``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..ports.resource import BaseResource
    from .property import BaseProperty

PARAM_SEPARATOR = "~~"


@dataclass(frozen=True)
class FilterElement:
    """One (property, raw value) clause of a filter."""

    path: str
    property: BaseProperty
    value: Any


class Filter:
    """Ordered, immutable sequence of :class:`FilterElement`."""

    def __init__(
        self,
        filters: Mapping[str, Any] | None,
        resource: BaseResource,
    ) -> None:
        self.resource = resource
        elements: list[FilterElement] = []
        for path, value in normalize_filter_keys(filters or {}).items():
            prop = resource.property(path)
            if prop is None:
                continue
            elements.append(FilterElement(path=path, property=prop, value=value))
        self._elements: tuple[FilterElement, ...] = tuple(elements)

    @property
    def elements(self) -> tuple[FilterElement, ...]:
        return self._elements

    def get(self, path: str) -> FilterElement | None:
        for element in self._elements:
            if element.path == path:
                return element
        return None

    def __iter__(self) -> Iterator[FilterElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        paths = ", ".join(e.path for e in self._elements)
        return f"<Filter {self.resource.id()} [{paths}]>"


def normalize_filter_keys(filters: Mapping[str, Any]) -> dict[str, Any]:
    """Fold ``path~~bound`` keys into ``{path: {bound: value}}``."""
    out: dict[str, Any] = {}
    for key, value in filters.items():
        if PARAM_SEPARATOR not in key:
            if isinstance(value, Mapping) and isinstance(out.get(key), dict):
                out[key].update(value)
            else:
                out[key] = dict(value) if isinstance(value, Mapping) else value
            continue
        path, bound = key.split(PARAM_SEPARATOR, 1)
        existing = out.get(path)
        if not isinstance(existing, dict):
            existing = {}
            out[path] = existing
        existing[bound] = value
    return out
