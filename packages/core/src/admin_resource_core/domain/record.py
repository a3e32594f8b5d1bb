"""BaseRecord — one row of a resource as seen by the administration layer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..ports.resource import BaseResource


class BaseRecord:
    """
    Immutable view of a record's params bound to the resource it came from.

    Referenced records resolved by :meth:`BaseResource.populate` are attached
    with :meth:`with_populated`, which returns a new record::

        mapping = await users.populate(posts, posts_resource.property("user_id"))
        posts = attach_populated(posts, "user_id", mapping)
    """

    __slots__ = ("_params", "_populated", "resource")

    def __init__(
        self,
        params: Mapping[str, Any],
        resource: BaseResource,
        populated: Mapping[str, BaseRecord] | None = None,
    ) -> None:
        self._params: Mapping[str, Any] = MappingProxyType(dict(params))
        self._populated: Mapping[str, BaseRecord] = MappingProxyType(
            dict(populated or {})
        )
        self.resource = resource

    @property
    def params(self) -> Mapping[str, Any]:
        return self._params

    @property
    def populated(self) -> Mapping[str, BaseRecord]:
        return self._populated

    def param(self, path: str) -> Any:
        return self._params.get(path)

    def id(self) -> Any:
        """Primary key value, ``None`` when the resource has no id property."""
        id_property = self.resource.id_property()
        if id_property is None:
            return None
        return self.param(id_property.name())

    def title(self) -> str:
        title_property = self.resource.title_property()
        if title_property is None:
            return str(self.id())
        value = self.param(title_property.name())
        return str(value) if value is not None else str(self.id())

    def with_populated(self, property_name: str, record: BaseRecord) -> BaseRecord:
        populated = dict(self._populated)
        populated[property_name] = record
        return BaseRecord(self._params, self.resource, populated)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id(),
            "title": self.title(),
            "params": dict(self._params),
            "populated": {
                name: record.to_dict() for name, record in self._populated.items()
            },
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseRecord):
            return NotImplemented
        return (
            self.resource is other.resource
            and dict(self._params) == dict(other._params)
            and dict(self._populated) == dict(other._populated)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<BaseRecord {self.resource.id()}:{self.id()!r}>"


def attach_populated(
    records: Iterable[BaseRecord],
    property_name: str,
    mapping: Mapping[Any, BaseRecord],
) -> list[BaseRecord]:
    """Return copies of *records* with their resolved references attached.

    *mapping* is the result of ``populate``: record id -> referenced record.
    Records without an entry are returned unchanged.
    """
    out: list[BaseRecord] = []
    for record in records:
        referenced = mapping.get(record.id())
        out.append(
            record.with_populated(property_name, referenced)
            if referenced is not None
            else record
        )
    return out
