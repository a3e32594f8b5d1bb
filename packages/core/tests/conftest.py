"""In-memory resource used to exercise the core contract without a database."""

from __future__ import annotations

from typing import Any

import pytest

from admin_resource_core import (
    BaseProperty,
    BaseRecord,
    BaseResource,
    Filter,
    FindOptions,
    PropertyType,
)


class StubProperty(BaseProperty):
    def __init__(
        self,
        name: str,
        type_: PropertyType = PropertyType.STRING,
        *,
        is_id: bool = False,
        reference: str | None = None,
    ) -> None:
        self._name = name
        self._type = type_
        self._is_id = is_id
        self._reference = reference

    def name(self) -> str:
        return self._name

    def type(self) -> PropertyType:
        return self._type

    def is_editable(self) -> bool:
        return not self._is_id

    @property
    def column(self) -> Any | None:
        return self._name

    def is_id(self) -> bool:
        return self._is_id

    def reference(self) -> str | None:
        return self._reference


class StubResource(BaseResource):
    def __init__(self, resource_id: str, properties: list[BaseProperty]) -> None:
        self._id = resource_id
        self._properties = properties
        self.rows: dict[Any, dict[str, Any]] = {}

    @classmethod
    def is_adapter_for(cls, raw_resource: Any) -> bool:
        return isinstance(raw_resource, list)

    def id(self) -> str:
        return self._id

    def database_name(self) -> str | None:
        return "memory"

    def database_type(self) -> str:
        return "memory"

    def properties(self) -> list[BaseProperty]:
        return list(self._properties)

    async def count(self, filter: Filter | None = None) -> int:
        return len(self.rows)

    async def find(
        self, filter: Filter | None, options: FindOptions | None = None
    ) -> list[BaseRecord]:
        options = options or FindOptions()
        rows = list(self.rows.values())[options.offset : options.offset + options.limit]
        return [BaseRecord(row, self) for row in rows]

    async def find_one(self, record_id: Any) -> BaseRecord | None:
        row = self.rows.get(record_id)
        return BaseRecord(row, self) if row is not None else None

    async def find_many(self, record_ids: list[Any]) -> list[BaseRecord]:
        return [BaseRecord(self.rows[i], self) for i in record_ids if i in self.rows]

    async def create(self, params: dict[str, Any]) -> dict[str, Any]:
        row = {"id": len(self.rows) + 1, **params}
        self.rows[row["id"]] = row
        return row

    async def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        self.rows[record_id].update(params)
        return self.rows[record_id]

    async def delete(self, record_id: Any) -> int:
        return 1 if self.rows.pop(record_id, None) is not None else 0

    async def populate(
        self, records: list[BaseRecord], property: BaseProperty
    ) -> dict[Any, BaseRecord]:
        resolved: dict[Any, BaseRecord] = {}
        for record in records:
            row = self.rows.get(record.param(property.name()))
            if row is not None:
                resolved[record.id()] = BaseRecord(row, self)
        return resolved


@pytest.fixture()
def authors() -> StubResource:
    return StubResource(
        "authors",
        [
            StubProperty("id", PropertyType.NUMBER, is_id=True),
            StubProperty("password", PropertyType.STRING),
            StubProperty("name", PropertyType.STRING),
        ],
    )


@pytest.fixture()
def articles() -> StubResource:
    return StubResource(
        "articles",
        [
            StubProperty("id", PropertyType.NUMBER, is_id=True),
            StubProperty("title", PropertyType.STRING),
            StubProperty("published_at", PropertyType.DATETIME),
            StubProperty("author_id", PropertyType.REFERENCE, reference="authors"),
        ],
    )


@pytest.fixture()
def counters() -> StubResource:
    """Resource without any string property."""
    return StubResource(
        "counters",
        [
            StubProperty("id", PropertyType.NUMBER, is_id=True),
            StubProperty("value", PropertyType.NUMBER),
        ],
    )
