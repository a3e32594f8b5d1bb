"""IModelStore — storage collaborator consumed by resource adapters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IModelStore(Protocol):
    """
    Executes queries and writes for one model.

    ``condition`` is the backend-native value produced by the adapter's
    filter translator.  Rows travel as plain ``dict`` params.

    Failures are reported as
    :class:`~admin_resource_core.primitives.exceptions.StorageError` carrying a
    :class:`~admin_resource_core.primitives.exceptions.StorageErrorKind`;
    validation failures hold one message per offending field.  Any other
    exception is raised unchanged.
    """

    async def count(self, condition: Any) -> int: ...

    async def find_all(
        self,
        condition: Any,
        *,
        limit: int | None = None,
        offset: int | None = None,
        order_by: Sequence[tuple[str, str]] = (),
    ) -> list[dict[str, Any]]: ...

    async def find_by_pks(self, pks: Sequence[Any]) -> list[dict[str, Any]]: ...

    async def get(self, pk: Any) -> dict[str, Any] | None: ...

    async def insert(self, params: dict[str, Any]) -> dict[str, Any]: ...

    async def update(self, pk: Any, params: dict[str, Any]) -> dict[str, Any]: ...

    async def delete(self, pk: Any) -> int: ...
