"""FindOptions — pagination and sort options for ``BaseResource.find``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Direction = Literal["asc", "desc"]


@dataclass(frozen=True)
class SortOptions:
    sort_by: str | None = None
    direction: Direction = "asc"


@dataclass(frozen=True)
class FindOptions:
    """
    Immutable paging/sorting parameters.

    Build directly, or from list-page query params with :meth:`from_params`::

        FindOptions.from_params({"page": "2", "perPage": "10", "sortBy": "email"})
    """

    limit: int = 20
    offset: int = 0
    sort: SortOptions = field(default_factory=SortOptions)

    @classmethod
    def from_params(
        cls,
        query_params: dict[str, Any],
        *,
        default_limit: int = 20,
        max_limit: int = 500,
        default_direction: Direction = "asc",
    ) -> FindOptions:
        """Parse ``perPage``/``limit``, ``page``/``offset``, ``sortBy``, ``direction``.

        Unparsable numbers fall back to defaults; the limit is clamped to
        ``[1, max_limit]`` and the offset to ``>= 0``.
        """
        raw_limit = query_params.get("perPage", query_params.get("limit"))
        limit = _int_or(raw_limit, default_limit)
        limit = min(max_limit, max(1, limit))

        if "offset" in query_params:
            offset = max(0, _int_or(query_params.get("offset"), 0))
        else:
            page = max(1, _int_or(query_params.get("page"), 1))
            offset = (page - 1) * limit

        sort_by = query_params.get("sortBy") or None
        raw_direction = str(query_params.get("direction") or default_direction)
        direction: Direction = "desc" if raw_direction.lower() == "desc" else "asc"
        return cls(
            limit=limit,
            offset=offset,
            sort=SortOptions(sort_by=sort_by, direction=direction),
        )


def _int_or(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
