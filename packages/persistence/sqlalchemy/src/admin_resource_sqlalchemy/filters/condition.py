"""FilterCondition — compiled conjunctive filter, one predicate per property."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, true

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class FilterCondition(Mapping[str, "ColumnElement[bool]"]):
    """
    Read-only mapping ``property name -> predicate`` plus its SQL conjunction.

    An empty condition matches every row; :attr:`clause` is then ``true()``.
    Equality is structural (SQLAlchemy ``compare``), bound values included,
    so two translations of the same filter compare equal.
    """

    __slots__ = ("_predicates",)

    def __init__(self, predicates: Mapping[str, ColumnElement[bool]] | None = None) -> None:
        self._predicates: Mapping[str, ColumnElement[bool]] = MappingProxyType(
            dict(predicates or {})
        )

    @property
    def clause(self) -> ColumnElement[bool]:
        if not self._predicates:
            return true()
        return and_(*self._predicates.values())

    def __getitem__(self, name: str) -> ColumnElement[bool]:
        return self._predicates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCondition):
            return NotImplemented
        if list(self._predicates) != list(other._predicates):
            return False
        return all(
            self._predicates[name].compare(other._predicates[name])
            for name in self._predicates
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilterCondition({list(self._predicates)!r})"


def where_clause(condition: Any) -> ColumnElement[bool] | None:
    """Return the WHERE expression for *condition*, ``None`` when it is empty."""
    if condition is None:
        return None
    if isinstance(condition, FilterCondition):
        return condition.clause if condition else None
    return condition  # type: ignore[no-any-return]
