"""
province_registry.db.criteria

Explicit predicate trees for "query by example" reads.

Responsibilities:
- Model predicates (LIKE / equality / IN) as plain data.
- Group predicates into AND-groups (`Criteria`) and OR them together (`Example`).
- Compile an `Example` into a SQLAlchemy `Select` against a mapped model.

Shape of the generated filter::

    WHERE (p1 AND p2 ...) OR (p3 ...) OR (p4 ...)
    ORDER BY f1 DESC, f2 ASC

Each `Criteria` is exactly one term of the top-level OR; predicates are never
AND-ed across groups.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.elements import ColumnElement


class UnknownFieldError(ValueError):
    """Raised when a predicate or ordering names an attribute the model doesn't map."""


@dataclass(frozen=True, slots=True)
class Like:
    field: str
    pattern: str


@dataclass(frozen=True, slots=True)
class EqualTo:
    field: str
    value: Any


@dataclass(frozen=True, slots=True)
class In:
    field: str
    values: tuple[Any, ...]


Predicate = Like | EqualTo | In


@dataclass(frozen=True, slots=True)
class OrderBy:
    field: str
    descending: bool = False

    @classmethod
    def asc(cls, field: str) -> OrderBy:
        return cls(field=field, descending=False)

    @classmethod
    def desc(cls, field: str) -> OrderBy:
        return cls(field=field, descending=True)


@dataclass(slots=True)
class Criteria:
    """
    AND-group of predicates. Builder methods return `self` so groups read fluently::

        Criteria().like("province_name", "%江%").like("province_code", "%X%")
    """

    predicates: list[Predicate] = field(default_factory=list)

    def like(self, field: str, pattern: str) -> Criteria:
        self.predicates.append(Like(field, pattern))
        return self

    def equal_to(self, field: str, value: Any) -> Criteria:
        self.predicates.append(EqualTo(field, value))
        return self

    def in_(self, field: str, values: Iterable[Any]) -> Criteria:
        self.predicates.append(In(field, tuple(values)))
        return self

    def __bool__(self) -> bool:
        return bool(self.predicates)


@dataclass(slots=True)
class Example:
    """
    OR-alternatives plus ordering. `where` and `or_` both append a group; the
    distinction only documents intent at the call site.
    """

    alternatives: list[Criteria] = field(default_factory=list)
    ordering: list[OrderBy] = field(default_factory=list)

    def where(self, criteria: Criteria) -> Example:
        self.alternatives.append(criteria)
        return self

    def or_(self, criteria: Criteria) -> Example:
        self.alternatives.append(criteria)
        return self

    def order_by(self, *terms: OrderBy) -> Example:
        self.ordering.extend(terms)
        return self


def _column(model: type, name: str) -> InstrumentedAttribute:
    attr = getattr(model, name, None)
    if not isinstance(attr, InstrumentedAttribute):
        raise UnknownFieldError(f"{model.__name__} has no mapped attribute {name!r}")
    return attr


def _predicate_clause(model: type, predicate: Predicate) -> ColumnElement[bool]:
    column = _column(model, predicate.field)
    if isinstance(predicate, Like):
        # Case-sensitivity follows the column collation (ASCII-insensitive on SQLite and MySQL).
        return column.like(predicate.pattern)
    if isinstance(predicate, EqualTo):
        return column == predicate.value
    if isinstance(predicate, In):
        return column.in_(predicate.values)
    raise TypeError(f"unsupported predicate: {predicate!r}")


def where_clause(model: type, example: Example) -> ColumnElement[bool] | None:
    groups = [
        and_(*(_predicate_clause(model, p) for p in criteria.predicates))
        for criteria in example.alternatives
        if criteria
    ]
    if not groups:
        return None
    if len(groups) == 1:
        return groups[0]
    return or_(*groups)


def compile_example(model: type, example: Example) -> Select[Any]:
    stmt = select(model)
    clause = where_clause(model, example)
    if clause is not None:
        stmt = stmt.where(clause)
    for term in example.ordering:
        column = _column(model, term.field)
        stmt = stmt.order_by(column.desc() if term.descending else column.asc())
    return stmt


# --- Module Notes -----------------------------------------------------------
# LIKE patterns are passed through untouched; callers add the `%` wildcards.
