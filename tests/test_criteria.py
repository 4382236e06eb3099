"""
tests.test_criteria

Predicate-tree compilation: grouping, precedence, ordering and field validation.
"""

from __future__ import annotations

import pytest
from sqlalchemy.sql import operators

from province_registry.db.criteria import (
    Criteria,
    Example,
    OrderBy,
    UnknownFieldError,
    compile_example,
    where_clause,
)
from province_registry.db.models import Province
from province_registry.db.repositories.provinces import ProvinceRepo
from province_registry.services.province_service import conditional_example


def test_groups_are_or_terms_of_and_groups() -> None:
    clause = where_clause(Province, conditional_example())

    assert clause.operator is operators.or_
    assert len(clause.clauses) == 3
    sql = str(clause)
    assert sql.count(" AND ") == 1
    assert sql.count(" OR ") == 2
    # The AND group is the first OR term, not wrapped around the alternatives.
    assert sql.index(" AND ") < sql.index(" OR ")


def test_empty_groups_are_skipped() -> None:
    stmt = compile_example(Province, Example().where(Criteria()).or_(Criteria()))
    assert stmt.whereclause is None


def test_single_group_has_no_or() -> None:
    clause = where_clause(
        Province, Example().where(Criteria().equal_to("province_code", "SD").like("province_name", "%山%"))
    )
    assert clause.operator is operators.and_


def test_ordering_is_rendered_in_declared_order() -> None:
    stmt = compile_example(
        Province, Example().order_by(OrderBy.desc("province_code"), OrderBy.asc("id"))
    )
    sql = str(stmt)
    assert "ORDER BY provinces.province_code DESC, provinces.id ASC" in sql


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(UnknownFieldError):
        compile_example(Province, Example().where(Criteria().equal_to("nope", 1)))
    with pytest.raises(UnknownFieldError):
        compile_example(Province, Example().order_by(OrderBy.asc("__tablename__")))


@pytest.mark.asyncio
async def test_or_alternatives_match_independently(session, seed_provinces) -> None:
    await seed_provinces([("甲", "A"), ("乙", "B"), ("丙", "C")])
    example = (
        Example()
        .where(Criteria().equal_to("province_code", "A").equal_to("province_name", "乙"))
        .or_(Criteria().in_("province_code", ["B", "C"]))
        .order_by(OrderBy.asc("province_code"))
    )

    rows = await ProvinceRepo(session).select_by_example(example)

    # The AND group matches nothing; the IN alternative still applies on its own.
    assert [p.province_code for p in rows] == ["B", "C"]
