"""
province_registry.db.repositories.provinces

Repository for `Province` entities.

Responsibilities:
- Key-based CRUD (get, insert, selective update, delete).
- Predicate-based reads compiled from `db.criteria.Example`.
- Full and paged listing.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect

from province_registry.db.criteria import Example, compile_example
from province_registry.db.models import Province
from province_registry.db.pagination import Page, PageRequest

_ALL_PROVINCES_SQL = text(
    "SELECT id, province_name, province_code FROM provinces ORDER BY id"
)


def _selective_values(province: Province) -> dict[str, Any]:
    # Only non-null, non-key columns take part in a selective update.
    values: dict[str, Any] = {}
    for column in sa_inspect(Province).columns:
        if column.primary_key:
            continue
        value = getattr(province, column.key)
        if value is not None:
            values[column.key] = value
    return values


class ProvinceRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def select_by_example(self, example: Example) -> list[Province]:
        stmt = compile_example(Province, example)
        return list((await self._session.execute(stmt)).scalars().all())

    async def select_all(self) -> list[Province]:
        stmt = select(Province).order_by(Province.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def select_page(self, request: PageRequest) -> Page[Province]:
        total = (
            await self._session.execute(select(func.count()).select_from(Province))
        ).scalar_one()
        stmt = (
            select(Province)
            .order_by(Province.id)
            .offset(request.offset)
            .limit(request.limit)
        )
        items = list((await self._session.execute(stmt)).scalars().all())
        return Page(items=items, total=total, page=max(request.page, 1), size=request.size)

    async def get(self, province_id: int) -> Province | None:
        return await self._session.get(Province, province_id)

    async def insert(self, province: Province) -> Province:
        self._session.add(province)
        await self._session.flush()
        return province

    async def update_selective(self, province: Province) -> int:
        """
        Write the non-null fields of `province` onto the row with the same id.
        Returns the number of rows matched (0 when the id doesn't exist).
        """

        values = _selective_values(province)
        if not values:
            return 0
        stmt = update(Province).where(Province.id == province.id).values(**values)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, province_id: int) -> int:
        stmt = delete(Province).where(Province.id == province_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def list_all_provinces(self) -> list[dict[str, Any]]:
        # Hand-written SQL read; returns plain mappings rather than ORM rows.
        rows = (await self._session.execute(_ALL_PROVINCES_SQL)).mappings().all()
        return [dict(r) for r in rows]


# --- Module Notes -----------------------------------------------------------
# Paged and unpaged listings order by id so page boundaries are stable.
