"""
province_registry.db.repositories.cities

Repository for `City` entities.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from province_registry.db.models import City


class CityRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, city: City) -> City:
        self._session.add(city)
        await self._session.flush()
        return city

    async def list_for_province(self, province_id: int) -> list[City]:
        stmt = select(City).where(City.p_id == province_id).order_by(City.id)
        return list((await self._session.execute(stmt)).scalars().all())
