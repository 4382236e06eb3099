"""
province_registry.services.province_service

Province/city data operations.

Responsibilities:
- Conditional search with a fixed AND/OR predicate and ordering.
- Full or paged listing, lookup and delete by id.
- Upsert (insert, or selective update when the id is set).
- Atomic save of a province together with its cities.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from province_registry.db.criteria import Criteria, Example, OrderBy
from province_registry.db.models import City, Province
from province_registry.db.pagination import Page, PageRequest
from province_registry.db.repositories.cities import CityRepo
from province_registry.db.repositories.provinces import ProvinceRepo
from province_registry.observability.logging import get_logger
from province_registry.schemas import ProvinceFilter
from province_registry.services.transaction import transactional

log = get_logger(__name__)


def conditional_example() -> Example:
    """
    Provinces whose name contains "江" and whose code contains "X", or named
    "山东", or coded "XJ"/"SC". Sorted by code descending, then id ascending.
    """

    return (
        Example()
        .where(Criteria().like("province_name", "%江%").like("province_code", "%X%"))
        .or_(Criteria().equal_to("province_name", "山东"))
        .or_(Criteria().in_("province_code", ["XJ", "SC"]))
        .order_by(OrderBy.desc("province_code"), OrderBy.asc("id"))
    )


class ProvinceService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._provinces = ProvinceRepo(session)
        self._cities = CityRepo(session)

    async def get_by_conditional(self) -> list[Province]:
        return await self._provinces.select_by_example(conditional_example())

    async def get_all(self, province: ProvinceFilter) -> Page[Province]:
        if province.page is not None and province.rows is not None:
            return await self._provinces.select_page(
                PageRequest(page=province.page, size=province.rows)
            )
        items = await self._provinces.select_all()
        return Page(items=items, total=len(items))

    async def get_by_id(self, province_id: int) -> Province | None:
        return await self._provinces.get(province_id)

    async def delete_by_id(self, province_id: int) -> None:
        async with transactional(self._session, name="province.delete"):
            deleted = await self._provinces.delete(province_id)
        log.info("province.deleted", province_id=province_id, rows=deleted)

    async def save(self, province: Province) -> Province:
        async with transactional(self._session, name="province.save"):
            if province.id is not None:
                matched = await self._provinces.update_selective(province)
                log.info("province.updated", province_id=province.id, rows=matched)
            else:
                await self._provinces.insert(province)
                log.info("province.inserted", province_id=province.id)
        return province

    async def save_province_and_cities(
        self,
        province: Province,
        cities: Sequence[City],
        *,
        rollback_only: bool = False,
    ) -> bool:
        """
        Insert `province`, then each city (in order) pointing at the new province id,
        as one unit of work.

        Any exception rolls back every insert and propagates. `rollback_only=True`,
        or `current_transaction_status().set_rollback_only()` from code running inside
        the block, also rolls everything back but returns normally.

        Returns True when the writes were committed.
        """

        async with transactional(self._session, name="province.save_with_cities") as tx:
            existing = await self._provinces.list_all_provinces()
            log.debug("province.snapshot", count=len(existing))

            await self._provinces.insert(province)
            for city in cities:
                city.p_id = province.id
                await self._cities.insert(city)

            if rollback_only:
                tx.set_rollback_only()

        if tx.rollback_only:
            log.info("province_cities.discarded", cities=len(cities))
            return False
        log.info("province_cities.saved", province_id=province.id, cities=len(cities))
        return True


# --- Module Notes -----------------------------------------------------------
# Reads run without an explicit boundary; the request-scoped session closes
# (and releases) their implicit transaction.
