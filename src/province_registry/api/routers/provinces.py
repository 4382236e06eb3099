"""
province_registry.api.routers.provinces

HTTP endpoints over `ProvinceService`.

Responsibilities:
- Conditional search, listing (optionally paged), lookup, delete and upsert.
- Composite save of a province with its cities.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, Field
from starlette.status import HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from province_registry.api.deps import province_service
from province_registry.schemas import (
    CityIn,
    CityOut,
    ProvinceFilter,
    ProvinceIn,
    ProvinceOut,
    ProvincePageOut,
)
from province_registry.services.province_service import ProvinceService

router = APIRouter(prefix="/v1/provinces", tags=["provinces"])


class ProvinceWithCitiesRequest(BaseModel):
    province: ProvinceIn
    cities: list[CityIn] = Field(default_factory=list)
    # Discard every write after running the full sequence (dry run).
    rollback_only: bool = False


class ProvinceWithCitiesResponse(BaseModel):
    committed: bool
    province_id: int | None = None
    cities: list[CityOut] = Field(default_factory=list)


@router.get("/conditional", response_model=list[ProvinceOut])
async def get_by_conditional(
    svc: ProvinceService = Depends(province_service),
) -> list[ProvinceOut]:
    provinces = await svc.get_by_conditional()
    return [ProvinceOut.model_validate(p) for p in provinces]


@router.get("", response_model=ProvincePageOut)
async def get_all(
    page: int | None = Query(default=None),
    rows: int | None = Query(default=None, ge=1),
    svc: ProvinceService = Depends(province_service),
) -> ProvincePageOut:
    result = await svc.get_all(ProvinceFilter(page=page, rows=rows))
    return ProvincePageOut(
        items=[ProvinceOut.model_validate(p) for p in result],
        total=result.total,
        page=result.page,
        rows=result.size,
        pages=result.pages,
    )


@router.get("/{province_id}", response_model=ProvinceOut)
async def get_by_id(
    province_id: int,
    svc: ProvinceService = Depends(province_service),
) -> ProvinceOut:
    province = await svc.get_by_id(province_id)
    if province is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Province not found")
    return ProvinceOut.model_validate(province)


@router.delete("/{province_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_by_id(
    province_id: int,
    svc: ProvinceService = Depends(province_service),
) -> Response:
    await svc.delete_by_id(province_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.post("", response_model=ProvinceOut)
async def save(
    body: ProvinceIn,
    svc: ProvinceService = Depends(province_service),
) -> ProvinceOut:
    province = await svc.save(body.to_model())
    # Read back: a selective update only carried the fields that were sent.
    stored = await svc.get_by_id(province.id)
    if stored is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Province not found")
    return ProvinceOut.model_validate(stored)


@router.post("/with-cities", response_model=ProvinceWithCitiesResponse)
async def save_province_and_cities(
    body: ProvinceWithCitiesRequest,
    svc: ProvinceService = Depends(province_service),
) -> ProvinceWithCitiesResponse:
    province = body.province.model_copy(update={"id": None}).to_model()
    cities = [c.to_model() for c in body.cities]
    committed = await svc.save_province_and_cities(
        province, cities, rollback_only=body.rollback_only
    )
    if not committed:
        return ProvinceWithCitiesResponse(committed=False)
    return ProvinceWithCitiesResponse(
        committed=True,
        province_id=province.id,
        cities=[CityOut.model_validate(c) for c in cities],
    )


# --- Module Notes -----------------------------------------------------------
# `/conditional` is declared before `/{province_id}` so it isn't parsed as an id.
