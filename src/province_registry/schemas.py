"""
province_registry.schemas

Pydantic models shared by the service and API layers.

Responsibilities:
- `ProvinceFilter`: Province-shaped query object for list reads (only page/rows are used).
- Request/response shapes for provinces and cities.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from province_registry.db.models import City, Province


class ProvinceFilter(BaseModel):
    id: int | None = None
    province_name: str | None = None
    province_code: str | None = None
    # Paging modifiers; listing is paginated only when both are set.
    page: int | None = None
    rows: int | None = Field(default=None, ge=1)


class ProvinceIn(BaseModel):
    id: int | None = None
    province_name: str | None = Field(default=None, max_length=64)
    province_code: str | None = Field(default=None, max_length=16)

    def to_model(self) -> Province:
        return Province(**self.model_dump(exclude_none=True))


class CityIn(BaseModel):
    city_name: str | None = Field(default=None, max_length=64)
    city_code: str | None = Field(default=None, max_length=16)

    def to_model(self) -> City:
        return City(**self.model_dump(exclude_none=True))


class ProvinceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    province_name: str | None
    province_code: str | None


class CityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    p_id: int | None
    city_name: str | None
    city_code: str | None


class ProvincePageOut(BaseModel):
    items: list[ProvinceOut]
    total: int
    page: int | None = None
    rows: int | None = None
    pages: int


# --- Module Notes -----------------------------------------------------------
# Only the API layer converts between these models and ORM rows; services accept
# ORM objects directly so inserts can write the generated id back onto them.
