"""
province_registry.db.models

Persistence schema for the administrative hierarchy.

Responsibilities:
- Province: top-level division, identified by name and code.
- City: child division pointing at its owning province via `p_id`.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from province_registry.db.base import Base


class Province(Base):
    __tablename__ = "provinces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    province_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    province_code: Mapped[str | None] = mapped_column(String(16), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"Province(id={self.id!r}, code={self.province_code!r}, name={self.province_name!r})"


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Set by the service to the owning province id right before insert.
    p_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("provinces.id"), nullable=True, index=True
    )
    city_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    city_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    def __repr__(self) -> str:
        return f"City(id={self.id!r}, p_id={self.p_id!r}, name={self.city_name!r})"


# --- Module Notes -----------------------------------------------------------
# No ORM relationship between the two tables: deletes are key-based statements and
# must not cascade to cities.
