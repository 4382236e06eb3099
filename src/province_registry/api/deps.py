"""
province_registry.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and services.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from province_registry.services.province_service import ProvinceService
from province_registry.settings import Settings, get_settings


def settings_dep(request: Request) -> Settings:
    # `create_app` stores the settings it was built with; fall back to the env-driven ones.
    return getattr(request.app.state, "settings", None) or get_settings()


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the lifespan handler of `province_registry.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped session. Commit/rollback is owned by the service layer.
    async with session_factory() as session:
        yield session


def province_service(session: AsyncSession = Depends(db_session)) -> ProvinceService:
    return ProvinceService(session=session)
