"""
tests.conftest

Shared fixtures: a throwaway SQLite database per test, session helpers and seeding.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from province_registry.db.init_db import drop_db, init_db
from province_registry.db.models import Province
from province_registry.db.session import create_engine, create_sessionmaker, session_scope
from province_registry.settings import Settings

SeedFn = Callable[[list[tuple[str | None, str | None]]], Awaitable[list[int]]]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await drop_db(engine)
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_scope(session_factory) as s:
        yield s


@pytest.fixture
def seed_provinces(session_factory: async_sessionmaker[AsyncSession]) -> SeedFn:
    """Insert (name, code) rows in order and return their ids."""

    async def _seed(rows: list[tuple[str | None, str | None]]) -> list[int]:
        async with session_factory() as s:
            provinces = [Province(province_name=n, province_code=c) for n, c in rows]
            s.add_all(provinces)
            await s.commit()
            return [p.id for p in provinces]

    return _seed


@pytest.fixture
def count_rows(session_factory: async_sessionmaker[AsyncSession]) -> Callable[[type], Awaitable[int]]:
    """Count rows of a model through a fresh session (sees committed data only)."""

    async def _count(model: type) -> int:
        async with session_factory() as s:
            return (await s.execute(select(func.count()).select_from(model))).scalar_one()

    return _count
