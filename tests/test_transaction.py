"""
tests.test_transaction

Commit / rollback / rollback-only behaviour of `transactional`.
"""

from __future__ import annotations

import pytest

from province_registry.db.models import Province
from province_registry.services.transaction import (
    NoTransactionError,
    current_transaction_status,
    transactional,
)


@pytest.mark.asyncio
async def test_commits_on_normal_exit(session, count_rows) -> None:
    async with transactional(session) as tx:
        session.add(Province(province_name="山东", province_code="SD"))
        await session.flush()

    assert tx.completed
    assert not tx.rollback_only
    assert await count_rows(Province) == 1


@pytest.mark.asyncio
async def test_rolls_back_and_reraises_on_error(session, count_rows) -> None:
    with pytest.raises(LookupError):
        async with transactional(session):
            session.add(Province(province_name="山东", province_code="SD"))
            await session.flush()
            raise LookupError("boom")

    assert await count_rows(Province) == 0


@pytest.mark.asyncio
async def test_rollback_only_discards_writes_without_raising(session, count_rows) -> None:
    async with transactional(session) as tx:
        session.add(Province(province_name="山东", province_code="SD"))
        await session.flush()
        current_transaction_status().set_rollback_only()

    assert tx.rollback_only
    assert await count_rows(Province) == 0


@pytest.mark.asyncio
async def test_status_is_scoped_to_the_block(session) -> None:
    with pytest.raises(NoTransactionError):
        current_transaction_status()

    async with transactional(session, name="outer") as tx:
        assert current_transaction_status() is tx
        assert current_transaction_status().name == "outer"

    with pytest.raises(NoTransactionError):
        current_transaction_status()
