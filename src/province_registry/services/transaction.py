"""
province_registry.services.transaction

Scoped transaction boundary for service operations.

Responsibilities:
- Commit the session's unit of work when the block completes normally.
- Roll back and re-raise on any exception.
- Roll back silently when the block was marked rollback-only.
- Expose the active block's status to code running inside it.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from province_registry.observability.logging import get_logger

log = get_logger(__name__)


class NoTransactionError(RuntimeError):
    """Raised when the transaction status is requested outside `transactional`."""


@dataclass(slots=True)
class TransactionStatus:
    name: str
    rollback_only: bool = False
    completed: bool = False

    def set_rollback_only(self) -> None:
        self.rollback_only = True


_current: ContextVar[TransactionStatus | None] = ContextVar(
    "province_registry_transaction", default=None
)


def current_transaction_status() -> TransactionStatus:
    status = _current.get()
    if status is None:
        raise NoTransactionError("no transaction is active in this context")
    return status


@asynccontextmanager
async def transactional(
    session: AsyncSession, *, name: str = "unit-of-work"
) -> AsyncIterator[TransactionStatus]:
    """
    Usage::

        async with transactional(session) as tx:
            ...
            tx.set_rollback_only()  # optional; discards writes, raises nothing

    Every `Exception` subclass triggers a rollback, not only database errors.
    """

    status = TransactionStatus(name=name)
    token = _current.set(status)
    try:
        yield status
    except Exception as exc:
        await session.rollback()
        log.warning("transaction.rolled_back", tx=name, reason="error", error=repr(exc))
        raise
    else:
        if status.rollback_only:
            await session.rollback()
            log.info("transaction.rolled_back", tx=name, reason="rollback_only")
        else:
            await session.commit()
            log.debug("transaction.committed", tx=name)
    finally:
        status.completed = True
        _current.reset(token)


# --- Module Notes -----------------------------------------------------------
# The unit of work is the session's current transaction; any writes flushed on
# the session before entering the block share its outcome.
# Cancellation (BaseException) is left to `AsyncSession.close`, which rolls back.
