"""Ledger Transaction Runner

Runs one ledger unit of work (reads, checks, writes) and commits it. A
database-level abort re-runs the whole unit from fresh reads, a bounded
number of times with exponential backoff. Business failures abort without
retrying.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar
from sqlalchemy.exc import DBAPIError, OperationalError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import LedgerError, TransactionConflict

logger = logging.getLogger(__name__)

T = TypeVar("T")

# serialization_failure, deadlock_detected
RETRYABLE_SQLSTATES = frozenset({"40001", "40P01"})


def is_transaction_abort(error: DBAPIError) -> bool:
    """
    Whether the database aborted the transaction and a re-run may succeed

    asyncpg surfaces serialization failures and deadlocks as a generic
    DBAPIError; only the SQLSTATE on the driver exception tells them apart.
    """
    if isinstance(error, OperationalError):
        return True
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    return sqlstate in RETRYABLE_SQLSTATES


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with exponential backoff for aborted transactions"""

    max_attempts: int = 3
    base_delay: float = 0.05
    max_delay: float = 1.0

    def delay_for(self, attempt: int) -> float:
        """
        Backoff before the next attempt

        Args:
            attempt: Number of attempts already made (>= 1)

        Returns:
            base_delay * 2^(attempt - 1), capped at max_delay
        """
        if self.base_delay <= 0 or self.max_delay <= 0:
            return 0.0
        return min(self.base_delay * (2 ** (attempt - 1)), self.max_delay)


async def run_ledger_transaction(
    uow: UnitOfWork,
    work: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
) -> T:
    """
    Execute work and commit it as one atomic unit

    Args:
        uow: Unit of work owning the transaction
        work: Zero-argument coroutine factory; called again on every attempt
        policy: Retry policy for database aborts

    Returns:
        Whatever work returned, after a successful commit

    Raises:
        LedgerError: Business rule failure (nothing written)
        TransactionConflict: Database kept aborting after max_attempts
        Exception: Anything else, after rollback
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            outcome = await work()
            await uow.commit()
            return outcome
        except LedgerError:
            await uow.rollback()
            raise
        except DBAPIError as e:
            await uow.rollback()
            if not is_transaction_abort(e):
                raise
            if attempt >= policy.max_attempts:
                logger.error(f"Ledger transaction aborted {attempt} times, giving up: {e}")
                raise TransactionConflict(attempts=attempt, reason=str(e)) from e
            delay = policy.delay_for(attempt)
            logger.warning(
                f"Ledger transaction aborted (attempt {attempt}/{policy.max_attempts}), "
                f"retrying in {delay:.3f}s: {e}"
            )
            await asyncio.sleep(delay)
        except Exception:
            await uow.rollback()
            raise
