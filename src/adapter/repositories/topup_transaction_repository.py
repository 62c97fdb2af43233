"""SQLAlchemy implementation of TopUpTransactionRepository

Idempotency enforcement via the primary key on the payment reference.
"""

from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.topup_transaction_repository import TopUpTransactionRepository
from src.domain.topup_transaction import TopUpTransaction


class SqlAlchemyTopUpTransactionRepository(TopUpTransactionRepository):
    """
    SQLAlchemy implementation of TopUpTransactionRepository

    Features:
    - Insert-if-absent keyed by payment reference
    - Immutable records
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_reference(self, reference: str) -> Optional[TopUpTransaction]:
        stmt = select(TopUpTransaction).where(TopUpTransaction.reference == reference)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, transaction: TopUpTransaction) -> TopUpTransaction:
        """
        Create a new top-up record

        Raises:
            IntegrityError: If the reference was already applied
        """
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_tenant_id(
        self, tenant_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[TopUpTransaction], int]:
        count_stmt = select(func.count()).select_from(TopUpTransaction).where(
            TopUpTransaction.tenant_id == tenant_id
        )
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar()

        stmt = (
            select(TopUpTransaction)
            .where(TopUpTransaction.tenant_id == tenant_id)
            .order_by(TopUpTransaction.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
