"""SQLAlchemy implementation of TenantAccountRepository

Balance changes are single conditional UPDATE ... RETURNING statements, so
two concurrent debits can never both pass the balance check.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy import update
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.domain.base import utcnow
from src.domain.tenant_account import TenantAccount


class SqlAlchemyTenantAccountRepository(TenantAccountRepository):
    """
    SQLAlchemy implementation of TenantAccountRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Guarded debit: UPDATE ... WHERE credits >= amount
    - Reads always refresh already-loaded instances
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenant_id: str, for_update: bool = False) -> Optional[TenantAccount]:
        """
        Retrieve tenant by ID with optional row-level locking

        Args:
            tenant_id: Tenant identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            TenantAccount if found, None otherwise
        """
        stmt = (
            select(TenantAccount)
            .where(TenantAccount.id == tenant_id)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_owner_uid(self, owner_uid: str) -> Optional[TenantAccount]:
        stmt = select(TenantAccount).where(TenantAccount.owner_uid == owner_uid)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, account: TenantAccount) -> TenantAccount:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def debit(self, tenant_id: str, amount: Decimal) -> Optional[Decimal]:
        """
        Subtract credits if and only if the balance covers them

        Args:
            tenant_id: Tenant identifier
            amount: Credits to subtract

        Returns:
            New balance, or None when no row satisfied the guard
        """
        table = TenantAccount.__table__
        stmt = (
            update(table)
            .where(table.c.id == tenant_id)
            .where(table.c.credits >= amount)
            .values(credits=table.c.credits - amount, updated_at=utcnow())
            .returning(table.c.credits)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def credit(self, tenant_id: str, amount: Decimal) -> Optional[Decimal]:
        table = TenantAccount.__table__
        stmt = (
            update(table)
            .where(table.c.id == tenant_id)
            .values(credits=table.c.credits + amount, updated_at=utcnow())
            .returning(table.c.credits)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_approved(self, tenant_id: str) -> bool:
        table = TenantAccount.__table__
        stmt = (
            update(table)
            .where(table.c.id == tenant_id)
            .where(table.c.approved == False)  # noqa: E712
            .values(approved=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_pending(self, limit: int = 20, offset: int = 0) -> Tuple[List[TenantAccount], int]:
        """
        Retrieve tenants awaiting approval with pagination

        Returns:
            Tuple of (list of TenantAccount, total count)
        """
        count_stmt = select(func.count()).select_from(TenantAccount).where(
            TenantAccount.approved == False  # noqa: E712
        )
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar()

        stmt = (
            select(TenantAccount)
            .where(TenantAccount.approved == False)  # noqa: E712
            .order_by(TenantAccount.created_at.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
