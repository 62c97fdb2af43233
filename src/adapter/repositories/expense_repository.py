"""SQLAlchemy implementation of ExpenseRepository"""

from typing import List, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.expense import Expense


class SqlAlchemyExpenseRepository(ExpenseRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, expense: Expense) -> Expense:
        self.session.add(expense)
        await self.session.flush()
        await self.session.refresh(expense)
        return expense

    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[Expense], int]:
        count_stmt = select(func.count()).select_from(Expense).where(Expense.tenant_id == tenant_id)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar()

        stmt = (
            select(Expense)
            .where(Expense.tenant_id == tenant_id)
            .order_by(Expense.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
