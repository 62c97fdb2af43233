"""SQLAlchemy implementation of ActivityLogRepository"""

from typing import List, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog


class SqlAlchemyActivityLogRepository(ActivityLogRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: ActivityLog) -> ActivityLog:
        self.session.add(entry)
        await self.session.flush()
        return entry

    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[ActivityLog], int]:
        count_stmt = select(func.count()).select_from(ActivityLog).where(ActivityLog.tenant_id == tenant_id)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar()

        stmt = (
            select(ActivityLog)
            .where(ActivityLog.tenant_id == tenant_id)
            .order_by(ActivityLog.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
