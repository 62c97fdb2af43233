"""SQLAlchemy implementation of JobRepository"""

from typing import List, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.job_repository import JobRepository
from src.domain.job import Job


class SqlAlchemyJobRepository(JobRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, job: Job) -> Job:
        self.session.add(job)
        await self.session.flush()
        await self.session.refresh(job)
        return job

    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[Job], int]:
        count_stmt = select(func.count()).select_from(Job).where(Job.tenant_id == tenant_id)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar()

        stmt = (
            select(Job)
            .where(Job.tenant_id == tenant_id)
            .order_by(Job.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
